"""Network backend - enumerates active interfaces using psutil and socket."""

from __future__ import annotations

import ipaddress
import socket
from collections.abc import Iterable
from typing import Any

import psutil

from netsnap.backends.hwaddr import lookup_hardware_address
from netsnap.models.network_models import InterfaceRecord
from netsnap.utils.logger import get_logger


class Network:
    """Interface enumerator backed by psutil.

    Every call to ``enumerate`` takes a fresh snapshot; nothing is cached
    between calls.
    """

    def __init__(self) -> None:
        """Initialize the enumerator."""
        self._log = get_logger("backends.network")

    def enumerate(self) -> list[InterfaceRecord]:
        """Return the qualifying interfaces in OS enumeration order.

        An interface qualifies when it is not loopback and has both an IPv4
        address and a hardware address. Failure to obtain the interface list
        is logged and yields an empty list.

        Returns
        -------
            List of InterfaceRecord objects.
        """
        try:
            addrs = psutil.net_if_addrs()
        except (OSError, psutil.Error) as e:
            self._log.error(f"Failed to query network interfaces: {e}")
            return []

        stats = self._interface_stats()

        records = []
        for name, interface_addrs in addrs.items():
            if self._is_loopback(stats.get(name), interface_addrs):
                continue

            ipv4 = self._first_ipv4(interface_addrs)
            if ipv4 is None:
                continue

            mac = lookup_hardware_address(name, self._link_address(interface_addrs))
            if not mac:
                self._log.debug(f"Skipping {name}: no hardware address")
                continue

            records.append(InterfaceRecord(name=name, ipv4=ipv4, hardware_address=mac))

        return records

    def _interface_stats(self) -> dict[str, Any]:
        """Get per-interface stats, or an empty mapping if unavailable."""
        try:
            return psutil.net_if_stats()
        except (OSError, psutil.Error) as e:
            self._log.warning(f"Interface flags unavailable: {e}")
            return {}

    @staticmethod
    def _is_loopback(if_stats: Any, interface_addrs: Iterable[Any]) -> bool:
        """Check the interface's loopback flag.

        psutil reports flags on UNIX only; elsewhere an interface counts as
        loopback when it carries a loopback IPv4 address.
        """
        flags = getattr(if_stats, "flags", "") if if_stats else ""
        if flags:
            return "loopback" in flags.split(",")

        for addr in interface_addrs:
            if addr.family == socket.AF_INET and addr.address:
                try:
                    if ipaddress.IPv4Address(addr.address).is_loopback:
                        return True
                except ValueError:
                    continue
        return False

    @staticmethod
    def _first_ipv4(interface_addrs: Iterable[Any]) -> str | None:
        """Return the first IPv4 address bound to an interface."""
        for addr in interface_addrs:
            if addr.family != socket.AF_INET or not addr.address:
                continue
            try:
                return str(ipaddress.IPv4Address(addr.address))
            except ValueError:
                continue
        return None

    @staticmethod
    def _link_address(interface_addrs: Iterable[Any]) -> str | None:
        """Return the link-layer address psutil reports, if any."""
        for addr in interface_addrs:
            if addr.family == psutil.AF_LINK and addr.address:
                return str(addr.address)
        return None


def enumerate_interfaces() -> list[InterfaceRecord]:
    """Take a one-shot snapshot of the qualifying interfaces."""
    return Network().enumerate()
