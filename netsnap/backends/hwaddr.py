"""Hardware (MAC) address lookup.

Each platform API gets one narrow adapter that returns either a validated
lowercase colon-hex string or None. Raw ``ifreq`` bytes and psutil link
entries never leave this module.
"""

from __future__ import annotations

import re
import socket
import struct
import sys

try:
    import fcntl
except ImportError:  # pragma: no cover - not available on Windows
    fcntl = None  # type: ignore[assignment]

from netsnap.utils.logger import get_logger

SIOCGIFHWADDR = 0x8927
IFNAMSIZ = 16
HWADDR_LEN = 6

# struct ifreq: ifr_name[IFNAMSIZ], then sockaddr ifr_hwaddr (sa_family u16, sa_data)
_IFREQ_SIZE = 256
_HWADDR_OFFSET = IFNAMSIZ + 2

_LINK_SEPARATORS = re.compile(r"[:-]")


def format_hardware_address(raw: bytes) -> str:
    """Format six raw octets as ``aa:bb:cc:dd:ee:ff``.

    Raises:
        ValueError: If raw is not exactly six bytes.
    """
    if len(raw) != HWADDR_LEN:
        raise ValueError(f"expected {HWADDR_LEN} octets, got {len(raw)}")
    return ":".join(f"{octet:02x}" for octet in raw)


def ioctl_hardware_address(name: str) -> str | None:
    """Ask the kernel for an interface's hardware address (Linux).

    A throwaway datagram socket serves only as the ioctl handle and is
    closed before returning, whether or not the query succeeds.

    Args:
        name: Interface name; truncated to IFNAMSIZ - 1 bytes.

    Returns
    -------
        Colon-hex MAC address, or None when the query fails.
    """
    if fcntl is None:
        return None

    request = struct.pack(f"{_IFREQ_SIZE}s", name.encode()[: IFNAMSIZ - 1])
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            reply = fcntl.ioctl(sock.fileno(), SIOCGIFHWADDR, request)
    except OSError as e:
        get_logger("backends.hwaddr").debug(f"SIOCGIFHWADDR failed for {name}: {e}")
        return None

    return format_hardware_address(reply[_HWADDR_OFFSET : _HWADDR_OFFSET + HWADDR_LEN])


def normalize_link_address(address: str | None) -> str | None:
    """Normalise a link-layer address string as reported by psutil.

    Accepts ``AA-BB-CC-DD-EE-FF`` (Windows) and ``aa:bb:cc:dd:ee:ff`` forms.

    Returns
    -------
        Colon-hex MAC address, or None if address is not six hex octets.
    """
    if not address:
        return None

    octets = _LINK_SEPARATORS.split(address.strip())
    if len(octets) != HWADDR_LEN:
        return None

    try:
        raw = bytes(int(octet, 16) for octet in octets)
    except ValueError:
        return None

    return format_hardware_address(raw)


def lookup_hardware_address(name: str, link_address: str | None = None) -> str | None:
    """Resolve an interface's hardware address with the platform's API.

    Linux uses SIOCGIFHWADDR; elsewhere the link-layer entry already present
    in the interface snapshot is used.

    Args:
        name: Interface name.
        link_address: psutil AF_LINK address for the interface, if any.
    """
    if sys.platform.startswith("linux"):
        return ioctl_hardware_address(name)
    return normalize_link_address(link_address)
