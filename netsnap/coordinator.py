"""Report coordinator - joins interface enumeration and the reachability probe."""

from __future__ import annotations

import queue
import socket
import threading
from collections.abc import Callable
from datetime import datetime

from netsnap.backends.network import Network
from netsnap.backends.reachability import ReachabilityProber
from netsnap.models.constants import DEFAULT_REACHABILITY, Reachability
from netsnap.models.network_models import InterfaceRecord, NetworkSnapshot, ReportConfig
from netsnap.utils.logger import get_logger

InterfacesListener = Callable[[list[InterfaceRecord]], None]
ResultSlot = queue.Queue  # single-slot channel carrying one Reachability


class ReportCoordinator:
    """Run the probe in the background while interfaces are enumerated.

    The probe thread is never joined. The coordinator only owns the receiving
    end of a one-slot queue and waits on it for at most the configured
    deadline; a result that arrives later is dropped with the queue.
    """

    def __init__(
        self,
        config: ReportConfig | None = None,
        enumerator: Network | None = None,
        prober: ReachabilityProber | None = None,
    ):
        """Create a coordinator.

        Args:
            config: Probe target, probe timeout and report deadline.
            enumerator: Interface enumerator. Defaults to Network().
            prober: Reachability prober. Defaults to one aimed at config.target.
        """
        self.config = config or ReportConfig()
        self.enumerator = enumerator or Network()
        self.prober = prober or ReachabilityProber(self.config.target)
        self._log = get_logger("coordinator")

    def start_probe(self) -> ResultSlot:
        """Launch the probe on a daemon thread and return its result slot."""
        slot: ResultSlot = queue.Queue(maxsize=1)
        thread = threading.Thread(
            target=self._probe_into,
            args=(slot,),
            name="reachability-probe",
            daemon=True,
        )
        thread.start()
        return slot

    def _probe_into(self, slot: ResultSlot) -> None:
        try:
            result = self.prober.probe(self.config.probe_timeout_seconds)
        except Exception:
            self._log.exception("Reachability probe crashed")
            result = Reachability.INDETERMINATE
        slot.put_nowait(result)

    def collect(self, slot: ResultSlot) -> Reachability:
        """Wait up to the deadline for the probe result.

        Returns
        -------
            The probe result, or the unreachable default if the deadline
            passes first.
        """
        try:
            result: Reachability = slot.get(timeout=self.config.deadline_seconds)
        except queue.Empty:
            self._log.info(
                f"No probe result within {self.config.deadline_seconds}s, "
                f"assuming {DEFAULT_REACHABILITY}"
            )
            return DEFAULT_REACHABILITY
        return result

    def run(self, on_interfaces: InterfacesListener | None = None) -> NetworkSnapshot:
        """Produce one snapshot.

        Args:
            on_interfaces: Called with the enumerated records as soon as they
                are available, before waiting on the probe.

        Returns
        -------
            NetworkSnapshot combining both halves.
        """
        slot = self.start_probe()

        interfaces = self.enumerator.enumerate()
        captured_at = datetime.now()
        self._log.debug(f"Enumerated {len(interfaces)} interface(s)")
        if on_interfaces:
            on_interfaces(interfaces)

        reachability = self.collect(slot)

        return NetworkSnapshot(
            hostname=socket.gethostname(),
            captured_at=captured_at,
            interfaces=interfaces,
            reachability=reachability,
        )
