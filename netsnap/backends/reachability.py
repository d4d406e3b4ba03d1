"""Reachability backend - a single bounded TCP connect to a well-known host."""

from __future__ import annotations

import errno
import ipaddress
import selectors
import socket
import time

from netsnap.models.constants import DEFAULT_PROBE_TIMEOUT_SECONDS, Reachability
from netsnap.models.network_models import ProbeTarget
from netsnap.utils.logger import get_logger

# connect_ex results meaning "started, not finished yet"
_IN_PROGRESS = frozenset(
    {
        0,
        errno.EINPROGRESS,
        errno.EWOULDBLOCK,
        errno.EALREADY,
        getattr(errno, "WSAEWOULDBLOCK", errno.EWOULDBLOCK),
    }
)


class ReachabilityProber:
    """Probe outbound internet reachability with one non-blocking connect.

    No payload is exchanged; a completed TCP handshake to the target is the
    whole signal. There is no retry.
    """

    def __init__(self, target: ProbeTarget | None = None) -> None:
        """Initialize the prober.

        Args:
            target: Endpoint to connect to. Defaults to 8.8.8.8:53.
        """
        self.target = target or ProbeTarget()
        self._log = get_logger("backends.reachability")

    def probe(
        self, timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS
    ) -> Reachability:
        """Attempt a connection, waiting at most timeout_seconds for it.

        Args:
            timeout_seconds: Upper bound on the wait for the connect.

        Returns
        -------
            REACHABLE if the handshake completed, UNREACHABLE on refusal,
            error or timeout, INDETERMINATE if the socket or endpoint could
            not be set up.

        Raises
        ------
            ValueError: If timeout_seconds is not positive.
        """
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be greater than 0")

        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as e:
            self._log.error(f"Socket creation failed: {e}")
            return Reachability.INDETERMINATE

        start = time.monotonic()
        with sock:
            try:
                endpoint = self._endpoint()
            except ValueError as e:
                self._log.error(f"Invalid probe address: {e}")
                return Reachability.INDETERMINATE

            result = self._connect(sock, endpoint, timeout_seconds)

        elapsed = time.monotonic() - start
        self._log.debug(
            f"Probe {self.target.host}:{self.target.port} -> {result} "
            f"({elapsed:.3f}s)"
        )
        return result

    def _endpoint(self) -> tuple[str, int]:
        """Build the IPv4 (host, port) pair for connect.

        Raises:
            ValueError: If the host is not an IPv4 address.
        """
        host = ipaddress.IPv4Address(self.target.host)
        return str(host), self.target.port

    def _connect(
        self, sock: socket.socket, endpoint: tuple[str, int], timeout_seconds: float
    ) -> Reachability:
        sock.setblocking(False)

        code = sock.connect_ex(endpoint)
        if code not in _IN_PROGRESS:
            reason = errno.errorcode.get(code, code)
            self._log.debug(f"Connect failed immediately: {reason}")
            return Reachability.UNREACHABLE

        try:
            with selectors.DefaultSelector() as selector:
                selector.register(sock, selectors.EVENT_WRITE)
                ready = selector.select(timeout_seconds)
        except (OSError, ValueError) as e:
            self._log.debug(f"Waiting for connect failed: {e}")
            return Reachability.UNREACHABLE

        if not ready:
            self._log.debug(f"Connect timed out after {timeout_seconds}s")
            return Reachability.UNREACHABLE

        pending = sock.getsockopt(socket.SOL_SOCKET, socket.SO_ERROR)
        if pending != 0:
            reason = errno.errorcode.get(pending, pending)
            self._log.debug(f"Connect failed: {reason}")
            return Reachability.UNREACHABLE

        return Reachability.REACHABLE


def check_internet(
    timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
    target: ProbeTarget | None = None,
) -> Reachability:
    """Run a single reachability probe against target."""
    return ReachabilityProber(target).probe(timeout_seconds)
