"""Constants for netsnap models and commands."""

import sys
from enum import auto

if sys.version_info >= (3, 11):  # noqa: UP036
    from enum import StrEnum
else:
    from backports.strenum import StrEnum  # noqa: UP035


class Reachability(StrEnum):
    """Outcome of a single reachability probe."""

    REACHABLE = auto()
    UNREACHABLE = auto()
    # The probe itself could not be set up (socket or endpoint failure)
    INDETERMINATE = auto()


# Probe target. Port 53 is used for its reachability, no DNS exchange happens.
DEFAULT_PROBE_HOST = "8.8.8.8"
DEFAULT_PROBE_PORT = 53

# Timing defaults (in seconds)
DEFAULT_PROBE_TIMEOUT_SECONDS = 2  # Bounded wait for the connect to complete
DEFAULT_REPORT_DEADLINE_SECONDS = 2  # How long the report waits for the probe

# Value the report falls back to when the probe misses the deadline
DEFAULT_REACHABILITY = Reachability.UNREACHABLE

# Console rendering
REPORT_HEADER = "Network Interfaces:"
RECORD_SEPARATOR = "  --------"
INTERNET_AVAILABLE = "Available"
INTERNET_UNAVAILABLE = "Unavailable"
