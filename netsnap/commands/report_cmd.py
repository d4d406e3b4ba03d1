"""Report commands - render interface snapshots and reachability."""

from __future__ import annotations

import json

from netsnap.backends.network import enumerate_interfaces
from netsnap.backends.reachability import check_internet
from netsnap.coordinator import ReportCoordinator
from netsnap.models.constants import (
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    INTERNET_AVAILABLE,
    INTERNET_UNAVAILABLE,
    RECORD_SEPARATOR,
    REPORT_HEADER,
    Reachability,
)
from netsnap.models.network_models import InterfaceRecord, ReportConfig


def format_interfaces(records: list[InterfaceRecord]) -> str:
    """Render the header and one labeled block per interface."""
    lines = [REPORT_HEADER]
    for record in records:
        lines.append(f"Interface: {record.name}")
        lines.append(f"  IPv4:    {record.ipv4}")
        lines.append(f"  MAC:     {record.hardware_address}")
        lines.append(RECORD_SEPARATOR)
    return "\n".join(lines)


def format_reachability(reachability: Reachability) -> str:
    """Render the trailing line; only REACHABLE counts as available."""
    available = reachability == Reachability.REACHABLE
    status = INTERNET_AVAILABLE if available else INTERNET_UNAVAILABLE
    return f"Internet Access: {status}"


def print_interfaces(records: list[InterfaceRecord]) -> None:
    """Print interface blocks as soon as enumeration finishes."""
    print(format_interfaces(records), flush=True)


def run_report(as_json: bool = False, config: ReportConfig | None = None) -> int:
    """Display interfaces and internet reachability.

    Interfaces are printed first; the reachability line follows once the
    probe answers or the deadline passes. Always returns exit status 0.

    Args:
        as_json: Print one JSON document at the end instead of text.
        config: Report settings, defaults to the fixed probe constants.
    """
    coordinator = ReportCoordinator(config)

    if as_json:
        snapshot = coordinator.run()
        print(snapshot.model_dump_json(indent=2))
        return 0

    snapshot = coordinator.run(on_interfaces=print_interfaces)
    print(f"\n{format_reachability(snapshot.reachability)}")
    return 0


def run_interfaces(as_json: bool = False) -> int:
    """Display qualifying interfaces only."""
    records = enumerate_interfaces()

    if as_json:
        print(json.dumps([record.model_dump() for record in records], indent=2))
    else:
        print_interfaces(records)
    return 0


def run_probe(timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS) -> int:
    """Run the reachability probe alone and show its tri-state outcome."""
    result = check_internet(timeout_seconds)
    print(f"Reachability:    {result}")
    print(format_reachability(result))
    return 0
