"""Pydantic models for structured output."""

from netsnap.models.constants import Reachability
from netsnap.models.network_models import (
    InterfaceRecord,
    NetworkSnapshot,
    ProbeTarget,
    ReportConfig,
)

__all__ = [
    "InterfaceRecord",
    "NetworkSnapshot",
    "ProbeTarget",
    "Reachability",
    "ReportConfig",
]
