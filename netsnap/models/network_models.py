"""Pydantic models for interface snapshots and reachability reports."""

from __future__ import annotations

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from netsnap.models.constants import (
    DEFAULT_PROBE_HOST,
    DEFAULT_PROBE_PORT,
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    DEFAULT_REPORT_DEADLINE_SECONDS,
    Reachability,
)

_MAC_PATTERN = re.compile(r"^[0-9a-f]{2}(:[0-9a-f]{2}){5}$")


class InterfaceRecord(BaseModel):
    """A qualifying, non-loopback interface with an IPv4 and a MAC address."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Interface name (e.g., 'eth0', 'en0')")
    ipv4: str = Field(..., description="First IPv4 address, dotted-decimal")
    hardware_address: str = Field(
        ..., description="MAC address, lowercase colon-separated hex"
    )

    @field_validator("hardware_address")
    @classmethod
    def check_hardware_address(cls, value: str) -> str:
        if not _MAC_PATTERN.match(value):
            raise ValueError(f"not a colon-hex hardware address: {value!r}")
        return value


class ProbeTarget(BaseModel):
    """Endpoint the reachability probe connects to.

    The host is validated when the probe builds its endpoint, so a bad
    host surfaces as an indeterminate result rather than a crash.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(DEFAULT_PROBE_HOST, description="IPv4 address to connect to")
    port: int = Field(DEFAULT_PROBE_PORT, ge=1, le=65535, description="TCP port")


class ReportConfig(BaseModel):
    """Fixed settings for one report cycle."""

    model_config = ConfigDict(frozen=True)

    target: ProbeTarget = Field(default_factory=ProbeTarget)
    probe_timeout_seconds: float = Field(
        DEFAULT_PROBE_TIMEOUT_SECONDS,
        gt=0,
        description="Bounded wait for the probe's connect to complete",
    )
    deadline_seconds: float = Field(
        DEFAULT_REPORT_DEADLINE_SECONDS,
        gt=0,
        description="How long the report waits for the probe result",
    )


class NetworkSnapshot(BaseModel):
    """Interfaces and reachability captured at one point in time."""

    model_config = ConfigDict(frozen=True)

    hostname: str = Field(..., description="System hostname")
    captured_at: datetime = Field(..., description="When enumeration finished")
    interfaces: list[InterfaceRecord] = Field(
        default_factory=list, description="Qualifying interfaces in OS order"
    )
    reachability: Reachability = Field(..., description="Probe outcome")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def internet_available(self) -> bool:
        """Collapse the tri-state probe outcome to a boolean."""
        return self.reachability == Reachability.REACHABLE
