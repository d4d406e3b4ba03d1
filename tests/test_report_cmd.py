"""Tests for report rendering."""

import json

import pytest

from netsnap import coordinator as coordinator_module
from netsnap.commands import report_cmd
from netsnap.commands.report_cmd import (
    format_interfaces,
    format_reachability,
    run_interfaces,
    run_probe,
    run_report,
)
from netsnap.models.constants import Reachability
from netsnap.models.network_models import InterfaceRecord

RECORDS = [
    InterfaceRecord(
        name="eth0", ipv4="192.168.1.10", hardware_address="00:1a:2b:3c:4d:5e"
    ),
    InterfaceRecord(
        name="wlan0", ipv4="10.0.0.7", hardware_address="a4:5e:60:01:02:03"
    ),
]


class FakeNetwork:
    def enumerate(self):
        return list(RECORDS)


def _fake_prober(result):
    class FakeProber:
        def __init__(self, target=None):
            self.target = target

        def probe(self, timeout_seconds=2):
            return result

    return FakeProber


@pytest.fixture
def fake_backends(monkeypatch):
    """Point the coordinator and commands at canned backends."""

    def install(result=Reachability.REACHABLE):
        prober = _fake_prober(result)
        monkeypatch.setattr(coordinator_module, "Network", FakeNetwork)
        monkeypatch.setattr(coordinator_module, "ReachabilityProber", prober)
        monkeypatch.setattr(report_cmd, "enumerate_interfaces", lambda: list(RECORDS))
        monkeypatch.setattr(
            report_cmd, "check_internet", lambda timeout_seconds, target=None: result
        )

    return install


def test_format_interfaces():
    """Each interface is a labeled block closed by a separator."""
    assert format_interfaces(RECORDS) == (
        "Network Interfaces:\n"
        "Interface: eth0\n"
        "  IPv4:    192.168.1.10\n"
        "  MAC:     00:1a:2b:3c:4d:5e\n"
        "  --------\n"
        "Interface: wlan0\n"
        "  IPv4:    10.0.0.7\n"
        "  MAC:     a4:5e:60:01:02:03\n"
        "  --------"
    )


def test_format_interfaces_empty():
    """No interfaces still prints the header."""
    assert format_interfaces([]) == "Network Interfaces:"


@pytest.mark.parametrize(
    ("result", "expected"),
    [
        (Reachability.REACHABLE, "Internet Access: Available"),
        (Reachability.UNREACHABLE, "Internet Access: Unavailable"),
        (Reachability.INDETERMINATE, "Internet Access: Unavailable"),
    ],
)
def test_format_reachability(result, expected):
    """The tri-state result collapses to Available/Unavailable."""
    assert format_reachability(result) == expected


def test_run_report_text(fake_backends, capsys):
    """The text report lists interfaces, then the reachability line."""
    fake_backends(Reachability.REACHABLE)

    assert run_report() == 0

    out = capsys.readouterr().out
    assert out.startswith("Network Interfaces:\nInterface: eth0\n")
    assert out.index("wlan0") < out.index("Internet Access")
    assert out.endswith("  --------\n\nInternet Access: Available\n")


def test_run_report_unavailable_exits_zero(fake_backends, capsys):
    """No connectivity is data, the exit status stays 0."""
    fake_backends(Reachability.INDETERMINATE)

    assert run_report() == 0
    assert "Internet Access: Unavailable" in capsys.readouterr().out


def test_run_report_json(fake_backends, capsys):
    """JSON output carries both the tri-state and the boolean."""
    fake_backends(Reachability.UNREACHABLE)

    assert run_report(as_json=True) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["reachability"] == "unreachable"
    assert data["internet_available"] is False
    assert [i["name"] for i in data["interfaces"]] == ["eth0", "wlan0"]
    assert data["interfaces"][0]["hardware_address"] == "00:1a:2b:3c:4d:5e"
    assert "captured_at" in data
    assert "hostname" in data


def test_run_interfaces_json(fake_backends, capsys):
    """Interfaces alone can be exported as a JSON list."""
    fake_backends()

    assert run_interfaces(as_json=True) == 0

    data = json.loads(capsys.readouterr().out)
    assert data[1] == {
        "name": "wlan0",
        "ipv4": "10.0.0.7",
        "hardware_address": "a4:5e:60:01:02:03",
    }


def test_run_probe(fake_backends, capsys):
    """The probe command shows the raw outcome and the collapsed line."""
    fake_backends(Reachability.INDETERMINATE)

    assert run_probe(timeout_seconds=1) == 0

    out = capsys.readouterr().out
    assert "indeterminate" in out
    assert "Internet Access: Unavailable" in out


def test_run_probe_passes_timeout(monkeypatch, capsys):
    """The probe command hands its timeout to the reachability check."""
    seen = []

    def fake_check(timeout_seconds, target=None):
        seen.append(timeout_seconds)
        return Reachability.REACHABLE

    monkeypatch.setattr(report_cmd, "check_internet", fake_check)

    assert run_probe(timeout_seconds=0.5) == 0
    assert seen == [0.5]
    assert "Internet Access: Available" in capsys.readouterr().out
