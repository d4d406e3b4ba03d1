#!/usr/bin/env python3
"""Netsnap CLI - Command-line interface for Netsnap."""

import sys

import click

from netsnap import __version__
from netsnap.commands.report_cmd import run_interfaces, run_probe, run_report
from netsnap.models.constants import DEFAULT_PROBE_TIMEOUT_SECONDS
from netsnap.utils.logger import Logger, LogLevel

LOG_LEVEL_VAR = "NETSNAP_LOG_LEVEL"
LOG_COLOR_VAR = "NETSNAP_LOG_COLOR"


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in LogLevel], case_sensitive=False),
    default=LogLevel.WARNING.value,
    envvar=LOG_LEVEL_VAR,
    show_envvar=True,
    help="Diagnostic log level",
)
@click.option(
    "--color/--no-color",
    default=False,
    envvar=LOG_COLOR_VAR,
    show_envvar=True,
    help="Tagged, coloured diagnostic lines on stderr",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Append diagnostics to this file instead of stderr",
)
@click.pass_context
def netsnap(ctx, log_level, color, log_file):
    """Snapshot network interfaces and internet reachability."""
    Logger.configure(level=log_level, output=log_file, color=color)

    # Bare `netsnap` behaves like `netsnap report`
    if ctx.invoked_subcommand is None:
        sys.exit(run_report())


@netsnap.command()
@click.option("--json", "as_json", is_flag=True, help="Print the snapshot as JSON")
def report(as_json):
    """Show interfaces, then whether the internet is reachable."""
    sys.exit(run_report(as_json=as_json))


@netsnap.command()
@click.option("--json", "as_json", is_flag=True, help="Print interfaces as JSON")
def interfaces(as_json):
    """List non-loopback interfaces with an IPv4 and a MAC address."""
    sys.exit(run_interfaces(as_json=as_json))


@netsnap.command()
@click.option(
    "--timeout",
    "-t",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_PROBE_TIMEOUT_SECONDS,
    show_default=True,
    help="Seconds to wait for the connection",
)
def probe(timeout):
    """Check internet reachability with a single TCP connect."""
    sys.exit(run_probe(timeout_seconds=timeout))


@netsnap.command()
def version():
    """Display netsnap version information."""
    print(f"netsnap {__version__}")


if __name__ == "__main__":
    netsnap()
