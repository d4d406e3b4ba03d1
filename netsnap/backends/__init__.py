"""Netsnap backends - interface enumeration and reachability probing."""

from netsnap.backends.network import Network, enumerate_interfaces
from netsnap.backends.reachability import ReachabilityProber, check_internet

__all__ = [
    "Network",
    "ReachabilityProber",
    "check_internet",
    "enumerate_interfaces",
]
