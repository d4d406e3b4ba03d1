"""Netsnap - one-shot snapshot of network interfaces and internet reachability."""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
