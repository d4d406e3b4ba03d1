"""Netsnap utilities - logging helpers."""

from netsnap.utils.logger import (
    ColorFormatter,
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
    get_logger,
)

__all__ = [
    "ColorFormatter",
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
    "get_logger",
]
