"""Centralized logging for netsnap.

Usage:
    from netsnap.utils.logger import Logger

    # Configure once at startup
    Logger.configure(level="INFO", color=True)

    # Get a logger anywhere in the codebase
    log = Logger.get("backends.network")
    log.info("Enumerating interfaces...")

Backend modules that may be used without the CLI call ``get_logger``,
which falls back to a quiet WARNING-on-stderr configuration.
"""

import logging
import sys
from enum import Enum
from pathlib import Path

import click


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() at application startup."
        )


class ColorFormatter(logging.Formatter):
    """Tagged, coloured, timestamped lines.

    Renders ``2025-01-01 12:00:00 [WARN] network.py:42 [enumerate] message``
    with the whole line coloured by level.
    """

    TAGS = {
        logging.DEBUG: ("DBUG", "blue"),
        logging.INFO: ("INFO", "white"),
        logging.WARNING: ("WARN", "yellow"),
        logging.ERROR: ("ERRO", "red"),
        logging.CRITICAL: ("CRIT", "magenta"),
    }

    def __init__(self) -> None:
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        tag, color = self.TAGS.get(record.levelno, (record.levelname[:4], "white"))
        line = (
            f"{self.formatTime(record, self.datefmt)} [{tag}] "
            f"{record.filename}:{record.lineno} [{record.funcName}] "
            f"{record.getMessage()}"
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return click.style(line, fg=color)


class Logger:
    """Configure-once facade over the ``netsnap`` logger hierarchy.

    Attempting to get a logger before configuration raises
    LoggerNotConfiguredError.
    """

    _configured: bool = False
    _root_name: str = "netsnap"

    @classmethod
    def configure(
        cls,
        level: str | LogLevel = "WARNING",
        output: str | Path | None = None,
        color: bool = False,
    ) -> None:
        """Configure the logger, replacing any earlier handler.

        Args:
            level: "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL" or a
                LogLevel value.
            output: None for stderr (keeps the stdout report clean), or a
                file path to append to.
            color: Use the tagged colour line format. Files always get the
                plain format.
        """
        if isinstance(level, str):
            level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler: logging.Handler
        formatter: logging.Formatter
        if output is None:
            new_handler = logging.StreamHandler(sys.stderr)
            formatter = ColorFormatter() if color else cls._plain_formatter()
        else:
            new_handler = logging.FileHandler(str(output))
            formatter = cls._plain_formatter()

        new_handler.setLevel(level.to_logging_level())
        new_handler.setFormatter(formatter)
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @staticmethod
    def _plain_formatter() -> logging.Formatter:
        return logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name (appended to "netsnap."). If None, returns root logger.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured


def get_logger(name: str) -> logging.Logger:
    """Return a netsnap logger, configuring a quiet default if needed."""
    if not Logger.is_configured():
        Logger.configure(level="WARNING")
    return Logger.get(name)
