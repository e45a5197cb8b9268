# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : logging.py
#   file_relpath : src/canonrepr/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""Custom CanonRepr logging with TRACE logging.

This module extends the standard logging module with CanonRepr-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.

Log records go to ``stderr`` so that rendered values written to ``stdout`` stay
machine-consumable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

# Define TRACE_LEVEL as a module-level constant
TRACE_LEVEL: Final[int] = logging.DEBUG - 5

ENV_LOG_LEVEL: Final[str] = "CANONREPR_LOG_LEVEL"


class CanonreprLogger(logging.Logger):
    """Custom logger class for CanonRepr with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    # Expose TRACE_LEVEL as logging.TRACE
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(CanonreprLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        # Fallback color for unknown or lower-than-TRACE levels
        return chalk.dim.red(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def parse_log_level(value: str | None) -> int | None:
    """Parse a level name (``"TRACE"``, ``"debug"``) or a numeric string.

    Args:
        value (str | None): The raw level text.

    Returns:
        int | None: The numeric level, or ``None`` if unset or unrecognized.
    """
    if not value:
        return None
    v: str = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors CANONREPR_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    return parse_log_level(os.environ.get(ENV_LOG_LEVEL))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, environment variables are consulted via
    [`resolve_env_log_level`][canonrepr.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    # Use detailed logging format below INFO
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> CanonreprLogger:
    """Retrieve a CanonreprLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        CanonreprLogger: A CanonreprLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("CanonreprLogger", logger)
