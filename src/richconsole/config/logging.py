# topmark:header:start
#
#   project      : RichConsole
#   file         : logging.py
#   file_relpath : src/richconsole/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RichConsole logging with a TRACE level.

The standard library logger is extended with:

- a ``TRACE`` level below ``DEBUG``, used by the markup scanner and renderer
  for per-token diagnostics;
- `RichConsoleLogger`, whose ``trace()`` method logs at that level;
- `ChalkFormatter`, which colors records by severity with yachalk.

Log records always go to stderr. Program output (rendered markup, command
results) never goes through logging.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

from richconsole.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class RichConsoleLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message format.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(RichConsoleLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

LEVEL_NAMES: Final[dict[str, int]] = {
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

# Lowest level of each band and its color, most severe first.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity.

    Args:
        fmt (str): Record format string.
        use_color (bool): When False, records are formatted without color.
    """

    def __init__(self, fmt: str, *, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it for its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The formatted (and possibly colored) message.
        """
        message: str = super().format(record)
        if not self.use_color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def parse_log_level(value: str) -> int | None:
    """Parse a level name (``"TRACE"``, ``"debug"``) or number (``"10"``).

    Returns:
        int | None: The numeric level, or None if ``value`` is not recognized.
    """
    name: str = value.strip().upper()
    if name.isdigit():
        return int(name)
    return LEVEL_NAMES.get(name)


def resolve_env_log_level() -> int | None:
    """Return the level requested by ``RICHCONSOLE_LOG_LEVEL``, or None if unset or invalid."""
    value: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    return parse_log_level(value) if value else None


def _stderr_supports_color() -> bool:
    try:
        return sys.stderr.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def setup_logging(level: int | None = None, *, use_color: bool | None = None) -> None:
    """Configure the root logger to write to stderr.

    Args:
        level (int | None): Log level. None consults `resolve_env_log_level`
            and falls back to CRITICAL, so a plain run logs nothing.
        use_color (bool | None): Color the records; None colors only when
            stderr is a terminal.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL
    if use_color is None:
        use_color = _stderr_supports_color()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    fmt: str = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt, use_color=use_color))
    root_logger.addHandler(handler)


def get_logger(name: str) -> RichConsoleLogger:
    """Return the `RichConsoleLogger` called ``name``.

    Args:
        name (str): Logger name, usually ``__name__``.

    Returns:
        RichConsoleLogger: The logger.
    """
    return cast("RichConsoleLogger", logging.getLogger(name))
