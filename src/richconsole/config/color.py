# topmark:header:start
#
#   project      : RichConsole
#   file         : color.py
#   file_relpath : src/richconsole/config/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide whether a sink emits ANSI escape sequences.

The decision is made once, when a sink is created for a stream:

1. an explicit ``always`` / ``never`` mode (CLI flag or config file) wins;
2. otherwise the conventional environment variables are honored:
   ``FORCE_COLOR`` (any value but ``"0"``) turns color on and
   ``NO_COLOR`` (any value, even empty) turns it off;
3. otherwise color follows whether the stream is a terminal.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING

from richconsole.config.logging import get_logger

if TYPE_CHECKING:
    from typing import TextIO

    from richconsole.config.logging import RichConsoleLogger


logger: RichConsoleLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """When a sink should emit escape sequences (``auto`` follows the terminal)."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def stream_isatty(stream: TextIO) -> bool:
    """Return True if ``stream`` is attached to a terminal.

    Closed, detached or file-less streams count as "not a terminal".
    """
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        return False


def color_from_environment() -> bool | None:
    """Return the color preference expressed by the environment, if any."""
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        logger.debug("FORCE_COLOR=%s enables color", force_color)
        return True
    if os.getenv("NO_COLOR") is not None:
        logger.debug("NO_COLOR disables color")
        return False
    return None


def resolve_color_mode(mode: ColorMode | None, stream: TextIO) -> bool:
    """Return True if runs written to ``stream`` should carry escape sequences.

    Args:
        mode (ColorMode | None): Requested mode; None behaves like ``AUTO``.
        stream (TextIO): The stream the sink writes to.

    Returns:
        bool: Whether color is enabled.
    """
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    preference: bool | None = color_from_environment()
    if preference is not None:
        return preference
    return stream_isatty(stream)
