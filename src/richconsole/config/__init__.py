# topmark:header:start
#
#   project      : RichConsole
#   file         : __init__.py
#   file_relpath : src/richconsole/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration, color-mode and logging setup for RichConsole."""

from __future__ import annotations

from richconsole.config.color import ColorMode, resolve_color_mode
from richconsole.config.model import ConfigError, ConsoleConfig, MutableConsoleConfig

__all__ = [
    "ColorMode",
    "ConfigError",
    "ConsoleConfig",
    "MutableConsoleConfig",
    "resolve_color_mode",
]
