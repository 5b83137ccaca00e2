# topmark:header:start
#
#   project      : RichConsole
#   file         : keys.py
#   file_relpath : src/richconsole/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML key names for RichConsole configuration."""

from __future__ import annotations

from typing import Final


class Toml:
    """Keys of the ``[richconsole]`` / ``[tool.richconsole]`` table."""

    KEY_COLOR: Final[str] = "color"
    KEY_WIDTH: Final[str] = "width"
    KEY_ENCODING: Final[str] = "encoding"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_COLOR, KEY_WIDTH, KEY_ENCODING})
