# topmark:header:start
#
#   project      : RichConsole
#   file         : __init__.py
#   file_relpath : src/richconsole/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RichConsole package.

RichConsole writes text to the terminal with 24-bit foreground and
background colors and text effects (italics, underline, strikethrough,
all caps, alignment, ...), either through direct calls or through a small
inline markup language::

    "[white b:gray allcaps]The Uncoded One[/] has arrived."
"""

from __future__ import annotations

from richconsole.console import RichConsole
from richconsole.core.color import Color
from richconsole.core.effects import TextEffects
from richconsole.core.palette import NAMED_COLORS, Colors, named_color
from richconsole.markup.renderer import render_markup, render_runs
from richconsole.markup.style import DEFAULT_STYLE, Style, merge_styles

__all__ = [
    "DEFAULT_STYLE",
    "NAMED_COLORS",
    "Color",
    "Colors",
    "RichConsole",
    "Style",
    "TextEffects",
    "merge_styles",
    "named_color",
    "render_markup",
    "render_runs",
]
