# topmark:header:start
#
#   project      : RichConsole
#   file         : __init__.py
#   file_relpath : src/richconsole/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core value types for RichConsole.

Public modules:
    - richconsole.core.color
    - richconsole.core.effects
    - richconsole.core.palette

These modules are UI-agnostic: they neither write to a terminal nor depend
on Click.
"""

from __future__ import annotations
