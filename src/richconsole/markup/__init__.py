# topmark:header:start
#
#   project      : RichConsole
#   file         : __init__.py
#   file_relpath : src/richconsole/markup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline markup language: scanner, attribute resolution and renderer.

Public modules:
    - richconsole.markup.tokens
    - richconsole.markup.scanner
    - richconsole.markup.style
    - richconsole.markup.attributes
    - richconsole.markup.renderer
"""

from __future__ import annotations
