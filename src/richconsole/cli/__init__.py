# topmark:header:start
#
#   project      : RichConsole
#   file         : __init__.py
#   file_relpath : src/richconsole/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for RichConsole."""

from __future__ import annotations
