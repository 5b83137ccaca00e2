# topmark:header:start
#
#   project      : RichConsole
#   file         : __init__.py
#   file_relpath : src/richconsole/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RichConsole CLI subcommands."""

from __future__ import annotations
