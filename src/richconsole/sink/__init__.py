# topmark:header:start
#
#   project      : RichConsole
#   file         : __init__.py
#   file_relpath : src/richconsole/sink/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sinks for styled text runs.

Public modules:
    - richconsole.sink.api: the `TerminalSink` protocol
    - richconsole.sink.ansi: ANSI escape-sequence sink for terminals
    - richconsole.sink.memory: in-memory sink recording runs
"""

from __future__ import annotations
