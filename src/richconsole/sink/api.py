# topmark:header:start
#
#   project      : RichConsole
#   file         : api.py
#   file_relpath : src/richconsole/sink/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal sink interface.

A sink receives fully resolved text runs. It owns the output stream and the
translation of colors and effects into whatever the target understands
(ANSI escape sequences, in-memory records, ...). The markup renderer only
depends on this protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from richconsole.core.color import Color
    from richconsole.core.effects import TextEffects


class TerminalSink(Protocol):
    """Minimal interface for the output collaborator of the renderer."""

    def emit(
        self,
        text: str,
        foreground: Color | None,
        background: Color | None,
        effects: TextEffects,
    ) -> None:
        """Write one run of text with the given colors and effects."""
        ...
