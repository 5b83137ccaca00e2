# topmark:header:start
#
#   project      : RichConsole
#   file         : renderer.py
#   file_relpath : src/richconsole/markup/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render markup to a terminal sink.

`render_markup` walks the scanner's token stream with a `StyleStack`:

| Token        | Action                                              |
|--------------|-----------------------------------------------------|
| `EndOfInput` | stop                                                |
| `CloseTag`   | pop (ignored when only the default style is left)   |
| `OpenTag`    | push the tag's style merged onto the current top    |
| `TextRun`    | ``sink.emit`` the text with the current top style   |

All state is local to one call; rendering never raises on malformed markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from richconsole.config.logging import get_logger
from richconsole.markup.attributes import resolve_open_tag
from richconsole.markup.scanner import scan
from richconsole.markup.style import StyleStack
from richconsole.markup.tokens import CloseTag, EndOfInput, OpenTag, TextRun
from richconsole.sink.memory import MemorySink

if TYPE_CHECKING:
    from richconsole.config.logging import RichConsoleLogger
    from richconsole.sink.api import TerminalSink
    from richconsole.sink.memory import StyledRun

logger: RichConsoleLogger = get_logger(__name__)


def render_markup(markup: str | None, sink: TerminalSink) -> None:
    """Render ``markup`` by forwarding each styled text run to ``sink``.

    Args:
        markup (str | None): Markup text such as ``"[red]alert[/] raised"``.
            None and the empty string render nothing.
        sink (TerminalSink): Receives one ``emit`` call per text run.
    """
    if not markup:
        return

    stack = StyleStack()
    for token in scan(markup):
        if isinstance(token, EndOfInput):
            break
        if isinstance(token, CloseTag):
            stack.pop()
        elif isinstance(token, OpenTag):
            stack.push(resolve_open_tag(token.attributes, stack.top))
            logger.trace("Pushed %r (depth %d)", stack.top, stack.depth)
        elif isinstance(token, TextRun):
            style = stack.top
            sink.emit(token.text, style.foreground, style.background, style.effects)

    if stack.depth > 1:
        logger.debug("Markup ended with %d unclosed tag(s)", stack.depth - 1)


def render_runs(markup: str | None) -> list[StyledRun]:
    """Render ``markup`` into memory and return the styled runs in order."""
    sink = MemorySink()
    render_markup(markup, sink)
    return sink.runs
