# topmark:header:start
#
#   project      : RichConsole
#   file         : console.py
#   file_relpath : src/richconsole/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""High-level console API.

`RichConsole` writes text with explicit colors and effects, or styled text
using the inline markup language:

    ```python
    from richconsole import Colors, RichConsole, TextEffects

    console = RichConsole()
    console.write_line("Hello, World!", Colors.INDIAN_RED, effects=TextEffects.ITALICS)
    console.write_line_styled("This is [red]colored[/] and [italics palegreen]italic[/].")
    ```

Configuration (color mode, width, encoding) is passed in explicitly; the
console never touches process-wide state other than the stream it writes to.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from richconsole.config.color import resolve_color_mode
from richconsole.config.logging import get_logger
from richconsole.config.model import ConsoleConfig
from richconsole.core.effects import TextEffects
from richconsole.markup.renderer import render_markup
from richconsole.sink.ansi import AnsiSink

if TYPE_CHECKING:
    from typing import TextIO

    from richconsole.config.logging import RichConsoleLogger
    from richconsole.core.color import Color
    from richconsole.sink.api import TerminalSink

logger: RichConsoleLogger = get_logger(__name__)

NEWLINE: str = "\n"


def sink_from_config(config: ConsoleConfig, *, out: TextIO | None = None) -> AnsiSink:
    """Create an `AnsiSink` honoring ``config``.

    Args:
        config (ConsoleConfig): Effective configuration.
        out (TextIO | None): Target stream; defaults to `sys.stdout`.

    Returns:
        AnsiSink: The configured sink.
    """
    stream: TextIO = out or sys.stdout
    return AnsiSink(
        out=stream,
        enable_color=resolve_color_mode(config.color_mode, stream),
        width=config.width,
        encoding=config.encoding,
    )


class RichConsole:
    """Console that writes colored and styled text.

    Args:
        sink (TerminalSink | None): Output collaborator. Defaults to an
            `AnsiSink` on stdout built from ``config``.
        config (ConsoleConfig | None): Configuration used when no sink is given.
    """

    def __init__(
        self,
        sink: TerminalSink | None = None,
        *,
        config: ConsoleConfig | None = None,
    ) -> None:
        self.config: ConsoleConfig = config or ConsoleConfig()
        self.sink: TerminalSink = sink if sink is not None else sink_from_config(self.config)

    def write(
        self,
        element: object = None,
        foreground: Color | None = None,
        background: Color | None = None,
        effects: TextEffects = TextEffects.NONE,
    ) -> None:
        """Write ``element`` (converted with `str`; None writes nothing visible).

        Args:
            element (object): Text or any object to display.
            foreground (Color | None): Text color; None keeps the terminal default.
            background (Color | None): Background color; None keeps the terminal default.
            effects (TextEffects): Effects to apply.
        """
        text: str = "" if element is None else str(element)
        self.sink.emit(text, foreground, background, effects)

    def write_line(
        self,
        element: object = None,
        foreground: Color | None = None,
        background: Color | None = None,
        effects: TextEffects = TextEffects.NONE,
    ) -> None:
        """Like `write`, followed by a newline written in the same style."""
        text: str = "" if element is None else str(element)
        self.sink.emit(text + NEWLINE, foreground, background, effects)

    def write_styled(self, markup: str | None) -> None:
        """Write markup such as ``"[red]red[/], [green underline]green[/]"``.

        None writes nothing.
        """
        render_markup(markup, self.sink)

    def write_line_styled(self, markup: str | None) -> None:
        """Write markup followed by a newline (a None markup writes just the newline)."""
        render_markup((markup or "") + NEWLINE, self.sink)

    def read_line(self) -> str:
        """Read one line from stdin without its line ending; EOF yields ``""``."""
        line: str = click.get_text_stream("stdin").readline()
        return line.rstrip("\r\n")

    def read_key(self, *, echo: bool = False) -> str:
        """Read a single key press (see `click.getchar`)."""
        return click.getchar(echo=echo)

    def clear(self) -> None:
        """Clear the terminal screen."""
        click.clear()
