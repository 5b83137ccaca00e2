# topmark:header:start
#
#   project      : RichConsole
#   file         : console.py
#   file_relpath : src/richconsole/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program output for CLI commands.

Commands write their results (listings, JSON documents, hints) through a
`ConsoleLike` and never through logging. Rendered markup takes a different
path: it is emitted run by run into `ClickConsole.sink`, which shares the
console's stream and color decision.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click

from richconsole.sink.ansi import AnsiSink


class ConsoleLike(Protocol):
    """What commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style` arguments when color is on."""
        ...


class ClickConsole:
    """`ConsoleLike` built on `click.echo`, with an `AnsiSink` on the same stream.

    Args:
        enable_color (bool): Keep escape sequences in the output.
        out (TextIO | None): Stream for results and rendered markup (default: stdout).
        err (TextIO | None): Stream for warnings and errors (default: stderr).
        width (int | None): Alignment width for rendered markup; None follows the terminal.
        encoding (str | None): Encoding the sink applies to ``out``.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
        width: int | None = None,
        encoding: str | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr
        self.sink = AnsiSink(out=self.out, enable_color=enable_color, width=width, encoding=encoding)

    def _echo(self, text: str, stream: TextIO, *, nl: bool) -> None:
        click.echo(text, file=stream, nl=nl, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        self._echo(text, self.out, nl=nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a yellow warning to the error stream."""
        self._echo(self.styled(text, fg="yellow"), self.err, nl=nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a red error to the error stream."""
        self._echo(self.styled(text, fg="bright_red"), self.err, nl=nl)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` passed through `click.style`, or unchanged when color is off.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments for `click.style` (``fg``, ``bold``, ...).

        Returns:
            str: The styled text.
        """
        return click.style(text, **style_kwargs) if self.enable_color else text
