# topmark:header:start
#
#   project      : RichConsole
#   file         : ansi.py
#   file_relpath : src/richconsole/sink/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI terminal sink.

`AnsiSink` turns a resolved run into SGR escape sequences and writes it with
`click.echo`, which strips the sequences again when color is disabled or the
stream is not a terminal.

Every run carries a complete prefix: each effect is either switched on or
explicitly switched off, and unset colors reset to the terminal defaults.
Runs therefore never inherit state from the previous write.

Effects that are not SGR attributes are applied here as text transforms:

- ``ALL_CAPS`` upper-cases the run before it is measured or written;
- ``RIGHT`` / ``CENTER`` pad the run with spaces against the line width
  (``RIGHT`` wins over ``CENTER``; see `resolve_alignment`).
"""

from __future__ import annotations

import codecs
import shutil
import sys
from typing import TYPE_CHECKING, TextIO

import click

from richconsole.config.logging import get_logger
from richconsole.constants import SGR_RESET
from richconsole.core.effects import (
    Alignment,
    TextEffects,
    Underline,
    resolve_alignment,
    resolve_underline,
)

if TYPE_CHECKING:
    from richconsole.config.logging import RichConsoleLogger
    from richconsole.core.color import Color

logger: RichConsoleLogger = get_logger(__name__)

# (flag, SGR "on", SGR "off") for effects that are simple toggles
_TOGGLES: tuple[tuple[TextEffects, int, int], ...] = (
    (TextEffects.ITALICS, 3, 23),
    (TextEffects.STRIKETHROUGH, 9, 29),
    (TextEffects.OVERLINE, 53, 55),
    (TextEffects.BLINK, 6, 25),
)

_UNDERLINE_CODES: dict[Underline, int] = {
    Underline.DOUBLE: 21,
    Underline.SINGLE: 4,
    Underline.NONE: 24,
}

_DEFAULT_BACKGROUND: str = "\x1b[49m"
_DEFAULT_FOREGROUND: str = "\x1b[39m"


def _sgr(code: int) -> str:
    return f"\x1b[{code}m"


def sgr_prefix(
    effects: TextEffects,
    foreground: Color | None,
    background: Color | None,
) -> str:
    """Return the escape sequences that fully describe a run's style.

    Args:
        effects (TextEffects): Effect flags of the run.
        foreground (Color | None): Text color; None selects the terminal default.
        background (Color | None): Background color; None selects the terminal default.

    Returns:
        str: The concatenated SGR sequences.
    """
    parts: list[str] = [_sgr(on if effects & flag else off) for flag, on, off in _TOGGLES]
    parts.append(_sgr(_UNDERLINE_CODES[resolve_underline(effects)]))
    parts.append(background.ansi_background if background is not None else _DEFAULT_BACKGROUND)
    parts.append(foreground.ansi_foreground if foreground is not None else _DEFAULT_FOREGROUND)
    return "".join(parts)


def display_length(text: str) -> int:
    """Return the number of characters ``text`` occupies, ignoring ANSI sequences.

    Each code point counts as one column; wide and combining characters are
    not measured specially. Grapheme clusters are not joined either, so a
    decomposed accent ("e" + U+0301) or a ZWJ emoji sequence counts once per
    code point and such text is padded slightly less than a terminal would
    need.
    """
    return len(click.unstyle(text).rstrip("\r\n"))


def alignment_padding(text: str, effects: TextEffects, width: int) -> str:
    """Return the spaces to write before ``text`` for its alignment.

    Args:
        text (str): The run, after any case transform.
        effects (TextEffects): Effect flags of the run.
        width (int): Line width to align against.

    Returns:
        str: Leading padding (empty for left alignment or when the run does not fit).
    """
    spare: int = max(0, width - display_length(text))
    alignment: Alignment = resolve_alignment(effects)
    if alignment is Alignment.RIGHT:
        return " " * spare
    if alignment is Alignment.CENTER:
        return " " * (spare // 2)
    return ""


class AnsiSink:
    """Sink writing ANSI-styled runs to a text stream.

    Args:
        out (TextIO | None): Target stream. Defaults to `sys.stdout`.
        enable_color (bool | None): True keeps escape sequences, False strips
            them, None lets Click decide from the stream (TTY detection).
        width (int | None): Line width used for alignment. None queries the
            terminal size on every aligned run.
        encoding (str | None): If set, the stream is reconfigured to this
            encoding when the sink is created (streams without
            ``reconfigure`` are left untouched).
    """

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        enable_color: bool | None = None,
        width: int | None = None,
        encoding: str | None = None,
    ) -> None:
        self.out: TextIO = out or sys.stdout
        self.enable_color = enable_color
        self.width = width
        if encoding is not None:
            self._apply_encoding(encoding)

    def _apply_encoding(self, encoding: str) -> None:
        current: str | None = getattr(self.out, "encoding", None)
        wanted: str = codecs.lookup(encoding).name
        if current and codecs.lookup(current).name == wanted:
            return
        reconfigure = getattr(self.out, "reconfigure", None)
        if reconfigure is None:
            logger.debug("Stream %r cannot be reconfigured to %s", self.out, encoding)
            return
        logger.debug("Reconfiguring output stream encoding: %s -> %s", current, wanted)
        reconfigure(encoding=wanted)

    def line_width(self) -> int:
        """Return the width used for alignment."""
        if self.width is not None:
            return self.width
        return shutil.get_terminal_size().columns

    def emit(
        self,
        text: str,
        foreground: Color | None,
        background: Color | None,
        effects: TextEffects,
    ) -> None:
        """Write one run.

        Args:
            text (str): The run's text.
            foreground (Color | None): Text color.
            background (Color | None): Background color.
            effects (TextEffects): Effect flags.
        """
        if effects & TextEffects.ALL_CAPS:
            text = text.upper()

        padding: str = ""
        if effects & (TextEffects.RIGHT | TextEffects.CENTER):
            padding = alignment_padding(text, effects, self.line_width())

        chunks: list[str] = []
        if padding:
            # Padding is written in the terminal's default style.
            chunks.extend((SGR_RESET, padding))
        chunks.extend((sgr_prefix(effects, foreground, background), text))
        click.echo("".join(chunks), file=self.out, nl=False, color=self.enable_color)

    def reset(self) -> None:
        """Restore the terminal's default style."""
        click.echo(SGR_RESET, file=self.out, nl=False, color=self.enable_color)
