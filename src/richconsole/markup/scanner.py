# topmark:header:start
#
#   project      : RichConsole
#   file         : scanner.py
#   file_relpath : src/richconsole/markup/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass scanner for the bracket markup language.

The scanner turns a markup string such as::

    "HP: \\[22/25] [red b:darkred allcaps]critical[/]"

into a lazy sequence of tokens (see `richconsole.markup.tokens`). At each
offset the first matching rule wins:

1. end of input                    → `EndOfInput` (length 0)
2. ``[/]``                          → `CloseTag` (length 3)
3. ``\\[``                          → `TextRun("[")` (length 2)
4. ``\\\\``                         → `TextRun("\\")` (length 2)
5. ``[`` ... ``]`` (non-empty body)  → `OpenTag` with the body split on spaces;
   an unclosed or empty tag degrades to the literal text ``"["`` (length 1)
6. anything else                    → `TextRun` up to the next ``[`` or ``\\``

The spans of the produced tokens tile the input exactly. Scanning never
raises. Forward searches are memoized per scan, so no character is searched
twice and a whole scan is linear in the input length.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from richconsole.config.logging import get_logger
from richconsole.constants import (
    BACKSLASH,
    CLOSE_BRACKET,
    CLOSE_TAG,
    ESCAPED_BACKSLASH,
    ESCAPED_OPEN_BRACKET,
    OPEN_BRACKET,
)
from richconsole.markup.tokens import CloseTag, EndOfInput, OpenTag, TextRun

if TYPE_CHECKING:
    from collections.abc import Iterator

    from richconsole.config.logging import RichConsoleLogger
    from richconsole.markup.tokens import Token

logger: RichConsoleLogger = get_logger(__name__)


class _ControlIndex:
    """Memoized forward search for the control characters of one string.

    Offsets only move forward during a scan, so a cached hit at or after the
    requested offset is still the nearest one.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._hits: dict[str, int] = {}

    def find(self, char: str, offset: int) -> int:
        """Return the index of ``char`` at or after ``offset``, or ``len(text)``."""
        hit: int | None = self._hits.get(char)
        if hit is None or hit < offset:
            found: int = self._text.find(char, offset)
            hit = len(self._text) if found < 0 else found
            self._hits[char] = hit
        return hit


def split_attributes(body: str) -> tuple[str, ...]:
    """Split a tag body on single spaces, dropping empty words."""
    return tuple(word for word in body.split(" ") if word)


def _scan_open_tag(text: str, offset: int, index: _ControlIndex) -> Token:
    end: int = index.find(CLOSE_BRACKET, offset + 1)
    if end == len(text) or end == offset + 1:
        # Unclosed ("[abc") or empty ("[]"): the bracket is literal text.
        logger.trace("Literal '[' at %d (unclosed or empty tag)", offset)
        return TextRun(offset, 1, OPEN_BRACKET)
    body: str = text[offset + 1 : end]
    return OpenTag(offset, end - offset + 1, split_attributes(body))


def _scan_text(text: str, offset: int, index: _ControlIndex) -> TextRun:
    start: int = offset
    if text.startswith(BACKSLASH, offset):
        # A backslash that does not start an escape is ordinary text.
        start += 1
    stop: int = min(index.find(OPEN_BRACKET, start), index.find(BACKSLASH, start))
    return TextRun(offset, stop - offset, text[offset:stop])


def next_token(text: str, offset: int = 0, *, index: _ControlIndex | None = None) -> Token:
    """Scan the token starting at ``offset``.

    Args:
        text (str): The complete markup string.
        offset (int): Index of the first unconsumed character.
        index (_ControlIndex | None): Search memo shared across one scan;
            a fresh one is used when omitted.

    Returns:
        Token: The token at ``offset``; its ``length`` is the number of
            characters consumed (0 only for `EndOfInput`).
    """
    if index is None:
        index = _ControlIndex(text)
    if offset >= len(text):
        return EndOfInput(offset)
    if text.startswith(CLOSE_TAG, offset):
        return CloseTag(offset)
    if text.startswith(ESCAPED_OPEN_BRACKET, offset):
        return TextRun(offset, 2, OPEN_BRACKET)
    if text.startswith(ESCAPED_BACKSLASH, offset):
        return TextRun(offset, 2, BACKSLASH)
    if text.startswith(OPEN_BRACKET, offset):
        return _scan_open_tag(text, offset, index)
    return _scan_text(text, offset, index)


def scan(text: str) -> Iterator[Token]:
    """Lazily scan ``text`` into tokens, ending with exactly one `EndOfInput`.

    Args:
        text (str): The markup string.

    Yields:
        Token: Tokens in source order.
    """
    index = _ControlIndex(text)
    offset: int = 0
    while True:
        token: Token = next_token(text, offset, index=index)
        logger.trace("Scanned %r", token)
        yield token
        if isinstance(token, EndOfInput):
            return
        offset += token.length


def tokenize(text: str) -> list[Token]:
    """Return all tokens of ``text`` as a list (including the final `EndOfInput`)."""
    return list(scan(text))
