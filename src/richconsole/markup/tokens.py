# topmark:header:start
#
#   project      : RichConsole
#   file         : tokens.py
#   file_relpath : src/richconsole/markup/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token types produced by the markup scanner.

Every token records the span of input it was scanned from (``start`` and
``length``). Spans drive the scanner's own advancement; the renderer only
looks at the token kind and payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EndOfInput:
    """Marks the end of the markup; always the last token, with length 0."""

    start: int
    length: int = 0

    kind = "end"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the token."""
        return {"kind": self.kind, "start": self.start, "length": self.length}


@dataclass(frozen=True)
class CloseTag:
    """The ``[/]`` marker closing the innermost open tag."""

    start: int
    length: int = 3

    kind = "close"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the token."""
        return {"kind": self.kind, "start": self.start, "length": self.length}


@dataclass(frozen=True)
class OpenTag:
    """An opening tag such as ``[red b:white italics]``.

    Attributes:
        attributes (tuple[str, ...]): The raw, space-separated attribute words,
            in source order. Empty words are already dropped.
    """

    start: int
    length: int
    attributes: tuple[str, ...]

    kind = "open"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the token."""
        return {
            "kind": self.kind,
            "start": self.start,
            "length": self.length,
            "attributes": list(self.attributes),
        }


@dataclass(frozen=True)
class TextRun:
    """Literal text, with escapes already resolved.

    ``text`` may differ from the source span: ``\\[`` scans to ``"["`` with
    length 2.
    """

    start: int
    length: int
    text: str

    kind = "text"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the token."""
        return {"kind": self.kind, "start": self.start, "length": self.length, "text": self.text}


Token = EndOfInput | CloseTag | OpenTag | TextRun
