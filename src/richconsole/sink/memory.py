# topmark:header:start
#
#   project      : RichConsole
#   file         : memory.py
#   file_relpath : src/richconsole/sink/memory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory sink that records styled runs instead of writing them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from richconsole.core.effects import TextEffects, effect_key
from richconsole.markup.style import Style

if TYPE_CHECKING:
    from richconsole.core.color import Color


@dataclass(frozen=True)
class StyledRun:
    """A run of text together with the style it was emitted with."""

    text: str
    foreground: Color | None = None
    background: Color | None = None
    effects: TextEffects = TextEffects.NONE

    @property
    def style(self) -> Style:
        """The run's style as a `Style` value."""
        return Style(self.effects, self.foreground, self.background)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the run."""
        return {
            "text": self.text,
            "foreground": list(self.foreground.as_tuple()) if self.foreground else None,
            "background": list(self.background.as_tuple()) if self.background else None,
            "effects": [effect_key(e) for e in TextEffects if e and e in self.effects],
        }


@dataclass
class MemorySink:
    """Sink that appends every emitted run to `runs`."""

    runs: list[StyledRun] = field(default_factory=list)

    def emit(
        self,
        text: str,
        foreground: Color | None,
        background: Color | None,
        effects: TextEffects,
    ) -> None:
        """Record one run."""
        self.runs.append(StyledRun(text, foreground, background, effects))

    @property
    def text(self) -> str:
        """Concatenated text of all recorded runs."""
        return "".join(run.text for run in self.runs)
