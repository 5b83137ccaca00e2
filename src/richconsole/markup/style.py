# topmark:header:start
#
#   project      : RichConsole
#   file         : style.py
#   file_relpath : src/richconsole/markup/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved styles, style merging and the style stack.

A `Style` is the (effects, foreground, background) triple applied to a run of
text. Nested markup tags compose styles with `merge_styles`: the inner tag is
the *overlay*, the enclosing scope is the *base*. Effects accumulate, and
colors set by the overlay replace the base colors while unset overlay colors
inherit them. Nothing set by an outer tag is ever cleared by an inner one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from richconsole.config.logging import get_logger
from richconsole.core.effects import TextEffects

if TYPE_CHECKING:
    from richconsole.config.logging import RichConsoleLogger
    from richconsole.core.color import Color

logger: RichConsoleLogger = get_logger(__name__)


@dataclass(frozen=True)
class Style:
    """An immutable set of colors and effects.

    Attributes:
        effects (TextEffects): Effect flags.
        foreground (Color | None): Text color, or None for the terminal default.
        background (Color | None): Background color, or None for the terminal default.
    """

    effects: TextEffects = TextEffects.NONE
    foreground: Color | None = None
    background: Color | None = None

    @property
    def is_default(self) -> bool:
        """True if no color and no effect is set."""
        return self.effects == TextEffects.NONE and self.foreground is None and self.background is None


DEFAULT_STYLE: Style = Style()


def merge_styles(base: Style, overlay: Style) -> Style:
    """Compose ``overlay`` on top of ``base``.

    Args:
        base (Style): Style inherited from the enclosing scope.
        overlay (Style): Style of the more recently opened tag.

    Returns:
        Style: Union of both effect sets; overlay colors where set, base colors otherwise.
    """
    return Style(
        effects=base.effects | overlay.effects,
        foreground=overlay.foreground if overlay.foreground is not None else base.foreground,
        background=overlay.background if overlay.background is not None else base.background,
    )


@dataclass
class StyleStack:
    """Stack of active styles for one render.

    The bottom entry is a permanent floor (the default style): `pop` on a
    stack holding only the floor is a no-op, so stray close tags can never
    underflow it.
    """

    _styles: list[Style] = field(default_factory=lambda: [DEFAULT_STYLE])

    @property
    def top(self) -> Style:
        """The style applied to text emitted now."""
        return self._styles[-1]

    @property
    def depth(self) -> int:
        """Number of entries, including the floor."""
        return len(self._styles)

    def push(self, style: Style) -> None:
        """Make ``style`` the active style."""
        self._styles.append(style)

    def pop(self) -> bool:
        """Restore the previous style.

        Returns:
            bool: False if only the floor was left (nothing popped).
        """
        if len(self._styles) <= 1:
            logger.debug("Ignoring close tag without a matching open tag")
            return False
        self._styles.pop()
        return True
