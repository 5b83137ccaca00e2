# topmark:header:start
#
#   project      : RichConsole
#   file         : effects.py
#   file_relpath : src/richconsole/core/effects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text effects that can be applied to a rendered run.

`TextEffects` is a flag enumeration: effects are combined with ``|`` and the
resulting set is immutable. Some effects compete for the same visual slot
(underline styles, alignment); the helpers `resolve_underline` and
`resolve_alignment` decide which one wins so sinks do not have to.

Example:
    ```python
    effects = TextEffects.ITALICS | TextEffects.UNDERLINE
    ```
"""

from __future__ import annotations

from enum import Enum, IntFlag
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping


class TextEffects(IntFlag):
    """Bit set of text effects.

    Each effect requires the terminal to support it; unsupported effects are
    ignored by the terminal, not by this library.
    """

    NONE = 0
    ITALICS = 1 << 0
    UNDERLINE = 1 << 1
    DOUBLE_UNDERLINE = 1 << 2
    STRIKETHROUGH = 1 << 3
    OVERLINE = 1 << 4
    ALL_CAPS = 1 << 5
    LEFT = 1 << 6
    CENTER = 1 << 7
    RIGHT = 1 << 8
    BLINK = 1 << 9


# Markup keys are the flag names, lowercased, without separators.
EFFECT_NAMES: Final[Mapping[str, TextEffects]] = MappingProxyType(
    {
        "none": TextEffects.NONE,
        "italics": TextEffects.ITALICS,
        "underline": TextEffects.UNDERLINE,
        "doubleunderline": TextEffects.DOUBLE_UNDERLINE,
        "strikethrough": TextEffects.STRIKETHROUGH,
        "overline": TextEffects.OVERLINE,
        "allcaps": TextEffects.ALL_CAPS,
        "left": TextEffects.LEFT,
        "center": TextEffects.CENTER,
        "right": TextEffects.RIGHT,
        "blink": TextEffects.BLINK,
    }
)


def effect_from_name(name: str) -> TextEffects | None:
    """Return the effect named ``name`` (case-insensitive), or None if unknown."""
    return EFFECT_NAMES.get(name.lower())


def effect_key(effect: TextEffects) -> str:
    """Return the markup key of a single effect (``DOUBLE_UNDERLINE`` -> ``"doubleunderline"``)."""
    return (effect.name or "").replace("_", "").lower()


class Underline(Enum):
    """Resolved underline style for a run."""

    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class Alignment(Enum):
    """Resolved horizontal alignment for a run."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def resolve_underline(effects: TextEffects) -> Underline:
    """Pick the underline style to render.

    Double underline takes precedence over single underline; the two are
    never combined.

    Args:
        effects (TextEffects): The effect set of the run.

    Returns:
        Underline: The underline style to render.
    """
    if effects & TextEffects.DOUBLE_UNDERLINE:
        return Underline.DOUBLE
    if effects & TextEffects.UNDERLINE:
        return Underline.SINGLE
    return Underline.NONE


def resolve_alignment(effects: TextEffects) -> Alignment:
    """Pick the alignment to render.

    Precedence is RIGHT, then CENTER, then LEFT (which is also the default
    when no alignment flag is set).

    Args:
        effects (TextEffects): The effect set of the run.

    Returns:
        Alignment: The alignment to render.
    """
    if effects & TextEffects.RIGHT:
        return Alignment.RIGHT
    if effects & TextEffects.CENTER:
        return Alignment.CENTER
    return Alignment.LEFT
