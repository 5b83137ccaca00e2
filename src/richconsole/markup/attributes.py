# topmark:header:start
#
#   project      : RichConsole
#   file         : attributes.py
#   file_relpath : src/richconsole/markup/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the attribute words of an open tag into a `Style`.

An attribute word such as ``b:(128,29,0)`` is processed in three steps:

1. An optional ``f:`` (foreground, the default) or ``b:`` (background)
   prefix selects the color slot the word writes to.
2. The remaining key is matched, case-insensitively and independently,
   against the effect names, the named-color palette and the ``(R,G,B)``
   literal form. A key may contribute to more than one category.
3. Words that match nothing contribute nothing.

Malformed input never raises: a bad RGB literal is simply skipped and the
target slot keeps its previous value.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Final

from richconsole.config.logging import get_logger
from richconsole.core.color import CHANNEL_MAX, Color
from richconsole.core.effects import TextEffects, effect_from_name
from richconsole.core.palette import named_color
from richconsole.markup.style import Style, merge_styles

if TYPE_CHECKING:
    from collections.abc import Iterable

    from richconsole.config.logging import RichConsoleLogger

logger: RichConsoleLogger = get_logger(__name__)

FOREGROUND_PREFIX: Final[str] = "f:"
BACKGROUND_PREFIX: Final[str] = "b:"

# Exactly three ASCII decimal channels; no whitespace, no signs.
_RGB_LITERAL_RE: Final[re.Pattern[str]] = re.compile(r"\(([0-9]+),([0-9]+),([0-9]+)\)")


class BrushTarget(Enum):
    """Which color slot an attribute word assigns."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"


def split_target(attribute: str) -> tuple[BrushTarget, str]:
    """Strip a ``f:``/``b:`` prefix and return the target slot with the lowercased key.

    Example:
        >>> split_target("B:Red")
        (<BrushTarget.BACKGROUND: 'background'>, 'red')
    """
    key: str = attribute.lower()
    if key.startswith(BACKGROUND_PREFIX):
        return BrushTarget.BACKGROUND, key[len(BACKGROUND_PREFIX) :]
    if key.startswith(FOREGROUND_PREFIX):
        return BrushTarget.FOREGROUND, key[len(FOREGROUND_PREFIX) :]
    return BrushTarget.FOREGROUND, key


def parse_rgb_literal(key: str) -> Color | None:
    """Parse ``(R,G,B)`` into a `Color`.

    Returns:
        Color | None: The color, or None when the key is not a well-formed
            literal (wrong arity, non-numeric or out-of-range channels).
    """
    match = _RGB_LITERAL_RE.fullmatch(key)
    if match is None:
        return None
    # Leading zeros are allowed; anything over three significant digits is out of range.
    digits: list[str] = [group.lstrip("0") or "0" for group in match.groups()]
    if any(len(group) > 3 for group in digits):
        return None
    channels: list[int] = [int(group) for group in digits]
    if any(channel > CHANNEL_MAX for channel in channels):
        return None
    return Color(*channels)


def resolve_attributes(attributes: Iterable[str]) -> Style:
    """Build the style described by the attribute words of one tag.

    Args:
        attributes (Iterable[str]): Raw attribute words, in source order.

    Returns:
        Style: The tag's own style (not yet merged with any enclosing scope).
    """
    effects: TextEffects = TextEffects.NONE
    slots: dict[BrushTarget, Color | None] = {
        BrushTarget.FOREGROUND: None,
        BrushTarget.BACKGROUND: None,
    }

    for attribute in attributes:
        target, key = split_target(attribute)
        matched: bool = False

        effect: TextEffects | None = effect_from_name(key)
        if effect is not None:
            effects |= effect
            matched = True

        color: Color | None = named_color(key)
        if color is None:
            color = parse_rgb_literal(key)
        if color is not None:
            slots[target] = color
            matched = True

        if not matched:
            logger.debug("Ignoring unrecognized markup attribute %r", attribute)

    return Style(
        effects=effects,
        foreground=slots[BrushTarget.FOREGROUND],
        background=slots[BrushTarget.BACKGROUND],
    )


def resolve_open_tag(attributes: Iterable[str], base: Style) -> Style:
    """Resolve a tag's attributes and merge them as the overlay onto ``base``."""
    return merge_styles(base, resolve_attributes(attributes))
