# topmark:header:start
#
#   project      : RichConsole
#   file         : color.py
#   file_relpath : src/richconsole/core/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""24-bit RGB color value type.

A `Color` is immutable. Scaling (``color * 0.5``, ``color / 2``) produces a
new color whose channels are truncated with ``int()`` and clamped to the
0-255 range, which is handy for darker or brighter variants of a base color:

    ```python
    shadow = Colors.INDIAN_RED * 0.25
    ```

``str(color)`` renders the ``(R,G,B)`` form understood by the markup
language, so colors can be interpolated straight into styled text.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final

CHANNEL_MIN: Final[int] = 0
CHANNEL_MAX: Final[int] = 255


def _clamp_channel(value: float) -> int:
    # NaN maps to 0; infinities clamp like any other out-of-range value.
    if math.isnan(value):
        return CHANNEL_MIN
    # int() truncates toward zero; we never round up.
    return int(max(CHANNEL_MIN, min(CHANNEL_MAX, value)))


@dataclass(frozen=True)
class Color:
    """A color with three 8-bit channels and no alpha.

    Attributes:
        red (int): Red channel (0-255).
        green (int): Green channel (0-255).
        blue (int): Blue channel (0-255).
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value: int = getattr(self, name)
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ValueError(
                    f"{name} channel must be in {CHANNEL_MIN}..{CHANNEL_MAX}, got {value!r}"
                )

    def scale(self, multiplier: float) -> Color:
        """Return a new color with every channel multiplied by ``multiplier``.

        Args:
            multiplier (float): Factor applied to each channel.

        Returns:
            Color: The scaled color. Channels are truncated and clamped to 0-255.
                A NaN product gives 0 and infinities clamp to the range ends.
        """
        return Color(
            _clamp_channel(self.red * multiplier),
            _clamp_channel(self.green * multiplier),
            _clamp_channel(self.blue * multiplier),
        )

    def __mul__(self, multiplier: float) -> Color:
        return self.scale(multiplier)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Color:
        return Color(
            _clamp_channel(self.red / divisor),
            _clamp_channel(self.green / divisor),
            _clamp_channel(self.blue / divisor),
        )

    def __str__(self) -> str:
        return f"({self.red},{self.green},{self.blue})"

    @property
    def ansi_foreground(self) -> str:
        """SGR sequence selecting this color as the 24-bit foreground."""
        return f"\x1b[38;2;{self.red};{self.green};{self.blue}m"

    @property
    def ansi_background(self) -> str:
        """SGR sequence selecting this color as the 24-bit background."""
        return f"\x1b[48;2;{self.red};{self.green};{self.blue}m"

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the channels as an ``(r, g, b)`` tuple."""
        return (self.red, self.green, self.blue)
