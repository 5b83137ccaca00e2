# topmark:header:start
#
#   project      : RichConsole
#   file         : test_color.py
#   file_relpath : tests/core/test_color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `Color` value type: validation, scaling and formatting."""

from __future__ import annotations

import pytest

from richconsole.core.color import Color


def test_scaling_truncates_channels() -> None:
    """Multiplying and dividing scale every channel with truncation."""
    base = Color(200, 100, 50)

    assert base * 0.5 == Color(100, 50, 25)
    assert base / 2 == Color(100, 50, 25)
    assert Color(3, 3, 3) * 0.5 == Color(1, 1, 1)


def test_scaling_is_commutative_with_scalar() -> None:
    """`0.25 * color` is the same as `color * 0.25`."""
    assert 0.25 * Color(255, 255, 255) == Color(255, 255, 255) * 0.25 == Color(63, 63, 63)


@pytest.mark.parametrize(
    ("color", "factor", "expected"),
    [
        (Color(200, 100, 50), 2.0, Color(255, 200, 100)),
        (Color(200, 100, 50), -1.0, Color(0, 0, 0)),
        (Color(10, 20, 30), 0.0, Color(0, 0, 0)),
    ],
)
def test_scaling_clamps_to_channel_range(color: Color, factor: float, expected: Color) -> None:
    """Scaled channels are clamped to 0..255."""
    assert color.scale(factor) == expected


@pytest.mark.parametrize(
    ("factor", "expected"),
    [
        (float("nan"), Color(0, 0, 0)),
        (float("inf"), Color(255, 255, 255)),
        (float("-inf"), Color(0, 0, 0)),
    ],
)
def test_scaling_by_non_finite_factor(factor: float, expected: Color) -> None:
    """NaN and infinite factors produce a defined color instead of raising."""
    assert Color(1, 2, 3) * factor == expected


def test_division_by_nan_gives_black() -> None:
    """Dividing by NaN yields zero channels."""
    assert Color(200, 100, 50) / float("nan") == Color(0, 0, 0)


def test_scaling_returns_new_instance() -> None:
    """Scaling never mutates the original color."""
    base = Color(10, 20, 30)
    _ = base * 2
    assert base == Color(10, 20, 30)


def test_division_by_zero_raises() -> None:
    """Dividing by zero is an API error."""
    with pytest.raises(ZeroDivisionError):
        _ = Color(1, 2, 3) / 0


@pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 1000)])
def test_out_of_range_channels_are_rejected(channels: tuple[int, int, int]) -> None:
    """Constructing a color outside 0..255 raises ValueError."""
    with pytest.raises(ValueError, match="channel must be in 0..255"):
        Color(*channels)


def test_str_is_markup_literal() -> None:
    """`str(color)` produces the `(R,G,B)` form without spaces."""
    assert str(Color(205, 92, 92)) == "(205,92,92)"


def test_ansi_sequences() -> None:
    """24-bit SGR sequences for foreground and background."""
    color = Color(1, 2, 3)
    assert color.ansi_foreground == "\x1b[38;2;1;2;3m"
    assert color.ansi_background == "\x1b[48;2;1;2;3m"
    assert color.as_tuple() == (1, 2, 3)
