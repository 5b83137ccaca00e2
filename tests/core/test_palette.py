# topmark:header:start
#
#   project      : RichConsole
#   file         : test_palette.py
#   file_relpath : tests/core/test_palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the named color palette and its markup lookup table."""

from __future__ import annotations

import pytest

from richconsole.core.color import Color
from richconsole.core.palette import NAMED_COLORS, Colors, named_color


def test_palette_keys_drop_underscores() -> None:
    """Constants map to lowercase keys without underscores."""
    assert NAMED_COLORS["indianred"] == Colors.INDIAN_RED == Color(205, 92, 92)
    assert NAMED_COLORS["blanchedalmond"] == Colors.BLANCHED_ALMOND
    assert NAMED_COLORS["cerulean"] == Color(0, 123, 167)


def test_every_constant_is_reachable() -> None:
    """Each `Colors` constant has exactly one lookup key."""
    constants = {name: value for name, value in vars(Colors).items() if isinstance(value, Color)}
    assert len(NAMED_COLORS) == len(constants)
    for name, value in constants.items():
        assert NAMED_COLORS[name.replace("_", "").lower()] == value


@pytest.mark.parametrize("name", ["Red", "RED", "red"])
def test_named_color_is_case_insensitive(name: str) -> None:
    """Lookups ignore case."""
    assert named_color(name) == Color(255, 0, 0)


def test_unknown_name_is_none() -> None:
    """Unknown names are not an error."""
    assert named_color("notacolor") is None
    assert named_color("indian_red") is None


def test_table_is_read_only() -> None:
    """The shared table cannot be modified."""
    with pytest.raises(TypeError):
        NAMED_COLORS["red"] = Color(0, 0, 0)  # type: ignore[index]
