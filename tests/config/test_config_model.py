# topmark:header:start
#
#   project      : RichConsole
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the frozen/mutable console configuration pair."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from richconsole.config.color import ColorMode
from richconsole.config.model import ConfigError, ConsoleConfig, MutableConsoleConfig


def test_freeze_thaw_round_trip() -> None:
    """Thawing and freezing preserves every value."""
    config = ConsoleConfig(color_mode=ColorMode.NEVER, width=40, encoding="ascii")
    assert config.thaw().freeze() == config


def test_frozen_config_is_immutable() -> None:
    """A frozen config cannot be modified in place."""
    config = ConsoleConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.width = 3  # type: ignore[misc]


def test_color_mode_is_case_insensitive() -> None:
    """Color modes are normalized to lowercase."""
    builder = MutableConsoleConfig.from_defaults().apply_table({"color": "ALWAYS"})
    assert builder.color_mode is ColorMode.ALWAYS


@pytest.mark.parametrize(
    ("table", "message"),
    [
        ({"color": "sometimes"}, "invalid 'color' value"),
        ({"color": 1}, "'color' must be a string"),
        ({"width": "80"}, "'width' must be an integer"),
        ({"width": True}, "'width' must be an integer"),
        ({"encoding": 8}, "'encoding' must be a string"),
    ],
)
def test_invalid_values(table: dict[str, object], message: str) -> None:
    """Wrong types and unknown color modes are rejected."""
    with pytest.raises(ConfigError, match=message):
        MutableConsoleConfig.from_defaults().apply_table(table, source="test")


@pytest.mark.parametrize(
    ("builder", "message"),
    [
        (MutableConsoleConfig(width=0), "positive"),
        (MutableConsoleConfig(encoding="no-such-codec"), "unknown encoding"),
    ],
)
def test_freeze_validates(builder: MutableConsoleConfig, message: str) -> None:
    """Range and codec checks happen when freezing."""
    with pytest.raises(ConfigError, match=message):
        builder.freeze()


def test_unknown_keys_are_ignored_with_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are logged, not fatal."""
    with caplog.at_level(logging.WARNING):
        builder = MutableConsoleConfig.from_defaults().apply_table({"colour": "never"}, source="x.toml")
    assert builder.color_mode is ColorMode.AUTO
    assert "colour" in caplog.text
