# topmark:header:start
#
#   project      : RichConsole
#   file         : test_color_mode.py
#   file_relpath : tests/config/test_color_mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the color enable/disable decision."""

from __future__ import annotations

import io

import pytest

from richconsole.config.color import ColorMode, color_from_environment, resolve_color_mode, stream_isatty


class FakeTerminal(io.StringIO):
    """A text stream that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


def test_explicit_modes_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """`always`/`never` ignore FORCE_COLOR, NO_COLOR and the terminal."""
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(ColorMode.ALWAYS, io.StringIO())
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert not resolve_color_mode(ColorMode.NEVER, FakeTerminal())


def test_force_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR enables color unless it is "0"."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(ColorMode.AUTO, io.StringIO())
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert color_from_environment() is None
    assert not resolve_color_mode(None, io.StringIO())


def test_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """NO_COLOR disables color on a terminal, even when empty."""
    monkeypatch.setenv("NO_COLOR", "")
    assert not resolve_color_mode(None, FakeTerminal())


@pytest.mark.parametrize(("stream", "expected"), [(FakeTerminal(), True), (io.StringIO(), False)])
def test_auto_follows_terminal(stream: io.StringIO, expected: bool) -> None:
    """Without other signals color follows terminal detection."""
    assert resolve_color_mode(ColorMode.AUTO, stream) is expected


def test_closed_stream_is_not_a_terminal() -> None:
    """Streams that cannot answer are treated as plain files."""
    stream = io.StringIO()
    stream.close()
    assert stream_isatty(stream) is False
