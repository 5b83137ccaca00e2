# topmark:header:start
#
#   project      : RichConsole
#   file         : test_render_command.py
#   file_relpath : tests/cli/test_render_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `render` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from pathlib import Path


def test_render_plain_without_color() -> None:
    """With color off only the text (and a newline) is written."""
    result = run_cli(["--no-color", "render", "[red]Hello[/], World!"])
    assert_SUCCESS(result)
    assert result.output == "Hello, World!\n"


def test_render_joins_arguments() -> None:
    """Multiple arguments are joined with single spaces."""
    result = run_cli(["--color", "never", "render", "[red]a[/]", "b"])
    assert_SUCCESS(result)
    assert result.output == "a b\n"


def test_render_with_color_always() -> None:
    """`--color always` keeps the escape sequences."""
    result = run_cli(["--color", "always", "render", "--no-newline", "[(10,20,30)]x[/]"])
    assert_SUCCESS(result)
    assert "\x1b[38;2;10;20;30mx" in result.output
    assert result.output.endswith("\x1b[0m")


def test_render_reads_stdin() -> None:
    """Without arguments markup is read from STDIN."""
    result = run_cli(["--no-color", "render"], input_text="HP: \\[22/25]\n")
    assert_SUCCESS(result)
    assert result.output == "HP: [22/25]\n"


def test_render_dash_reads_stdin() -> None:
    """`-` is an explicit request for STDIN."""
    result = run_cli(["--no-color", "render", "-"], input_text="[allcaps]loud[/]")
    assert_SUCCESS(result)
    assert result.output == "LOUD\n"


def test_render_malformed_markup_succeeds() -> None:
    """Malformed markup is rendered leniently, never an error."""
    result = run_cli(["--no-color", "render", "[/][unclosed"])
    assert_SUCCESS(result)
    assert result.output == "[unclosed\n"


def test_render_width_aligns_right() -> None:
    """`--width` controls right alignment."""
    result = run_cli(["--no-color", "--width", "8", "render", "--no-newline", "[right]ab[/]"])
    assert_SUCCESS(result)
    assert result.output == "      ab"


def test_render_uses_discovered_config(tmp_path: Path) -> None:
    """A richconsole.toml in the working directory is honored."""
    (tmp_path / "richconsole.toml").write_text("[richconsole]\nwidth = 6\ncolor = 'never'\n", encoding="utf-8")
    result = run_cli(["render", "--no-newline", "[center]ab[/]"])
    assert_SUCCESS(result)
    assert result.output == "  ab"


def test_no_config_ignores_discovered_file(tmp_path: Path) -> None:
    """`--no-config` skips discovery."""
    (tmp_path / "richconsole.toml").write_text("[richconsole]\ncolor = 'always'\n", encoding="utf-8")
    result = run_cli(["--no-config", "render", "[red]x[/]"])
    assert_SUCCESS(result)
    assert result.output == "x\n"
