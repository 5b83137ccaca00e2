# topmark:header:start
#
#   project      : RichConsole
#   file         : test_inspect_commands.py
#   file_relpath : tests/cli/test_inspect_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `runs` and `tokens` inspection commands."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_SUCCESS, run_cli


def test_runs_json() -> None:
    """`runs --format json` lists every styled run."""
    result = run_cli(["runs", "--format", "json", "[red]a[italics]b[/]c[/]d"])
    assert_SUCCESS(result)
    data = json.loads(result.output)
    assert data["markup"] == "[red]a[italics]b[/]c[/]d"
    assert data["runs"] == [
        {"text": "a", "foreground": [255, 0, 0], "background": None, "effects": []},
        {"text": "b", "foreground": [255, 0, 0], "background": None, "effects": ["italics"]},
        {"text": "c", "foreground": [255, 0, 0], "background": None, "effects": []},
        {"text": "d", "foreground": None, "background": None, "effects": []},
    ]


def test_runs_ndjson() -> None:
    """`runs --format ndjson` prints one run per line."""
    result = run_cli(["runs", "--format", "ndjson", "[b:red]x[/]y"])
    assert_SUCCESS(result)
    lines = [json.loads(line) for line in result.output.splitlines()]
    assert [line["text"] for line in lines] == ["x", "y"]
    assert lines[0]["background"] == [255, 0, 0]


def test_runs_default_format() -> None:
    """The human format shows colors in markup literal form."""
    result = run_cli(["--no-color", "runs", "[underline blink]x[/]"])
    assert_SUCCESS(result)
    assert result.output == "'x'  fg=-  bg=-  effects=underline blink\n"


def test_tokens_json() -> None:
    """`tokens --format json` shows kinds and spans."""
    result = run_cli(["tokens", "--format", "json", "[red]hi[/]"])
    assert_SUCCESS(result)
    assert [t["kind"] for t in json.loads(result.output)] == ["open", "text", "close", "end"]


def test_tokens_default_format() -> None:
    """The human format lists one token per line."""
    result = run_cli(["--no-color", "tokens", "\\[x"])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert len(lines) == 3
    assert "text" in lines[0] and "'['" in lines[0]
    assert lines[-1].endswith("end")


def test_invalid_format_is_a_usage_error() -> None:
    """Unknown formats are rejected by Click."""
    result = run_cli(["tokens", "--format", "yaml", "x"])
    assert result.exit_code == 2
    assert "Invalid value" in result.output
