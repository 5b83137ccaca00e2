# topmark:header:start
#
#   project      : RichConsole
#   file         : runs.py
#   file_relpath : src/richconsole/cli/commands/runs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RichConsole `runs` command.

Shows how markup resolves into styled runs, one per line, without writing
any escape sequences. Useful to debug nesting and color inheritance.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from richconsole.cli.cli_types import OutputFormat
from richconsole.cli.io import read_markup
from richconsole.cli.options import output_format_option
from richconsole.markup.renderer import render_runs

if TYPE_CHECKING:
    from richconsole.cli.console import ConsoleLike
    from richconsole.sink.memory import StyledRun


def describe_run(run: StyledRun) -> str:
    """Return a one-line human-readable description of a run."""
    fg: str = str(run.foreground) if run.foreground else "-"
    bg: str = str(run.background) if run.background else "-"
    effects: str = " ".join(run.to_dict()["effects"]) or "-"
    return f"{run.text!r}  fg={fg}  bg={bg}  effects={effects}"


@click.command(
    name="runs",
    help="Show the styled text runs that markup resolves to.",
)
@click.argument("texts", nargs=-1)
@output_format_option
def runs_command(*, texts: tuple[str, ...], output_format: OutputFormat | None) -> None:
    """Print the resolved runs of the markup.

    Args:
        texts (tuple[str, ...]): Markup fragments, joined with spaces.
        output_format (OutputFormat | None): Output format (default, json, ndjson).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    markup: str = read_markup(texts)
    runs: list[StyledRun] = render_runs(markup)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"markup": markup, "runs": [r.to_dict() for r in runs]}, indent=2))
    elif fmt == OutputFormat.NDJSON:
        for run in runs:
            console.print(json.dumps(run.to_dict()))
    else:
        for run in runs:
            console.print(describe_run(run))
