# topmark:header:start
#
#   project      : RichConsole
#   file         : version.py
#   file_relpath : src/richconsole/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RichConsole `version` command.

Prints the current RichConsole version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from richconsole.cli.cli_types import OutputFormat
from richconsole.cli.options import output_format_option
from richconsole.constants import RICHCONSOLE_VERSION

if TYPE_CHECKING:
    from richconsole.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of RichConsole.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of RichConsole.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": RICHCONSOLE_VERSION}))
    else:
        console.print(console.styled(RICHCONSOLE_VERSION, bold=True))
