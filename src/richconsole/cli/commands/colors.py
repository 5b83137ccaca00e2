# topmark:header:start
#
#   project      : RichConsole
#   file         : colors.py
#   file_relpath : src/richconsole/cli/commands/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RichConsole `colors` command.

Lists the named palette as it is spelled in markup (``indianred``,
``palegreen``, ...), with a background swatch per color.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from richconsole.cli.cli_types import OutputFormat
from richconsole.cli.options import output_format_option
from richconsole.core.effects import TextEffects
from richconsole.core.palette import NAMED_COLORS

if TYPE_CHECKING:
    from richconsole.cli.console import ClickConsole
    from richconsole.core.color import Color

SWATCH: str = "    "


@click.command(
    name="colors",
    help="List the named colors usable in markup.",
)
@click.argument("pattern", required=False, default=None)
@output_format_option
def colors_command(*, pattern: str | None, output_format: OutputFormat | None) -> None:
    """List named colors, optionally only those whose name contains PATTERN.

    Args:
        pattern (str | None): Case-insensitive substring filter.
        output_format (OutputFormat | None): Output format (default, json, ndjson).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    needle: str = (pattern or "").lower()
    selected: list[tuple[str, Color]] = [
        (name, color) for name, color in sorted(NAMED_COLORS.items()) if needle in name
    ]
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({name: list(color.as_tuple()) for name, color in selected}, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for name, color in selected:
            console.print(json.dumps({"name": name, "rgb": list(color.as_tuple())}))
        return

    if not selected:
        console.warn(f"No named color matches '{pattern}'.")
        return
    width: int = max(len(name) for name, _ in selected)
    for name, color in selected:
        console.sink.emit(SWATCH, None, color, TextEffects.NONE)
        console.sink.reset()
        console.print(f" {name:<{width}}  {color}")
