# topmark:header:start
#
#   project      : RichConsole
#   file         : render.py
#   file_relpath : src/richconsole/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RichConsole `render` command.

Renders markup to the terminal, e.g.::

    richconsole render "[white b:gray allcaps]The Uncoded One[/] has arrived."
    echo "HP: \\[22/25]" | richconsole render
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from richconsole.cli.io import read_markup
from richconsole.config.logging import get_logger
from richconsole.markup.renderer import render_markup

if TYPE_CHECKING:
    from richconsole.cli.console import ClickConsole

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render markup text (arguments, or STDIN when none are given or '-').",
)
@click.argument("texts", nargs=-1)
@click.option(
    "--no-newline",
    "-n",
    "no_newline",
    is_flag=True,
    default=False,
    help="Do not print a trailing newline.",
)
def render_command(*, texts: tuple[str, ...], no_newline: bool) -> None:
    """Render markup to stdout.

    Args:
        texts (tuple[str, ...]): Markup fragments, joined with spaces.
        no_newline (bool): Suppress the trailing newline.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    markup: str = read_markup(texts)
    logger.info("Rendering %d character(s) of markup", len(markup))

    render_markup(markup, console.sink)
    console.sink.reset()
    if not no_newline:
        console.print()
