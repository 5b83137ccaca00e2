# topmark:header:start
#
#   project      : RichConsole
#   file         : demo.py
#   file_relpath : src/richconsole/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RichConsole `demo` command: a tour of the console API and the markup language."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from richconsole.console import RichConsole
from richconsole.core.color import Color
from richconsole.core.effects import TextEffects
from richconsole.core.palette import Colors

if TYPE_CHECKING:
    from richconsole.cli.console import ClickConsole

GREETING: str = "Hello, World!"
VILLAIN: str = "\N{IMP} The Uncoded One"


def run_demo(rc: RichConsole) -> None:
    """Write the showcase lines through ``rc``."""
    # Plain API: colors, backgrounds and effect flags.
    rc.write_line(GREETING, Colors.INDIAN_RED)
    rc.write_line(GREETING, Color(255, 127, 0))
    rc.write_line(GREETING, Colors.INDIAN_RED, Colors.BLANCHED_ALMOND)
    for effects in (
        TextEffects.ITALICS,
        TextEffects.UNDERLINE,
        TextEffects.ALL_CAPS,
        TextEffects.ITALICS | TextEffects.UNDERLINE | TextEffects.ALL_CAPS,
    ):
        rc.write_line(GREETING, Colors.INDIAN_RED, Colors.BLANCHED_ALMOND, effects)
    rc.write_line(GREETING)
    rc.write_line(GREETING, Colors.INDIAN_RED, effects=TextEffects.BLINK)
    rc.write_line(GREETING, effects=TextEffects.STRIKETHROUGH)
    rc.write("Hello, ", Colors.INDIAN_RED)
    rc.write("World!", Colors.BLANCHED_ALMOND)
    rc.write_line()
    rc.write_line(VILLAIN, Colors.WHITE, Colors.GRAY, TextEffects.ALL_CAPS)
    rc.write_line(VILLAIN, Colors.WHITE, Colors.WHITE * 0.25, TextEffects.ALL_CAPS)

    # Markup.
    rc.write_line_styled("This is [red]colored[/] text, and this is [italics palegreen]italic[/].")
    rc.write_line_styled(f"[white b:gray allcaps]{VILLAIN}[/] has arrived.")
    rc.write_line_styled(f"[f:white b:gray allcaps]{VILLAIN}[/] has arrived.")
    rc.write_line_styled(f"[(255,255,255) b:(127,127,127) allcaps]{VILLAIN}[/] has arrived.")
    color: Color = Colors.INDIAN_RED
    rc.write_line_styled(f"[{color} b:{color * 0.25} allcaps]{VILLAIN}[/] has arrived.")
    rc.write_line_styled("[indianred]Hello, [italics allcaps]world![/] More text[/] over here.")
    rc.write_line_styled(
        f"[white b:(25,25,25) allcaps]{VILLAIN}[/] used "
        f"[{Colors.MAGENTA} b:{Colors.MAGENTA * 0.25} allcaps]unraveling[/] on "
        f"[{Colors.CERULEAN} b:{Colors.CERULEAN * 0.25} allcaps]\N{DAGGER KNIFE}\ufe0f Tog[/] "
        "and dealt [red b:darkred]\N{HEAVY BLACK HEART}\ufe0f\N{MULTIPLICATION SIGN}5[/] damage!"
    )
    rc.write_line_styled(r"HP: \[22/25]")
    rc.write_line_styled(r"HP: 22\\25")
    rc.write_line_styled("[center]centered[/]")
    rc.write_line_styled("[right doubleunderline]right aligned[/]")


@click.command(
    name="demo",
    help="Show what the console and its markup can do.",
)
def demo_command() -> None:
    """Run the showcase on stdout."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    run_demo(RichConsole(sink=console.sink))
    console.sink.reset()
