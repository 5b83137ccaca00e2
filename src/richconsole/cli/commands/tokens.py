# topmark:header:start
#
#   project      : RichConsole
#   file         : tokens.py
#   file_relpath : src/richconsole/cli/commands/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RichConsole `tokens` command: dump the scanner's token stream."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from richconsole.cli.cli_types import OutputFormat
from richconsole.cli.io import read_markup
from richconsole.cli.options import output_format_option
from richconsole.markup.scanner import tokenize
from richconsole.markup.tokens import OpenTag, TextRun

if TYPE_CHECKING:
    from richconsole.cli.console import ConsoleLike
    from richconsole.markup.tokens import Token


def describe_token(token: Token) -> str:
    """Return a one-line human-readable description of a token."""
    span: str = f"{token.start:>5}+{token.length:<3}"
    if isinstance(token, OpenTag):
        return f"{span} open   {' '.join(token.attributes)}"
    if isinstance(token, TextRun):
        return f"{span} text   {token.text!r}"
    return f"{span} {token.kind}"


@click.command(
    name="tokens",
    help="Show the tokens the markup scanner produces.",
)
@click.argument("texts", nargs=-1)
@output_format_option
def tokens_command(*, texts: tuple[str, ...], output_format: OutputFormat | None) -> None:
    """Print the token stream of the markup.

    Args:
        texts (tuple[str, ...]): Markup fragments, joined with spaces.
        output_format (OutputFormat | None): Output format (default, json, ndjson).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    markup: str = read_markup(texts)
    tokens: list[Token] = tokenize(markup)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([t.to_dict() for t in tokens], indent=2))
    elif fmt == OutputFormat.NDJSON:
        for token in tokens:
            console.print(json.dumps(token.to_dict()))
    else:
        for token in tokens:
            console.print(describe_token(token))
