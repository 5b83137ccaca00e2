# topmark:header:start
#
#   project      : RichConsole
#   file         : io.py
#   file_relpath : src/richconsole/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input helpers for commands that take markup text.

Markup comes from the positional arguments (joined with single spaces) or,
when there are none or the only argument is ``-``, from STDIN.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from richconsole.cli.errors import RichConsoleIOError
from richconsole.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

STDIN_MARKER: str = "-"


def read_markup(texts: Sequence[str]) -> str:
    """Return the markup to process.

    Args:
        texts (Sequence[str]): Positional arguments of the command.

    Returns:
        str: The markup. Text read from STDIN keeps its content but loses a
            single trailing newline.

    Raises:
        RichConsoleIOError: If STDIN cannot be read or decoded.
    """
    if texts and list(texts) != [STDIN_MARKER]:
        return " ".join(texts)

    logger.debug("Reading markup from STDIN")
    try:
        data: str = click.get_text_stream("stdin").read()
    except (OSError, UnicodeDecodeError) as exc:
        raise RichConsoleIOError(
            f"Cannot read markup from STDIN: {exc}", hint="pass the markup as arguments instead"
        ) from exc
    if data.endswith("\n"):
        data = data[:-1]
    return data
