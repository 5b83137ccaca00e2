# topmark:header:start
#
#   project      : RichConsole
#   file         : __main__.py
#   file_relpath : src/richconsole/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running RichConsole via ``python -m richconsole``.

Delegates to :func:`richconsole.cli.main.cli`, the same entry point as the
``richconsole`` console script.

Examples:
    Render markup from the command line::

        python -m richconsole render "[red]Hello[/], World!"
"""

from __future__ import annotations

from richconsole.cli.main import cli

if __name__ == "__main__":
    cli()
