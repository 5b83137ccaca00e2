# topmark:header:start
#
#   project      : RichConsole
#   file         : options.py
#   file_relpath : src/richconsole/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Options shared by the RichConsole group and its commands.

The group takes verbosity, color and configuration options; inspection
commands add ``--format``. Decorators here only declare options; their values
are resolved in `richconsole.cli.main.init_common_state`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from richconsole.cli.cli_types import EnumChoice, OutputFormat
from richconsole.cli.errors import RichConsoleUsageError
from richconsole.config.color import ColorMode
from richconsole.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

# Log level per number of -v flags (index 0 = no flag).
VERBOSE_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG, TRACE_LEVEL)
QUIET_LEVEL: int = logging.ERROR


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Map ``-v``/``-q`` counts to a log level.

    ``-v`` logs info, ``-vv`` debug and ``-vvv`` (or more) trace; ``-q`` only
    logs errors. Without either flag the level is WARNING.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: The log level.

    Raises:
        RichConsoleUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise RichConsoleUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return QUIET_LEVEL
    return VERBOSE_LEVELS[min(verbose_count, len(VERBOSE_LEVELS) - 1)]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (both countable)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Log more (-v info, -vv debug, -vvv per-token trace) to stderr.",
    )(f)
    return click.option("-q", "--quiet", count=True, help="Only log errors.")(f)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoice(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds configuration source and output overrides to a command.

    Options: ``--config PATH``, ``--no-config``, ``--width N``, ``--encoding ENC``.
    """
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from this TOML file instead of discovering one.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore richconsole.toml / pyproject.toml.",
    )(f)
    f = click.option(
        "--width",
        type=int,
        default=None,
        help="Line width used for center/right alignment (default: terminal width).",
    )(f)
    f = click.option(
        "--encoding",
        type=str,
        default=None,
        help="Output encoding (default: utf-8).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds ``--format default|json|ndjson`` to a command."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoice(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
