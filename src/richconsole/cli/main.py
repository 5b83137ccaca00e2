# topmark:header:start
#
#   project      : RichConsole
#   file         : main.py
#   file_relpath : src/richconsole/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the RichConsole CLI.

Group-level options (verbosity, color, configuration) are resolved once and
placed into ``ctx.obj``; subcommands pick up the shared console and config
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from richconsole.cli.commands.colors import colors_command
from richconsole.cli.commands.demo import demo_command
from richconsole.cli.commands.render import render_command
from richconsole.cli.commands.runs import runs_command
from richconsole.cli.commands.tokens import tokens_command
from richconsole.cli.commands.version import version_command
from richconsole.cli.console import ClickConsole
from richconsole.cli.errors import RichConsoleConfigError, RichConsoleUsageError
from richconsole.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from richconsole.config.color import ColorMode, resolve_color_mode
from richconsole.config.io import load_config
from richconsole.config.logging import get_logger, resolve_env_log_level, setup_logging
from richconsole.config.model import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from richconsole.cli.console import ConsoleLike
    from richconsole.config.model import ConsoleConfig

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
    no_config: bool,
    width: int | None,
    encoding: str | None,
) -> None:
    """Initialize shared state (logging, config & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_file (Path | None): Explicit configuration file from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.
        width (int | None): Alignment width override from ``--width``.
        encoding (str | None): Output encoding override from ``--encoding``.

    Raises:
        RichConsoleUsageError: On conflicting options.
        RichConsoleConfigError: If the configuration cannot be loaded.
    """
    ctx.obj = ctx.obj or {}

    level: int | None = resolve_env_log_level()
    if verbose or quiet:
        level = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    plain_logs: bool = no_color or color_mode is ColorMode.NEVER
    setup_logging(level=level, use_color=False if plain_logs else None)

    if config_file is not None and no_config:
        raise RichConsoleUsageError("The '--config' and '--no-config' options are mutually exclusive.")

    effective_color_mode: ColorMode | None = ColorMode.NEVER if no_color else color_mode
    overrides = {
        "color": effective_color_mode.value if effective_color_mode else None,
        "width": width,
        "encoding": encoding,
    }
    try:
        config: ConsoleConfig = load_config(
            config_file, discover=not no_config, overrides=overrides
        )
    except ConfigError as exc:
        raise RichConsoleConfigError(
            str(exc), hint="check the richconsole settings and the --width / --encoding options"
        ) from exc
    ctx.obj["config"] = config
    logger.debug("Effective configuration: %r", config)

    enable_color: bool = resolve_color_mode(config.color_mode, click.get_text_stream("stdout"))
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(
        enable_color=enable_color,
        width=config.width,
        encoding=config.encoding,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="RichConsole CLI: render color and effect markup in the terminal.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
    no_config: bool,
    width: int | None,
    encoding: str | None,
) -> None:
    """Entry point for the RichConsole CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_file=config_file,
        no_config=no_config,
        width=width,
        encoding=encoding,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'richconsole render \"[red]Hello[/], World!\"' to render markup.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(runs_command)

cli.add_command(tokens_command)

cli.add_command(colors_command)

cli.add_command(demo_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
