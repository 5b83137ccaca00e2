# topmark:header:start
#
#   project      : RichConsole
#   file         : errors.py
#   file_relpath : src/richconsole/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by RichConsole commands.

Each error class carries the process exit code it maps to (see `ExitCode`).
Malformed markup never raises; these cover invocation, configuration and
input problems only.
"""

from __future__ import annotations

from typing import IO, Any

import click

from richconsole.cli.exit_codes import ExitCode


class RichConsoleError(click.ClickException):
    """Base class for RichConsole CLI errors.

    Args:
        message (str): What went wrong.
        hint (str | None): Optional suggestion printed on a second line.
    """

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Return the message, followed by the hint if there is one."""
        if self.hint:
            return f"{self.message}\n  hint: {self.hint}"
        return self.message

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the error through the command's console when one is active."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class RichConsoleUsageError(RichConsoleError):
    """Conflicting or invalid command line options."""

    exit_code = ExitCode.USAGE_ERROR


class RichConsoleConfigError(RichConsoleError):
    """A configuration file is missing, unreadable or holds invalid values."""

    exit_code = ExitCode.CONFIG_ERROR


class RichConsoleIOError(RichConsoleError):
    """Markup could not be read from its input."""

    exit_code = ExitCode.IO_ERROR
