# topmark:header:start
#
#   project      : RichConsole
#   file         : cli_types.py
#   file_relpath : src/richconsole/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types shared by RichConsole commands."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

import click

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """How inspection commands print their results.

    Members:
      DEFAULT: One human-readable line per item.
      JSON: A single JSON document.
      NDJSON: One JSON object per line.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"


class EnumChoice(click.Choice, Generic[E]):
    """Case-insensitive choice among the values of an `Enum`, converted to its member.

    Example:
        ``click.option("--color", type=EnumChoice(ColorMode))`` turns
        ``--color ALWAYS`` into ``ColorMode.ALWAYS``.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        super().__init__([str(member.value) for member in enum_cls], case_sensitive=False)

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> E:
        """Return the enum member for ``value`` (members pass through unchanged)."""
        if isinstance(value, self.enum_cls):
            return value
        choice = super().convert(value, param, ctx)
        return self.enum_cls(choice)
