# topmark:header:start
#
#   project      : RichConsole
#   file         : model.py
#   file_relpath : src/richconsole/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for console output.

The configuration follows an immutable/mutable split:

- `MutableConsoleConfig` is a builder used while layering sources
  (defaults → config file → CLI overrides).
- `ConsoleConfig` is the frozen snapshot handed to the sink and console.

Output encoding lives here rather than in process-wide state: it is passed
explicitly to the sink that owns the output stream.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from richconsole.config.color import ColorMode
from richconsole.config.keys import Toml
from richconsole.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from richconsole.config.logging import RichConsoleLogger

logger: RichConsoleLogger = get_logger(__name__)

DEFAULT_ENCODING: str = "utf-8"


class ConfigError(ValueError):
    """Raised when a configuration source is missing, malformed or invalid."""


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Immutable console configuration.

    Attributes:
        color_mode (ColorMode): Whether to emit ANSI sequences (auto/always/never).
        width (int | None): Fixed line width used for alignment; None means the
            current terminal width.
        encoding (str | None): Output stream encoding; None leaves the stream
            untouched.
    """

    color_mode: ColorMode = ColorMode.AUTO
    width: int | None = None
    encoding: str | None = DEFAULT_ENCODING

    def thaw(self) -> MutableConsoleConfig:
        """Return a mutable copy of this configuration."""
        return MutableConsoleConfig(
            color_mode=self.color_mode,
            width=self.width,
            encoding=self.encoding,
        )


@dataclass
class MutableConsoleConfig:
    """Mutable builder for `ConsoleConfig`."""

    color_mode: ColorMode = ColorMode.AUTO
    width: int | None = None
    encoding: str | None = DEFAULT_ENCODING

    @classmethod
    def from_defaults(cls) -> MutableConsoleConfig:
        """Return a builder populated with runtime defaults."""
        return cls()

    def apply_table(self, table: Mapping[str, Any], *, source: str = "<table>") -> MutableConsoleConfig:
        """Overlay the values of a configuration table onto this builder.

        Unknown keys are logged and ignored so newer config files keep working
        with older releases.

        Args:
            table (Mapping[str, Any]): The ``[richconsole]`` table as a plain dict.
            source (str): Human-readable origin used in error messages.

        Returns:
            MutableConsoleConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        for key in table:
            if key not in Toml.ALL_KEYS:
                logger.warning("Ignoring unknown key %r in %s", key, source)

        if Toml.KEY_COLOR in table:
            raw = table[Toml.KEY_COLOR]
            if not isinstance(raw, str):
                raise ConfigError(f"{source}: '{Toml.KEY_COLOR}' must be a string")
            try:
                self.color_mode = ColorMode(raw.lower())
            except ValueError as exc:
                choices = ", ".join(m.value for m in ColorMode)
                raise ConfigError(
                    f"{source}: invalid '{Toml.KEY_COLOR}' value {raw!r} (expected one of: {choices})"
                ) from exc

        if Toml.KEY_WIDTH in table:
            width = table[Toml.KEY_WIDTH]
            if isinstance(width, bool) or not isinstance(width, int):
                raise ConfigError(f"{source}: '{Toml.KEY_WIDTH}' must be an integer")
            self.width = width

        if Toml.KEY_ENCODING in table:
            encoding = table[Toml.KEY_ENCODING]
            if not isinstance(encoding, str):
                raise ConfigError(f"{source}: '{Toml.KEY_ENCODING}' must be a string")
            self.encoding = encoding

        return self

    def sanitize(self) -> None:
        """Validate values that cannot be checked per key.

        Raises:
            ConfigError: If the width is not positive or the encoding is unknown.
        """
        if self.width is not None and self.width <= 0:
            raise ConfigError(f"width must be a positive integer, got {self.width}")
        if self.encoding is not None:
            try:
                codecs.lookup(self.encoding)
            except LookupError as exc:
                raise ConfigError(f"unknown encoding: {self.encoding!r}") from exc

    def freeze(self) -> ConsoleConfig:
        """Validate and freeze this builder into an immutable `ConsoleConfig`."""
        self.sanitize()
        return ConsoleConfig(
            color_mode=self.color_mode,
            width=self.width,
            encoding=self.encoding,
        )
