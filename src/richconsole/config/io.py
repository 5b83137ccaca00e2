# topmark:header:start
#
#   project      : RichConsole
#   file         : io.py
#   file_relpath : src/richconsole/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Configuration is read from either:

- ``richconsole.toml`` (table ``[richconsole]``), or
- ``pyproject.toml`` (table ``[tool.richconsole]``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from richconsole.config.logging import get_logger
from richconsole.config.model import ConfigError, ConsoleConfig, MutableConsoleConfig
from richconsole.constants import (
    CONFIG_FILE_NAME,
    CONFIG_SECTION,
    PYPROJECT_FILE_NAME,
    PYPROJECT_SECTION,
)

if TYPE_CHECKING:
    from richconsole.config.logging import RichConsoleLogger

logger: RichConsoleLogger = get_logger(__name__)


def find_config_file(start: Path | None = None) -> Path | None:
    """Search ``start`` and its parents for a configuration file.

    In each directory ``richconsole.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts if it has a ``[tool.richconsole]`` table.

    Args:
        start (Path | None): Directory to start from (defaults to the CWD).

    Returns:
        Path | None: The first matching file, or None.
    """
    current: Path = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Found config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                doc = _read_toml(pyproject)
            except ConfigError as exc:
                logger.warning("Skipping unreadable %s: %s", pyproject, exc)
                continue
            if _extract_section(doc, pyproject) is not None:
                logger.debug("Found [tool.richconsole] in %s", pyproject)
                return pyproject
    return None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc


def _extract_section(doc: dict[str, Any], path: Path) -> dict[str, Any] | None:
    section: Any
    if path.name == PYPROJECT_FILE_NAME:
        section = doc.get(PYPROJECT_SECTION[0], {}).get(PYPROJECT_SECTION[1])
    else:
        section = doc.get(CONFIG_SECTION)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: the richconsole section must be a table")
    return section


def load_config_table(path: Path) -> dict[str, Any]:
    """Return the richconsole table of ``path`` as a plain dict.

    A file without the section yields an empty dict.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    doc = _read_toml(path)
    section = _extract_section(doc, path)
    logger.trace("Loaded config table from %s: %r", path, section)
    return section or {}


def load_config(
    path: Path | None = None,
    *,
    discover: bool = True,
    overrides: dict[str, Any] | None = None,
) -> ConsoleConfig:
    """Build a frozen configuration from defaults, a file and overrides.

    Args:
        path (Path | None): Explicit configuration file. When None and
            ``discover`` is True, `find_config_file` is used.
        discover (bool): Whether to search the CWD and its parents.
        overrides (dict[str, Any] | None): Final layer (typically CLI options);
            entries whose value is None are ignored.

    Returns:
        ConsoleConfig: The effective configuration.

    Raises:
        ConfigError: On unreadable or invalid configuration.
    """
    builder: MutableConsoleConfig = MutableConsoleConfig.from_defaults()

    source: Path | None = path
    if source is None and discover:
        source = find_config_file()
    if source is not None:
        if not source.is_file():
            raise ConfigError(f"config file not found: {source}")
        builder.apply_table(load_config_table(source), source=str(source))

    if overrides:
        builder.apply_table(
            {k: v for k, v in overrides.items() if v is not None}, source="command line"
        )

    return builder.freeze()
