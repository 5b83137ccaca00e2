# topmark:header:start
#
#   project      : RichConsole
#   file         : constants.py
#   file_relpath : src/richconsole/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RichConsole Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    RICHCONSOLE_VERSION: str = get_version("richconsole")
except PackageNotFoundError:  # running from a source checkout
    RICHCONSOLE_VERSION = "0.0.0+unknown"

LOG_LEVEL_ENV_VAR: str = "RICHCONSOLE_LOG_LEVEL"

# Configuration sources, in lookup order within a directory
CONFIG_FILE_NAME: str = "richconsole.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
CONFIG_SECTION: str = "richconsole"
PYPROJECT_SECTION: tuple[str, str] = ("tool", "richconsole")

# Markup control sequences
CLOSE_TAG: str = "[/]"
ESCAPED_OPEN_BRACKET: str = "\\["
ESCAPED_BACKSLASH: str = "\\\\"
OPEN_BRACKET: str = "["
CLOSE_BRACKET: str = "]"
BACKSLASH: str = "\\"

SGR_RESET: str = "\x1b[0m"
