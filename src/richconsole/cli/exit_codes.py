# topmark:header:start
#
#   project      : RichConsole
#   file         : exit_codes.py
#   file_relpath : src/richconsole/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the RichConsole CLI.

RichConsole aligns with the BSD `sysexits` convention so that other tooling
can interpret failures consistently. Malformed *markup* is never an error:
it renders leniently and the command exits with `SUCCESS`.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the RichConsole CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        IO_ERROR: Reading input or writing output failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid/malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
