# topmark:header:start
#
#   project      : Docify
#   file         : exit_codes.py
#   file_relpath : src/docify/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Docify CLI.

Docify aligns with the BSD `sysexits` convention where practical, so that build
scripts and CI jobs can tell a missing input tree apart from a failing
documentation tool.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Docify CLI.

    Attributes:
        SUCCESS: The build completed.
        FAILURE: Generic failure, also used by ``build --strict`` when recoverable
            diagnostics were collected.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: A required input (directory or exclusion list) is missing
            or unreadable. Mirrors BSD ``EX_NOINPUT (66)``.
        UNAVAILABLE: The compiler module cannot be resolved or the documentation
            tool cannot be launched. Mirrors BSD ``EX_UNAVAILABLE (69)``.
        TOOL_ERROR: The documentation tool reported an error. Mirrors BSD
            ``EX_SOFTWARE (70)``.
        IO_ERROR: A generated document could not be written. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNAVAILABLE = 69  # EX_UNAVAILABLE
    TOOL_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
