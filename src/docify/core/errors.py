# topmark:header:start
#
#   project      : Docify
#   file         : errors.py
#   file_relpath : src/docify/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fatal pipeline errors.

Every error raised here aborts the build. Each class carries the exit code the
CLI reports for it; recoverable per-path problems are collected as
[`Diagnostic`][docify.core.diagnostics.Diagnostic] values instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docify.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


class DocifyError(Exception):
    """Base class for all fatal Docify errors."""

    exit_code: ExitCode = ExitCode.FAILURE

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class MissingPathError(DocifyError):
    """A required input or template directory does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ExclusionFileError(DocifyError):
    """The exclusion list cannot be read."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CompilerModuleNotFoundError(DocifyError):
    """The compiler module required by the documentation tool cannot be resolved."""

    exit_code = ExitCode.UNAVAILABLE


class ToolLaunchError(DocifyError):
    """The documentation tool process could not be started."""

    exit_code = ExitCode.UNAVAILABLE


class ToolFailedError(DocifyError):
    """The documentation tool wrote to its error stream or exited with a nonzero status."""

    exit_code = ExitCode.TOOL_ERROR

    def __init__(self, message: str, *, returncode: int, stderr: str) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class DocumentWriteError(DocifyError):
    """A generated document (overview, navigation, structure descriptor) could not be written."""

    exit_code = ExitCode.IO_ERROR


class ConfigError(DocifyError):
    """Configuration is missing or malformed."""

    exit_code = ExitCode.CONFIG_ERROR
