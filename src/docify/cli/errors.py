# topmark:header:start
#
#   project      : Docify
#   file         : errors.py
#   file_relpath : src/docify/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Docify CLI.

Usage:
    Commands convert fatal pipeline errors ([`DocifyError`][docify.core.errors.DocifyError])
    into `DocifyCliError` with `DocifyCliError.from_error`, so Click prints the
    message and exits with the error's code.

Styling:
    Errors prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from docify.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from docify.core.errors import DocifyError


class DocifyCliError(click.ClickException):
    """Base class for all Docify CLI errors."""

    exit_code: int = ExitCode.FAILURE

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code

    @classmethod
    def from_error(cls, error: DocifyError) -> DocifyCliError:
        """Wrap a fatal pipeline error, keeping its message and exit code."""
        return cls(error.message, exit_code=int(error.exit_code))

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class DocifyUsageError(DocifyCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR
