# topmark:header:start
#
#   project      : Docify
#   file         : console.py
#   file_relpath : src/docify/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program output for the Docify CLI.

Commands write what the user asked for (the build summary, the navigation
document, the merged config) through a console stored in ``ctx.obj``. Logging
is kept for internal diagnostics and goes to stderr on its own handler.

Streams are looked up when writing, not when the console is created, so the
console follows ``sys.stdout``/``sys.stderr`` replacements made by test runners.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What commands need from a console."""

    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output to stdout."""
        ...

    def print_err(self, text: str, *, nl: bool = True) -> None:
        """Write pre-styled text to stderr."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style` arguments, if color is enabled."""
        ...


class ClickConsole:
    """`ConsoleLike` implementation on top of `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styles; plain text otherwise.
        out (TextIO | None): Fixed stdout replacement (None follows ``sys.stdout``).
        err (TextIO | None): Fixed stderr replacement (None follows ``sys.stderr``).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        """Stream used for program output."""
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        """Stream used for warnings and errors."""
        return self._err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def print_err(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr as is."""
        click.echo(text, nl=nl, file=self.err, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr in yellow."""
        self.print_err(self.styled(text, fg="yellow"), nl=nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr in bright red."""
        self.print_err(self.styled(text, fg="bright_red"), nl=nl)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with ``style_kwargs`` (unchanged when color is off)."""
        return click.style(text, **style_kwargs) if self.enable_color else text


def get_console_safely() -> ConsoleLike:
    """Return the console of the active Click context, or a plain one.

    Helpers called outside a command (from tests, for instance) get a new
    `ClickConsole` without color.
    """
    ctx: click.Context | None = click.get_current_context(silent=True)
    obj: Any = ctx.obj if ctx is not None else None
    if isinstance(obj, dict) and "console" in obj:
        console: ConsoleLike = obj["console"]
        return console
    return ClickConsole(enable_color=False)
