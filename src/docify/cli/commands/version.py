# topmark:header:start
#
#   project      : Docify
#   file         : version.py
#   file_relpath : src/docify/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify `version` command.

Prints the current Docify version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from docify.cli.cmd_common import get_effective_verbosity
from docify.constants import DOCIFY_VERSION

if TYPE_CHECKING:
    from docify.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Docify.",
)
def version_command() -> None:
    """Show the current version of Docify."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("Docify version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DOCIFY_VERSION, bold=True)}")
    else:
        console.print(console.styled(DOCIFY_VERSION, bold=True))
