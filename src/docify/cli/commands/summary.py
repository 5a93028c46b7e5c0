# topmark:header:start
#
#   project      : Docify
#   file         : summary.py
#   file_relpath : src/docify/cli/commands/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify `summary` command.

Scans the input tree and prints the navigation document to stdout without
writing any file or running the documentation tool.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docify.cli.cmd_common import build_config_common, echo_diagnostics, freeze_config
from docify.cli.errors import DocifyCliError
from docify.cli.options import common_config_options, common_path_options
from docify.core.errors import DocifyError
from docify.pipeline.runner import scan_sources

if TYPE_CHECKING:
    from docify.cli.console import ConsoleLike
    from docify.config import Config
    from docify.pipeline.scanner import ScanResult


@click.command(
    name="summary",
    help="Print the navigation document (SUMMARY.md) for the input tree without writing it.",
)
@common_config_options
@common_path_options
def summary_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    **_overrides: object,
) -> None:
    """Scan the input tree and print the navigation document."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = freeze_config(
        build_config_common(ctx=ctx, no_config=no_config, config_paths=config_paths)
    )
    try:
        result: ScanResult = scan_sources(config)
    except DocifyError as e:
        raise DocifyCliError.from_error(e) from e

    console.print(result.document.render(), nl=False)
    echo_diagnostics(result.diagnostics)
