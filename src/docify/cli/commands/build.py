# topmark:header:start
#
#   project      : Docify
#   file         : build.py
#   file_relpath : src/docify/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify `build` command.

Runs the whole documentation pipeline: validate the input and template
directories, load the exclusion list, write ``.gitbook.yaml`` and the overview
page, scan the sources into the navigation document, run ``solidity-docgen``
and normalize every rendered document.

Exit Status:
    SUCCESS (0): The documentation tree was built.
    FAILURE (1): ``--strict`` was given and recoverable diagnostics were collected.
    USAGE_ERROR (64): Invalid invocation.
    FILE_NOT_FOUND (66): Input/template directory missing or exclusion list unreadable.
    UNAVAILABLE (69): Compiler module missing or the tool could not be started.
    TOOL_ERROR (70): The tool wrote to its error stream or exited with a nonzero status.
    IO_ERROR (74): The overview, navigation or structure document could not be written.
    CONFIG_ERROR (78): The configuration is missing or malformed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from docify.cli.cmd_common import (
    build_config_common,
    echo_diagnostics,
    freeze_config,
    get_effective_verbosity,
)
from docify.cli.errors import DocifyCliError
from docify.cli.options import common_config_options, common_path_options
from docify.config.logging import get_logger
from docify.core.errors import DocifyError
from docify.core.exit_codes import ExitCode
from docify.pipeline.runner import run_build

if TYPE_CHECKING:
    from docify.cli.console import ConsoleLike
    from docify.config import Config
    from docify.core.diagnostics import DiagnosticStats
    from docify.pipeline.runner import BuildResult

logger = get_logger(__name__)


@click.command(
    name="build",
    help=(
        "Build the documentation tree (overview, summary, rendered contracts). "
        "Any output of solidity-docgen on stderr, or a nonzero exit status "
        "even with an empty stderr, is fatal (exit status 70)."
    ),
)
@common_config_options
@common_path_options
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 1 when any diagnostic was reported.",
)
def build_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    strict: bool,
    **_overrides: object,
) -> None:
    """Build the documentation tree.

    The tool run is fatal when solidity-docgen writes to stderr or exits with a
    nonzero status; an empty stderr does not make a failing exit status pass.

    Args:
        no_config (bool): If True, skip loading local config files.
        config_paths (tuple[str, ...]): Additional TOML config files to merge.
        strict (bool): Turn recoverable diagnostics into a failing exit status.
        **_overrides (object): Path and sort overrides, read back from the Click context.

    Raises:
        DocifyCliError: For every fatal pipeline error, carrying its exit code.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = freeze_config(
        build_config_common(ctx=ctx, no_config=no_config, config_paths=config_paths)
    )
    logger.trace("Build config: %s", config)

    try:
        result: BuildResult = run_build(config)
    except DocifyError as e:
        raise DocifyCliError.from_error(e) from e

    echo_diagnostics(result.diagnostics)
    stats: DiagnosticStats = result.diagnostics.stats()
    outcome: str = (
        f"✅ Documentation built in {config.output_dir}: "
        f"{len(result.scan.document.leaves)} contract(s), "
        f"{len(result.normalize.rewritten)} document(s) normalized"
    )
    if stats.total:
        outcome += f" ({stats.describe()})"

    if vlevel <= logging.WARNING:
        console.print(console.styled(f"{outcome}.", fg="green", bold=True))
    if vlevel <= logging.INFO:
        console.print(f"    overview : {config.readme_file}")
        console.print(f"    summary  : {config.summary_file}")
        console.print(f"    gitbook  : {config.structure_file}")

    if strict and stats.total:
        console.error(f"{stats.describe()} reported; failing because of --strict.")
        ctx.exit(ExitCode.FAILURE)
