# topmark:header:start
#
#   project      : Docify
#   file         : normalize.py
#   file_relpath : src/docify/cli/commands/normalize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify `normalize` command.

Collapses blank-line runs in rendered markdown documents. With no PATHS, the
configured output root is normalized.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from docify.cli.cmd_common import (
    build_config_common,
    echo_diagnostics,
    freeze_config,
    get_effective_verbosity,
)
from docify.cli.options import common_config_options
from docify.pipeline.normalizer import MarkdownNormalizer

if TYPE_CHECKING:
    from docify.cli.console import ConsoleLike
    from docify.config import Config
    from docify.pipeline.normalizer import NormalizeResult


@click.command(
    name="normalize",
    help="Normalize blank lines in markdown documents (default: the configured output root).",
)
@common_config_options
@click.argument("paths", nargs=-1, type=click.Path())
def normalize_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    paths: tuple[str, ...],
) -> None:
    """Normalize the given files and directories.

    Args:
        no_config (bool): If True, skip loading local config files.
        config_paths (tuple[str, ...]): Additional TOML config files to merge.
        paths (tuple[str, ...]): Files or directories to normalize.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = freeze_config(
        build_config_common(ctx=ctx, no_config=no_config, config_paths=config_paths)
    )
    targets: list[Path] = [Path(p) for p in paths] or [config.output_dir]

    normalizer = MarkdownNormalizer(config.doc_extension)
    for target in targets:
        normalizer.normalize(target)
    result: NormalizeResult = normalizer.result

    echo_diagnostics(result.diagnostics)

    vlevel: int = get_effective_verbosity(ctx)
    if vlevel <= logging.INFO:
        for path in result.rewritten:
            console.print(f"✏️  Normalized {path}")
    if vlevel <= logging.WARNING:
        console.print(
            console.styled(
                f"✅ {len(result.rewritten)} document(s) normalized, "
                f"{len(result.unchanged)} already normalized.",
                fg="green",
            )
        )
