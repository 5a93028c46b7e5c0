# topmark:header:start
#
#   project      : Docify
#   file         : dump_config.py
#   file_relpath : src/docify/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify `dump-config` command.

Emits the effective Docify configuration as TOML after applying defaults,
local config files, explicit ``--config`` files and CLI overrides. The TOML is
wrapped between ``# === BEGIN ===`` and ``# === END ===`` markers for easy
parsing in tests or tooling. Paths below the working directory are printed
relative to it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from docify.cli.cmd_common import build_config_common, echo_diagnostics, freeze_config
from docify.cli.options import common_config_options, common_path_options
from docify.config.loaders import to_toml
from docify.config.logging import get_logger

if TYPE_CHECKING:
    from docify.cli.console import ConsoleLike
    from docify.config import Config

logger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged Docify configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
)
@common_config_options
@common_path_options
def dump_config_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    **_overrides: object,
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        no_config (bool): If True, skip loading local config files.
        config_paths (tuple[str, ...]): Additional TOML config files to merge.
        **_overrides (object): Path and sort overrides, read back from the Click context.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = freeze_config(
        build_config_common(ctx=ctx, no_config=no_config, config_paths=config_paths)
    )
    logger.trace("Config after merging CLI and discovered config: %s", config)

    echo_diagnostics(config.diagnostics)

    merged_config: str = to_toml(config.to_toml_dict(relative_to=Path.cwd()))
    console.print("# Merged Docify config (TOML):")
    console.print()
    console.print("# === BEGIN ===")
    console.print(merged_config.rstrip("\n"))
    console.print("# === END ===")
