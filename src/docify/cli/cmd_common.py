# topmark:header:start
#
#   project      : Docify
#   file         : cmd_common.py
#   file_relpath : src/docify/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands. They
avoid policy (which command exits with which code) and only encapsulate
plumbing: resolving the configuration from Click parameters and echoing
diagnostics.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from docify.cli.console import get_console_safely
from docify.cli.errors import DocifyCliError
from docify.config import resolve_config
from docify.config.keys import Toml
from docify.config.logging import get_logger
from docify.core.errors import DocifyError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docify.cli.console import ConsoleLike
    from docify.config import Config, MutableConfig
    from docify.config.logging import DocifyLogger
    from docify.core.diagnostics import Diagnostic

logger: DocifyLogger = get_logger(__name__)


def collect_cli_overrides(ctx: click.Context) -> dict[str, Any]:
    """Return the CLI overrides of ``ctx`` keyed by TOML key names.

    Options left out on the command line are ``None`` and leave the configured
    value in place.
    """
    keys: tuple[str, ...] = (*Toml.PATH_KEYS, Toml.KEY_SORT)
    return {key: ctx.params.get(key) for key in keys}


def build_config_common(
    *,
    ctx: click.Context,
    no_config: bool,
    config_paths: Iterable[str],
) -> MutableConfig:
    """Resolve the merged configuration draft from Click parameters.

    Raises:
        DocifyCliError: If the configuration cannot be resolved.
    """
    overrides: dict[str, Any] = collect_cli_overrides(ctx)
    logger.trace("CLI overrides: %s", overrides)
    try:
        return resolve_config(
            no_config=no_config,
            config_paths=list(config_paths),
            args=overrides,
        )
    except DocifyError as e:
        raise DocifyCliError.from_error(e) from e


def freeze_config(draft: MutableConfig) -> Config:
    """Freeze a draft, converting configuration errors into CLI errors."""
    try:
        return draft.freeze()
    except DocifyError as e:
        raise DocifyCliError.from_error(e) from e


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level stored by the group (WARNING when absent)."""
    if isinstance(ctx.obj, dict):
        return int(ctx.obj.get("verbosity_level", logging.WARNING))
    return logging.WARNING


def echo_diagnostics(diagnostics: Iterable[Diagnostic]) -> None:
    """Print each diagnostic on stderr, colored by level when color is enabled."""
    console: ConsoleLike = get_console_safely()
    for diag in diagnostics:
        line: str = diag.render()
        console.print_err(diag.level.color(line) if console.enable_color else line)
