# topmark:header:start
#
#   project      : Docify
#   file         : options.py
#   file_relpath : src/docify/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Docify CLI.

This module centralizes reusable options (verbosity, color, configuration and
path overrides) and their resolution logic, so commands and groups can stay
thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from docify.cli.errors import DocifyUsageError
from docify.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The level as a logging-compatible integer.

    Raises:
        DocifyUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags select TRACE, two select DEBUG, one selects INFO.
        One or more -q flags select ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DocifyUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet options (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color`` first, then ``FORCE_COLOR`` and
    ``NO_COLOR``, and finally enables color only when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color {auto,always,never} and --no-color options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config``. Missing config files are reported by
    the config resolver as configuration errors.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore local project config files (pyproject.toml, docify.toml).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(dir_okay=False),
        help="Additional config file(s) to load and merge, in order.",
    )(f)
    return f


def _path_option(
    flag: str,
    dest: str,
    help_text: str,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    return click.option(flag, dest, type=click.Path(), default=None, help=help_text)


def common_path_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the path override options shared by the build-oriented commands.

    The option destinations match the TOML key names of the ``[paths]``
    section, so the collected values can be passed straight to
    `MutableConfig.apply_cli_args`.
    """
    f = _path_option("--input", "input", "Input root holding the source modules.")(f)
    f = _path_option("--templates", "templates", "Template directory for the tool.")(f)
    f = _path_option("--exclude-file", "exclude_file", "Exclusion list file.")(f)
    f = _path_option("--output", "output", "Output root for rendered documents.")(f)
    f = _path_option("--readme", "readme", "Overview document path.")(f)
    f = _path_option("--summary", "summary", "Navigation document path.")(f)
    f = _path_option("--structure", "structure", "Structure descriptor (.gitbook.yaml) path.")(f)
    f = _path_option("--node-modules", "node_modules", "node_modules directory.")(f)
    f = click.option(
        "--sort/--no-sort",
        "sort",
        default=None,
        help="Sort directory entries by name while scanning (default: from config).",
    )(f)
    return f
