# topmark:header:start
#
#   project      : Docify
#   file         : __init__.py
#   file_relpath : src/docify/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify CLI package.

This package groups all Click command definitions and supporting utilities
for the Docify command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        docify = "docify.cli.main:cli"

All subcommands live in [`docify.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
