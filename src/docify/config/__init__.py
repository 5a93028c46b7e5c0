# topmark:header:start
#
#   project      : Docify
#   file         : __init__.py
#   file_relpath : src/docify/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify configuration: layered TOML loading, merge policy and logging setup.

Public surface:
    - `Config` / `MutableConfig`: frozen runtime snapshot and merge builder.
    - `CompilerSettings`: compiler options forwarded to the documentation tool.
    - `resolve_config`: defaults → local config files → ``--config`` files → CLI overrides.
"""

from __future__ import annotations

from docify.config.model import (
    ArgsLike,
    CompilerSettings,
    Config,
    MutableConfig,
    resolve_config,
)

__all__: list[str] = [
    "ArgsLike",
    "CompilerSettings",
    "Config",
    "MutableConfig",
    "resolve_config",
]
