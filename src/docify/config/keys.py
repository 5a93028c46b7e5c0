# topmark:header:start
#
#   project      : Docify
#   file         : keys.py
#   file_relpath : src/docify/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Docify configuration.

These constants are the external configuration API as it appears in
``docify.toml`` and in ``[tool.docify]`` inside ``pyproject.toml``. Renaming or
removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Docify configuration."""

    # [paths]
    SECTION_PATHS: Final[str] = "paths"

    KEY_INPUT: Final[str] = "input"
    KEY_TEMPLATES: Final[str] = "templates"
    KEY_EXCLUDE_FILE: Final[str] = "exclude_file"
    KEY_OUTPUT: Final[str] = "output"
    KEY_README: Final[str] = "readme"
    KEY_SUMMARY: Final[str] = "summary"
    KEY_STRUCTURE: Final[str] = "structure"
    KEY_NODE_MODULES: Final[str] = "node_modules"

    # [navigation]
    SECTION_NAVIGATION: Final[str] = "navigation"

    KEY_SOURCE_EXTENSION: Final[str] = "source_extension"
    KEY_DOC_EXTENSION: Final[str] = "doc_extension"
    KEY_INDENT: Final[str] = "indent"
    KEY_SORT: Final[str] = "sort"

    # [docgen]
    SECTION_DOCGEN: Final[str] = "docgen"

    KEY_NODE: Final[str] = "node"
    KEY_REMAPPINGS: Final[str] = "remappings"

    # [docgen.optimizer]
    SECTION_OPTIMIZER: Final[str] = "optimizer"

    KEY_ENABLED: Final[str] = "enabled"
    KEY_RUNS: Final[str] = "runs"

    PATH_KEYS: Final[tuple[str, ...]] = (
        KEY_INPUT,
        KEY_TEMPLATES,
        KEY_EXCLUDE_FILE,
        KEY_OUTPUT,
        KEY_README,
        KEY_SUMMARY,
        KEY_STRUCTURE,
        KEY_NODE_MODULES,
    )
