# topmark:header:start
#
#   project      : Docify
#   file         : constants.py
#   file_relpath : src/docify/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DOCIFY_VERSION: str = get_version("docify")

# Config file names looked up in the working directory.
PYPROJECT_TOML_NAME: str = "pyproject.toml"
DOCIFY_TOML_NAME: str = "docify.toml"
PYPROJECT_TOOL_SECTION: str = "tool.docify"

NAVIGATION_HEADING: str = "# Summary"

OVERVIEW_TITLE: str = "Solidity Project"

# Location of the documentation tool entry point and of the compiler module,
# both relative to the node_modules directory.
DOCGEN_CLI_RELPATH: tuple[str, ...] = ("solidity-docgen", "dist", "cli.js")
SOLC_MODULE_NAME: str = "solc"

VALUE_NOT_SET: str = "<not set>"
