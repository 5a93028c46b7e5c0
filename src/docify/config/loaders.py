# topmark:header:start
#
#   project      : Docify
#   file         : loaders.py
#   file_relpath : src/docify/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading Docify configuration from on-disk
TOML files (``docify.toml`` / ``pyproject.toml``) and for serializing a
configuration table back to TOML text. Parsing is done with `tomlkit` and
returned as plain `dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docify.config.keys import Toml
from docify.config.logging import get_logger
from docify.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from docify.config.logging import DocifyLogger

TomlTable = dict[str, Any]

logger: DocifyLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Docify's runtime defaults as a Python dict.

    This function performs no I/O. Relative paths are interpreted against the
    working directory of the build.

    Returns:
        A new TOML-table-compatible dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_PATHS: {
            Toml.KEY_INPUT: "box/contracts",
            Toml.KEY_TEMPLATES: "box/docgen",
            Toml.KEY_EXCLUDE_FILE: "box/docgen/exclude.txt",
            Toml.KEY_OUTPUT: "docs/solidity/contracts",
            Toml.KEY_README: "docs/solidity/README.md",
            Toml.KEY_SUMMARY: "docs/solidity/SUMMARY.md",
            Toml.KEY_STRUCTURE: ".gitbook.yaml",
            Toml.KEY_NODE_MODULES: "node_modules",
        },
        Toml.SECTION_NAVIGATION: {
            Toml.KEY_SOURCE_EXTENSION: ".sol",
            Toml.KEY_DOC_EXTENSION: ".md",
            Toml.KEY_INDENT: "  ",
            Toml.KEY_SORT: True,
        },
        Toml.SECTION_DOCGEN: {
            Toml.KEY_NODE: "node",
            Toml.KEY_REMAPPINGS: ["@openzeppelin/=./node_modules/@openzeppelin/"],
            Toml.SECTION_OPTIMIZER: {
                Toml.KEY_ENABLED: True,
                Toml.KEY_RUNS: 200,
            },
        },
    }


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``docify.toml`` or ``pyproject.toml``).
        strict: If True, unreadable or malformed files raise instead of
            yielding an empty table.

    Returns:
        The parsed TOML content, or an empty dict on failure when not strict.

    Raises:
        ConfigError: If ``strict`` is set and the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        if strict:
            raise ConfigError(f"Cannot read config file {path}: {e}", path=path) from e
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        if strict:
            raise ConfigError(f"Malformed config file {path}: {e}", path=path) from e
        return {}


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            k: str = k_any if isinstance(k_any, str) else str(k_any)
            out[k] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, (list, tuple)):
        seq: list[object] = list(cast("list[object]", value))
        return [_strip_none_for_toml(v) for v in seq if v is not None]

    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict: The table to serialize. ``None`` values are omitted.

    Returns:
        The TOML document text.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
