# topmark:header:start
#
#   project      : Docify
#   file         : getters.py
#   file_relpath : src/docify/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed, checked accessors for TOML tables.

Each helper returns ``None`` when the key is absent and records a warning
diagnostic (instead of raising) when a value has the wrong type, so one bad key
never prevents the rest of a config file from loading.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

if TYPE_CHECKING:
    from docify.config.loaders import TomlTable
    from docify.config.logging import DocifyLogger
    from docify.core.diagnostics import DiagnosticLog


def _loc(where: str, key: str) -> str:
    return f"{where}.{key}" if where else key


def _report(
    loc: str,
    expected: str,
    value: Any,
    *,
    diagnostics: DiagnosticLog,
    logger: DocifyLogger,
) -> None:
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected {expected} in {loc}, got {type(value).__name__}: {value}")


def get_table_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: DocifyLogger,
) -> TomlTable:
    """Return a sub-table, or an empty dict when missing or not a table."""
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    _report(_loc(where, key), "table", value, diagnostics=diagnostics, logger=logger)
    return {}


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: DocifyLogger,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    _report(_loc(where, key), "string", value, diagnostics=diagnostics, logger=logger)
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: DocifyLogger,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    _report(_loc(where, key), "bool", value, diagnostics=diagnostics, logger=logger)
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: DocifyLogger,
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        `bool` is rejected since it is a subclass of `int`.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    _report(_loc(where, key), "int", value, diagnostics=diagnostics, logger=logger)
    return None


def get_string_list_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: DocifyLogger,
) -> list[str] | None:
    """Return an optional list of strings, dropping (and reporting) non-string items."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    loc: Final[str] = _loc(where, key)
    if not isinstance(value, list):
        _report(loc, "list of strings", value, diagnostics=diagnostics, logger=logger)
        return None
    out: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            out.append(item)
        else:
            _report(f"{loc}[]", "string", item, diagnostics=diagnostics, logger=logger)
    return out


def report_unknown_keys(
    table: TomlTable,
    known: tuple[str, ...],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: DocifyLogger,
) -> None:
    """Record a warning for every key of ``table`` not listed in ``known``."""
    for key in table:
        if key not in known:
            loc: str = f"{where}.{key}" if where else key
            logger.warning("Unknown config key: %s", loc)
            diagnostics.add_warning(f"Unknown config key: {loc}")
