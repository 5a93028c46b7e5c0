# topmark:header:start
#
#   project      : Docify
#   file         : model.py
#   file_relpath : src/docify/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the build pipeline.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.
    - `CompilerSettings`: the compiler options forwarded to the documentation tool.

Path semantics:
    - Paths declared in a config file are resolved against that file's directory.
    - CLI paths and runtime defaults are resolved against the invocation CWD.
    - Paths are stored absolute, so later layers never need to know where an
      earlier value came from.

Precedence (lowest → highest): defaults, ``pyproject.toml`` ``[tool.docify]``,
``docify.toml``, explicit ``--config`` files in order, CLI overrides.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docify.config.getters import (
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_list_or_none_checked,
    get_string_value_or_none_checked,
    get_table_checked,
    report_unknown_keys,
)
from docify.config.keys import Toml
from docify.config.loaders import load_defaults_dict, load_toml_dict
from docify.config.logging import get_logger
from docify.constants import DOCIFY_TOML_NAME, PYPROJECT_TOML_NAME
from docify.core.diagnostics import Diagnostic, DiagnosticLog
from docify.core.errors import ConfigError

if TYPE_CHECKING:
    from docify.config.loaders import TomlTable
    from docify.config.logging import DocifyLogger

# ArgsLike: generic mapping accepted by `MutableConfig.apply_cli_args`. Keys are the
# TOML key names from `Toml` (e.g. "input", "summary", "sort").
ArgsLike = Mapping[str, Any]

logger: DocifyLogger = get_logger(__name__)


def abs_path_from(base: Path, raw: str | os.PathLike[str]) -> Path:
    """Return an absolute Path for *raw* using *base* if *raw* is relative."""
    p = Path(raw)
    return (base / p).resolve() if not p.is_absolute() else p.resolve()


@dataclass(frozen=True, slots=True)
class CompilerSettings:
    """Compiler settings handed to the documentation tool.

    Attributes:
        remappings (tuple[str, ...]): Import remapping table (``prefix=target`` entries).
        optimizer_enabled (bool): Whether the optimizer is enabled.
        optimizer_runs (int): Optimizer run count.
    """

    remappings: tuple[str, ...] = ()
    optimizer_enabled: bool = True
    optimizer_runs: int = 200

    def to_json(self) -> str:
        """Serialize the settings in the shape the compiler expects."""
        return json.dumps(
            {
                "remappings": list(self.remappings),
                "optimizer": {
                    "enabled": self.optimizer_enabled,
                    "runs": self.optimizer_runs,
                },
            }
        )


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for a documentation build.

    Attributes:
        input_dir (Path): Input root holding the documentable source modules.
        templates_dir (Path): Template directory handed to the documentation tool.
        exclude_file (Path): Newline-delimited list of input-root-relative paths to skip.
        output_dir (Path): Output root where the documentation tool writes rendered documents.
        readme_file (Path): Overview document path.
        summary_file (Path): Navigation document path.
        structure_file (Path): Structure descriptor (``.gitbook.yaml``) path.
        node_modules_dir (Path): Directory holding the tool and compiler packages.
        source_extension (str): Extension identifying documentable modules (e.g. ``.sol``).
        doc_extension (str): Extension of rendered documents (e.g. ``.md``).
        indent (str): Indent unit of the navigation document; repeated once per depth level.
        sort_entries (bool): Sort directory children by name while scanning.
        node_executable (str): Executable used to run the documentation tool.
        compiler (CompilerSettings): Settings forwarded to the compiler.
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading config.
    """

    input_dir: Path
    templates_dir: Path
    exclude_file: Path
    output_dir: Path
    readme_file: Path
    summary_file: Path
    structure_file: Path
    node_modules_dir: Path
    source_extension: str
    doc_extension: str
    indent: str
    sort_entries: bool
    node_executable: str
    compiler: CompilerSettings
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            input_dir=self.input_dir,
            templates_dir=self.templates_dir,
            exclude_file=self.exclude_file,
            output_dir=self.output_dir,
            readme_file=self.readme_file,
            summary_file=self.summary_file,
            structure_file=self.structure_file,
            node_modules_dir=self.node_modules_dir,
            source_extension=self.source_extension,
            doc_extension=self.doc_extension,
            indent=self.indent,
            sort_entries=self.sort_entries,
            node_executable=self.node_executable,
            remappings=list(self.compiler.remappings),
            optimizer_enabled=self.compiler.optimizer_enabled,
            optimizer_runs=self.compiler.optimizer_runs,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )

    def to_toml_dict(self, relative_to: Path | None = None) -> TomlTable:
        """Return this config in the TOML schema used by ``docify.toml``.

        Args:
            relative_to (Path | None): When given, paths below this directory are
                rendered relative to it; other paths stay absolute.

        Returns:
            TomlTable: A dict ready for `to_toml`.
        """

        def _render(p: Path) -> str:
            if relative_to is not None:
                try:
                    return p.relative_to(relative_to.resolve()).as_posix()
                except ValueError:
                    pass
            return p.as_posix()

        return {
            Toml.SECTION_PATHS: {
                Toml.KEY_INPUT: _render(self.input_dir),
                Toml.KEY_TEMPLATES: _render(self.templates_dir),
                Toml.KEY_EXCLUDE_FILE: _render(self.exclude_file),
                Toml.KEY_OUTPUT: _render(self.output_dir),
                Toml.KEY_README: _render(self.readme_file),
                Toml.KEY_SUMMARY: _render(self.summary_file),
                Toml.KEY_STRUCTURE: _render(self.structure_file),
                Toml.KEY_NODE_MODULES: _render(self.node_modules_dir),
            },
            Toml.SECTION_NAVIGATION: {
                Toml.KEY_SOURCE_EXTENSION: self.source_extension,
                Toml.KEY_DOC_EXTENSION: self.doc_extension,
                Toml.KEY_INDENT: self.indent,
                Toml.KEY_SORT: self.sort_entries,
            },
            Toml.SECTION_DOCGEN: {
                Toml.KEY_NODE: self.node_executable,
                Toml.KEY_REMAPPINGS: list(self.compiler.remappings),
                Toml.SECTION_OPTIMIZER: {
                    Toml.KEY_ENABLED: self.compiler.optimizer_enabled,
                    Toml.KEY_RUNS: self.compiler.optimizer_runs,
                },
            },
        }


# ------------------ Mutable builder ------------------

_PATH_FIELDS: dict[str, str] = {
    Toml.KEY_INPUT: "input_dir",
    Toml.KEY_TEMPLATES: "templates_dir",
    Toml.KEY_EXCLUDE_FILE: "exclude_file",
    Toml.KEY_OUTPUT: "output_dir",
    Toml.KEY_README: "readme_file",
    Toml.KEY_SUMMARY: "summary_file",
    Toml.KEY_STRUCTURE: "structure_file",
    Toml.KEY_NODE_MODULES: "node_modules_dir",
}

_SCALAR_FIELDS: tuple[str, ...] = (
    "source_extension",
    "doc_extension",
    "indent",
    "sort_entries",
    "node_executable",
    "remappings",
    "optimizer_enabled",
    "optimizer_runs",
)


@dataclass
class MutableConfig:
    """Mutable configuration draft used while merging config layers.

    Every field defaults to ``None`` (unset), so `merge_with` can apply a strict
    last-set-wins policy. `freeze` requires every field to be set; start from
    `MutableConfig.from_defaults` to guarantee that.
    """

    input_dir: Path | None = None
    templates_dir: Path | None = None
    exclude_file: Path | None = None
    output_dir: Path | None = None
    readme_file: Path | None = None
    summary_file: Path | None = None
    structure_file: Path | None = None
    node_modules_dir: Path | None = None
    source_extension: str | None = None
    doc_extension: str | None = None
    indent: str | None = None
    sort_entries: bool | None = None
    node_executable: str | None = None
    remappings: list[str] | None = None
    optimizer_enabled: bool | None = None
    optimizer_runs: int | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ------------------ construction ------------------

    @classmethod
    def from_defaults(cls, cwd: Path | None = None) -> MutableConfig:
        """Return a draft holding the runtime defaults, resolved against ``cwd``."""
        base: Path = (cwd or Path.cwd()).resolve()
        return cls.from_toml_dict(load_defaults_dict(), base=base, where="defaults")

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        base: Path,
        where: str = "",
    ) -> MutableConfig:
        """Parse a Docify TOML table into a draft.

        Args:
            data (TomlTable): The Docify table (top level of ``docify.toml`` or
                ``[tool.docify]``).
            base (Path): Directory against which relative paths are resolved.
            where (str): Label used in diagnostics (usually the config file path).

        Returns:
            MutableConfig: A draft with only the keys present in ``data`` set.
        """
        draft = cls()
        diags: DiagnosticLog = draft.diagnostics
        prefix: str = f"{where}:" if where else ""

        report_unknown_keys(
            data,
            (Toml.SECTION_PATHS, Toml.SECTION_NAVIGATION, Toml.SECTION_DOCGEN),
            where=where,
            diagnostics=diags,
            logger=logger,
        )

        paths: TomlTable = get_table_checked(
            data, Toml.SECTION_PATHS, where=where, diagnostics=diags, logger=logger
        )
        report_unknown_keys(
            paths,
            Toml.PATH_KEYS,
            where=f"{prefix}{Toml.SECTION_PATHS}",
            diagnostics=diags,
            logger=logger,
        )
        for key, attr in _PATH_FIELDS.items():
            raw: str | None = get_string_value_or_none_checked(
                paths,
                key,
                where=f"{prefix}{Toml.SECTION_PATHS}",
                diagnostics=diags,
                logger=logger,
            )
            if raw is not None:
                setattr(draft, attr, abs_path_from(base, raw))

        nav_where: str = f"{prefix}{Toml.SECTION_NAVIGATION}"
        nav: TomlTable = get_table_checked(
            data, Toml.SECTION_NAVIGATION, where=where, diagnostics=diags, logger=logger
        )
        report_unknown_keys(
            nav,
            (Toml.KEY_SOURCE_EXTENSION, Toml.KEY_DOC_EXTENSION, Toml.KEY_INDENT, Toml.KEY_SORT),
            where=nav_where,
            diagnostics=diags,
            logger=logger,
        )
        draft.source_extension = get_string_value_or_none_checked(
            nav, Toml.KEY_SOURCE_EXTENSION, where=nav_where, diagnostics=diags, logger=logger
        )
        draft.doc_extension = get_string_value_or_none_checked(
            nav, Toml.KEY_DOC_EXTENSION, where=nav_where, diagnostics=diags, logger=logger
        )
        draft.indent = get_string_value_or_none_checked(
            nav, Toml.KEY_INDENT, where=nav_where, diagnostics=diags, logger=logger
        )
        draft.sort_entries = get_bool_value_or_none_checked(
            nav, Toml.KEY_SORT, where=nav_where, diagnostics=diags, logger=logger
        )

        docgen_where: str = f"{prefix}{Toml.SECTION_DOCGEN}"
        docgen: TomlTable = get_table_checked(
            data, Toml.SECTION_DOCGEN, where=where, diagnostics=diags, logger=logger
        )
        report_unknown_keys(
            docgen,
            (Toml.KEY_NODE, Toml.KEY_REMAPPINGS, Toml.SECTION_OPTIMIZER),
            where=docgen_where,
            diagnostics=diags,
            logger=logger,
        )
        draft.node_executable = get_string_value_or_none_checked(
            docgen, Toml.KEY_NODE, where=docgen_where, diagnostics=diags, logger=logger
        )
        draft.remappings = get_string_list_or_none_checked(
            docgen, Toml.KEY_REMAPPINGS, where=docgen_where, diagnostics=diags, logger=logger
        )

        opt_where: str = f"{docgen_where}.{Toml.SECTION_OPTIMIZER}"
        optimizer: TomlTable = get_table_checked(
            docgen, Toml.SECTION_OPTIMIZER, where=docgen_where, diagnostics=diags, logger=logger
        )
        report_unknown_keys(
            optimizer,
            (Toml.KEY_ENABLED, Toml.KEY_RUNS),
            where=opt_where,
            diagnostics=diags,
            logger=logger,
        )
        draft.optimizer_enabled = get_bool_value_or_none_checked(
            optimizer, Toml.KEY_ENABLED, where=opt_where, diagnostics=diags, logger=logger
        )
        runs: int | None = get_int_value_or_none_checked(
            optimizer, Toml.KEY_RUNS, where=opt_where, diagnostics=diags, logger=logger
        )
        if runs is not None and runs < 0:
            logger.warning("Ignoring negative optimizer run count in %s: %d", opt_where, runs)
            diags.add_warning(f"Ignoring negative optimizer run count in {opt_where}: {runs}")
            runs = None
        draft.optimizer_runs = runs

        return draft

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig | None:
        """Load a draft from ``docify.toml`` or from ``[tool.docify]`` in ``pyproject.toml``.

        Args:
            path (Path): Path to the TOML file.
            strict (bool): Raise `ConfigError` when the file cannot be read or parsed.

        Returns:
            MutableConfig | None: The draft, or None when a ``pyproject.toml`` has
                no ``[tool.docify]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path, strict=strict)

        if path.name == PYPROJECT_TOML_NAME:
            tool_any: Any = toml_data.get("tool", {})
            section: Any = tool_any.get("docify") if isinstance(tool_any, dict) else None
            if not isinstance(section, dict):
                logger.debug("No [tool.docify] section in %s", path)
                return None
            toml_data = section

        resolved: Path = path.resolve()
        draft: MutableConfig = cls.from_toml_dict(
            toml_data, base=resolved.parent, where=str(path)
        )
        draft.config_files = [resolved]
        return draft

    @staticmethod
    def discover_local_config_files(start: Path) -> list[Path]:
        """Return the config files present in ``start``, in merge order.

        ``pyproject.toml`` comes first so that ``docify.toml`` in the same
        directory takes precedence.
        """
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, DOCIFY_TOML_NAME):
            candidate: Path = start / name
            if candidate.is_file():
                found.append(candidate)
        return found

    # ------------------ layering ------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        merged = MutableConfig()
        for attr in (*_PATH_FIELDS.values(), *_SCALAR_FIELDS):
            theirs: Any = getattr(other, attr)
            setattr(merged, attr, theirs if theirs is not None else getattr(self, attr))
        merged.config_files = [*self.config_files, *other.config_files]
        merged.diagnostics = DiagnosticLog.from_iterable([*self.diagnostics, *other.diagnostics])
        return merged

    def apply_cli_args(self, args: ArgsLike, cwd: Path | None = None) -> MutableConfig:
        """Apply CLI overrides (last layer) and return this draft.

        Args:
            args (ArgsLike): Mapping keyed by TOML key names; ``None`` values are ignored.
            cwd (Path | None): Base for relative CLI paths (defaults to the CWD).

        Returns:
            MutableConfig: This draft, updated in place.
        """
        base: Path = (cwd or Path.cwd()).resolve()
        for key, attr in _PATH_FIELDS.items():
            raw: Any = args.get(key)
            if raw:
                setattr(self, attr, abs_path_from(base, str(raw)))
        sort: Any = args.get(Toml.KEY_SORT)
        if sort is not None:
            self.sort_entries = bool(sort)
        node: Any = args.get(Toml.KEY_NODE)
        if node:
            self.node_executable = str(node)
        return self

    def load_files(self, paths: list[Path], *, strict: bool = True) -> MutableConfig:
        """Merge each config file of ``paths`` in order and return the merged draft."""
        draft: MutableConfig = self
        for p in paths:
            logger.info("Loading config: %s", p)
            extra: MutableConfig | None = MutableConfig.from_toml_file(p, strict=strict)
            if extra is None:
                logger.warning("Ignoring config without [tool.docify]: %s", p)
                draft.diagnostics.add_warning("Ignoring config without [tool.docify]", p)
                continue
            draft = draft.merge_with(extra)
        return draft

    # ------------------ freeze ------------------

    def freeze(self) -> Config:
        """Freeze this draft into an immutable `Config`.

        Raises:
            ConfigError: If a required value is unset or an extension is empty.
        """
        missing: list[str] = [
            attr
            for attr in (*_PATH_FIELDS.values(), *_SCALAR_FIELDS)
            if getattr(self, attr) is None
        ]
        if missing:
            raise ConfigError(f"Configuration incomplete, unset values: {', '.join(missing)}")

        assert self.source_extension is not None and self.doc_extension is not None
        if not self.source_extension or not self.doc_extension:
            raise ConfigError("Source and documentation extensions must not be empty")

        return Config(
            input_dir=self.input_dir,  # type: ignore[arg-type]
            templates_dir=self.templates_dir,  # type: ignore[arg-type]
            exclude_file=self.exclude_file,  # type: ignore[arg-type]
            output_dir=self.output_dir,  # type: ignore[arg-type]
            readme_file=self.readme_file,  # type: ignore[arg-type]
            summary_file=self.summary_file,  # type: ignore[arg-type]
            structure_file=self.structure_file,  # type: ignore[arg-type]
            node_modules_dir=self.node_modules_dir,  # type: ignore[arg-type]
            source_extension=self.source_extension,
            doc_extension=self.doc_extension,
            indent=self.indent,  # type: ignore[arg-type]
            sort_entries=bool(self.sort_entries),
            node_executable=self.node_executable,  # type: ignore[arg-type]
            compiler=CompilerSettings(
                remappings=tuple(self.remappings or ()),
                optimizer_enabled=bool(self.optimizer_enabled),
                optimizer_runs=int(self.optimizer_runs),  # type: ignore[arg-type]
            ),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )


def resolve_config(
    *,
    cwd: Path | None = None,
    no_config: bool = False,
    config_paths: list[str] | None = None,
    args: ArgsLike | None = None,
) -> MutableConfig:
    """Build the merged configuration draft for a build.

    Resolution order (lowest → highest precedence):
      1. Runtime defaults (resolved against ``cwd``).
      2. ``pyproject.toml`` ``[tool.docify]`` then ``docify.toml`` in ``cwd``,
         unless ``no_config`` is set.
      3. Explicit config files, in order. These must exist and parse.
      4. CLI overrides.

    Args:
        cwd (Path | None): Working directory (defaults to the process CWD).
        no_config (bool): Skip discovery of local config files.
        config_paths (list[str] | None): Explicit config files to merge.
        args (ArgsLike | None): CLI overrides keyed by TOML key names.

    Returns:
        MutableConfig: The merged draft. Call ``freeze()`` for the runtime snapshot.

    Raises:
        ConfigError: If an explicit config file is missing or malformed.
    """
    base: Path = (cwd or Path.cwd()).resolve()
    draft: MutableConfig = MutableConfig.from_defaults(base)

    if not no_config:
        discovered: list[Path] = MutableConfig.discover_local_config_files(base)
        logger.debug("Discovered config files: %s", discovered)
        for cfg_path in discovered:
            found: MutableConfig | None = MutableConfig.from_toml_file(cfg_path)
            if found is not None:
                draft = draft.merge_with(found)

    explicit: list[Path] = []
    for entry in config_paths or []:
        p: Path = abs_path_from(base, entry)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {entry}", path=p)
        explicit.append(p)
    draft = draft.load_files(explicit, strict=True)

    return draft.apply_cli_args(args or {}, cwd=base)
