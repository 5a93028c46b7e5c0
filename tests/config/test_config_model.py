# topmark:header:start
#
#   project      : Docify
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model: defaults, parsing, merging and freezing."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from docify.config import Config, MutableConfig
from docify.config.loaders import load_defaults_dict
from docify.core.errors import ConfigError
from docify.core.exit_codes import ExitCode


def _write(path: Path, content: str) -> Path:
    """Helper: write dedented content to a file, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path


def test_defaults_resolve_against_cwd(tmp_path: Path) -> None:
    """Default paths are absolute and rooted at the given working directory."""
    config: Config = MutableConfig.from_defaults(tmp_path).freeze()
    base: Path = tmp_path.resolve()

    assert config.input_dir == base / "box" / "contracts"
    assert config.templates_dir == base / "box" / "docgen"
    assert config.exclude_file == base / "box" / "docgen" / "exclude.txt"
    assert config.output_dir == base / "docs" / "solidity" / "contracts"
    assert config.readme_file == base / "docs" / "solidity" / "README.md"
    assert config.summary_file == base / "docs" / "solidity" / "SUMMARY.md"
    assert config.structure_file == base / ".gitbook.yaml"
    assert config.node_modules_dir == base / "node_modules"
    assert (config.source_extension, config.doc_extension, config.indent) == (".sol", ".md", "  ")
    assert config.sort_entries is True
    assert config.node_executable == "node"
    assert config.compiler.optimizer_runs == 200
    assert not config.diagnostics


def test_defaults_dict_is_a_fresh_copy() -> None:
    """Mutating the returned defaults does not leak into later calls."""
    first = load_defaults_dict()
    first["paths"]["input"] = "elsewhere"

    assert load_defaults_dict()["paths"]["input"] == "box/contracts"


def test_file_paths_resolve_against_file_directory(tmp_path: Path) -> None:
    """Relative paths in a config file are anchored at that file's directory."""
    cfg: Path = _write(
        tmp_path / "conf" / "docify.toml",
        """
        [paths]
        input = "../src"
        summary = "nav/SUMMARY.md"
        """,
    )

    draft = MutableConfig.from_toml_file(cfg)

    assert draft is not None
    assert draft.input_dir == (tmp_path / "src").resolve()
    assert draft.summary_file == (tmp_path / "conf" / "nav" / "SUMMARY.md").resolve()
    assert draft.output_dir is None
    assert draft.config_files == [cfg.resolve()]


def test_unknown_keys_and_wrong_types_become_warnings(tmp_path: Path) -> None:
    """A bad key is reported and skipped; the rest of the file still loads."""
    cfg: Path = _write(
        tmp_path / "docify.toml",
        """
        colour = "blue"

        [navigation]
        indent = 4
        sort = false
        bogus = 1

        [docgen.optimizer]
        runs = true
        """,
    )

    draft = MutableConfig.from_toml_file(cfg)

    assert draft is not None
    assert draft.indent is None
    assert draft.sort_entries is False
    assert draft.optimizer_runs is None
    messages: list[str] = [d.message for d in draft.diagnostics]
    assert len(messages) == 4
    assert any("Unknown config key" in m and "colour" in m for m in messages)
    assert any("Unknown config key" in m and "bogus" in m for m in messages)
    assert any("Expected string" in m and "indent" in m for m in messages)
    assert any("Expected int" in m and "runs" in m for m in messages)


def test_negative_optimizer_runs_are_ignored(tmp_path: Path) -> None:
    """A negative run count is reported and left unset."""
    draft = MutableConfig.from_toml_dict(
        {"docgen": {"optimizer": {"runs": -1}}}, base=tmp_path, where="test"
    )

    assert draft.optimizer_runs is None
    assert len(draft.diagnostics) == 1


def test_non_string_remappings_are_dropped(tmp_path: Path) -> None:
    """Non-string remapping items are skipped individually."""
    draft = MutableConfig.from_toml_dict(
        {"docgen": {"remappings": ["a/=b/", 3]}}, base=tmp_path
    )

    assert draft.remappings == ["a/=b/"]
    assert len(draft.diagnostics) == 1


def test_pyproject_without_tool_section_is_ignored(tmp_path: Path) -> None:
    """A pyproject.toml lacking ``[tool.docify]`` yields no draft."""
    cfg: Path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')

    assert MutableConfig.from_toml_file(cfg) is None


def test_pyproject_tool_section_is_read(tmp_path: Path) -> None:
    """``[tool.docify]`` uses the same schema as ``docify.toml``."""
    cfg: Path = _write(
        tmp_path / "pyproject.toml",
        """
        [tool.docify.navigation]
        source_extension = ".vy"
        """,
    )

    draft = MutableConfig.from_toml_file(cfg)

    assert draft is not None
    assert draft.source_extension == ".vy"


def test_merge_later_layer_wins(tmp_path: Path) -> None:
    """Values set in the later layer override; unset values fall through."""
    base = MutableConfig.from_defaults(tmp_path)
    override = MutableConfig(indent="\t", sort_entries=False)

    merged = base.merge_with(override)

    assert merged.indent == "\t"
    assert merged.sort_entries is False
    assert merged.doc_extension == ".md"
    assert merged.input_dir == tmp_path.resolve() / "box" / "contracts"


def test_cli_args_are_the_last_layer(tmp_path: Path) -> None:
    """CLI paths resolve against the CWD and ``None`` values are ignored."""
    draft = MutableConfig.from_defaults(tmp_path).apply_cli_args(
        {"input": "src", "output": None, "sort": False}, cwd=tmp_path
    )

    assert draft.input_dir == tmp_path.resolve() / "src"
    assert draft.output_dir == tmp_path.resolve() / "docs" / "solidity" / "contracts"
    assert draft.sort_entries is False


@pytest.mark.parametrize("attr", ["source_extension", "doc_extension"])
def test_freeze_rejects_empty_extension(tmp_path: Path, attr: str) -> None:
    """Extensions identify files and must not be empty."""
    draft = MutableConfig.from_defaults(tmp_path)
    setattr(draft, attr, "")

    with pytest.raises(ConfigError) as excinfo:
        draft.freeze()

    assert excinfo.value.exit_code == ExitCode.CONFIG_ERROR


def test_freeze_rejects_incomplete_draft() -> None:
    """A draft not started from defaults cannot be frozen."""
    with pytest.raises(ConfigError, match="unset values: input_dir"):
        MutableConfig(indent="  ").freeze()


def test_thaw_freeze_round_trip(tmp_path: Path) -> None:
    """Thawing and re-freezing yields an equal snapshot."""
    config: Config = MutableConfig.from_defaults(tmp_path).freeze()

    assert config.thaw().freeze() == config


def test_to_toml_dict_renders_relative_paths(tmp_path: Path) -> None:
    """Paths below the given directory are rendered relative to it."""
    config: Config = MutableConfig.from_defaults(tmp_path).freeze()

    table = config.to_toml_dict(relative_to=tmp_path)

    assert table["paths"]["input"] == "box/contracts"
    assert table["paths"]["structure"] == ".gitbook.yaml"
    assert table["navigation"]["sort"] is True
    assert table["docgen"]["optimizer"] == {"enabled": True, "runs": 200}
