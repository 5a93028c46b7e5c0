# topmark:header:start
#
#   project      : Docify
#   file         : test_exclusions.py
#   file_relpath : tests/pipeline/test_exclusions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading and matching the exclusion list."""

from __future__ import annotations

from pathlib import Path

import pytest

from docify.core.errors import ExclusionFileError
from docify.core.exit_codes import ExitCode
from docify.pipeline.exclusions import ExclusionSet
from tests.conftest import mark_pipeline


@mark_pipeline
def test_load_joins_lines_onto_input_root(tmp_path: Path) -> None:
    """Each line is joined onto the input root with a slash."""
    exclusion_file: Path = tmp_path / "exclude.txt"
    exclusion_file.write_text("mocks\r\ntest/Helper.sol\n", encoding="utf-8")
    root: Path = tmp_path / "contracts"

    exclusions = ExclusionSet.load(exclusion_file, root)

    assert root / "mocks" in exclusions
    assert root / "test" / "Helper.sol" in exclusions
    assert f"{root.as_posix()}/mocks" in exclusions
    assert root / "test" not in exclusions
    assert root not in exclusions


@mark_pipeline
def test_blank_lines_never_match_real_paths(tmp_path: Path) -> None:
    """A blank line yields ``<root>/`` which no visited path ever equals."""
    root: Path = tmp_path / "contracts"

    exclusions = ExclusionSet.from_lines(["", "A"], root)

    assert len(exclusions) == 2
    assert root not in exclusions
    assert root / "A" in exclusions


@mark_pipeline
def test_matching_is_exact_not_glob(tmp_path: Path) -> None:
    """Entries are literal: no globbing, no prefix matching, trailing slash never matches."""
    root: Path = tmp_path / "contracts"

    exclusions = ExclusionSet.from_lines(["*.sol", "dir/"], root)

    assert root / "A.sol" not in exclusions
    assert root / "dir" not in exclusions
    assert root / "dir" / "X.sol" not in exclusions


@mark_pipeline
def test_missing_exclusion_file_is_fatal(tmp_path: Path) -> None:
    """An unreadable exclusion file raises with exit code 66."""
    with pytest.raises(ExclusionFileError) as excinfo:
        ExclusionSet.load(tmp_path / "missing.txt", tmp_path)

    assert excinfo.value.exit_code == ExitCode.FILE_NOT_FOUND
    assert excinfo.value.path == tmp_path / "missing.txt"
