# topmark:header:start
#
#   project      : Docify
#   file         : test_normalize_command.py
#   file_relpath : tests/cli/test_normalize_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `docify normalize`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, write_files

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_normalize_explicit_paths(tmp_path: Path) -> None:
    """Markdown files under the given directory are rewritten; other files are untouched."""
    write_files(
        tmp_path,
        {
            "out/A.md": "line1\n\n\n\nline2\n\n",
            "out/sub/B.md": "already\n\nnormalized",
            "out/notes.txt": "keep\n\n\n\nme",
        },
    )

    result = run_cli_in(tmp_path, ["--no-color", "normalize", "--no-config", "out"])

    assert_SUCCESS(result)
    assert "1 document(s) normalized, 1 already normalized" in result.output
    assert (tmp_path / "out/A.md").read_text(encoding="utf-8") == "line1\n\nline2"
    assert (tmp_path / "out/sub/B.md").read_text(encoding="utf-8") == "already\n\nnormalized"
    assert (tmp_path / "out/notes.txt").read_text(encoding="utf-8") == "keep\n\n\n\nme"


@mark_cli
def test_normalize_defaults_to_output_root(tmp_path: Path) -> None:
    """Without PATHS, the configured output root is normalized."""
    write_files(tmp_path, {"docs/solidity/contracts/A.md": "\n\nx\n\n\ny\n"})

    result = run_cli_in(tmp_path, ["normalize"])

    assert_SUCCESS(result)
    assert (tmp_path / "docs/solidity/contracts/A.md").read_text(encoding="utf-8") == "x\n\ny"


@mark_cli
def test_normalize_missing_path_is_a_warning(tmp_path: Path) -> None:
    """A missing path is reported as a diagnostic, not as a failure."""
    result = run_cli_in(tmp_path, ["--no-color", "normalize", "does-not-exist"])

    assert_SUCCESS(result)
    assert "does-not-exist" in result.output
    assert "0 document(s) normalized" in result.output


@mark_cli
def test_normalize_verbose_lists_rewritten_documents(tmp_path: Path) -> None:
    """With -v, each rewritten document is listed."""
    write_files(tmp_path, {"out/A.md": "a\n\n\nb"})

    result = run_cli_in(tmp_path, ["--no-color", "-v", "normalize", "out"])

    assert_SUCCESS(result)
    assert "Normalized out/A.md" in result.output or "Normalized out\\A.md" in result.output
