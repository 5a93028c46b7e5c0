# topmark:header:start
#
#   project      : Docify
#   file         : test_normalizer.py
#   file_relpath : tests/pipeline/test_normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for markdown normalization of rendered documents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import given
from hypothesis import strategies as st

from docify.pipeline.normalizer import MarkdownNormalizer, normalize_text
from tests.conftest import mark_pipeline, parametrize, write_files

if TYPE_CHECKING:
    from pathlib import Path

# Lines drawn from a small alphabet heavy in whitespace, so blank and
# whitespace-only lines are common.
s_markdown: st.SearchStrategy[str] = st.lists(
    st.text(alphabet=" \t\rab#-", max_size=6), max_size=12
).map("\n".join)


@mark_pipeline
def test_normalize_text_collapses_blank_runs() -> None:
    """Runs of blank lines become one separator and trailing blanks are dropped."""
    assert normalize_text("line1\n\n\n\nline2\n\n") == "line1\n\nline2"


@mark_pipeline
@parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("\n\n\n", ""),
        ("only", "only"),
        ("\n\nlead", "lead"),
        ("a\r\n\r\n\r\nb\r\n", "a\n\nb"),
        ("a\n   \n\t\nb", "a\n\nb"),
        ("  indented\n\n\n- item", "  indented\n\n- item"),
        ("a\nb\nc", "a\n\nb\n\nc"),
    ],
)
def test_normalize_text_cases(text: str, expected: str) -> None:
    """Whitespace-only lines count as blank and kept lines are not trimmed."""
    assert normalize_text(text) == expected


@mark_pipeline
@given(text=s_markdown)
def test_normalize_text_is_idempotent(text: str) -> None:
    """Normalizing twice gives the same result as normalizing once."""
    once: str = normalize_text(text)
    assert normalize_text(once) == once


@mark_pipeline
@given(text=s_markdown)
def test_normalize_text_has_no_blank_runs(text: str) -> None:
    """Output never starts or ends with a newline and has no triple newline."""
    out: str = normalize_text(text)
    assert "\n\n\n" not in out
    assert not out.startswith("\n")
    assert not out.endswith("\n")
    assert "\r" not in out


@mark_pipeline
def test_normalizer_walks_tree_and_skips_other_extensions(tmp_path: Path) -> None:
    """Only documents with the documentation extension are rewritten, recursively."""
    write_files(
        tmp_path,
        {
            "A.md": "x\n\n\ny\n",
            "deep/er/B.md": "ok",
            "C.txt": "x\n\n\ny\n",
        },
    )

    result = MarkdownNormalizer(".md").normalize(tmp_path)

    assert result.rewritten == [tmp_path / "A.md"]
    assert result.unchanged == [tmp_path / "deep" / "er" / "B.md"]
    assert result.total == 2
    assert not result.diagnostics
    assert (tmp_path / "A.md").read_text(encoding="utf-8") == "x\n\ny"
    assert (tmp_path / "C.txt").read_text(encoding="utf-8") == "x\n\n\ny\n"


@mark_pipeline
def test_normalizer_records_undecodable_document(tmp_path: Path) -> None:
    """An undecodable document is recorded and the walk continues."""
    (tmp_path / "bad.md").write_bytes(b"\xff\xfe\xfa")
    (tmp_path / "good.md").write_text("a\n\n\nb", encoding="utf-8")

    result = MarkdownNormalizer().normalize(tmp_path)

    assert result.diagnostics.paths() == [tmp_path / "bad.md"]
    assert result.rewritten == [tmp_path / "good.md"]


@mark_pipeline
def test_normalizer_missing_path(tmp_path: Path) -> None:
    """A missing root is a diagnostic, not an exception."""
    missing: Path = tmp_path / "nope"

    result = MarkdownNormalizer().normalize(missing)

    assert result.diagnostics.paths() == [missing]
    assert result.total == 0


@mark_pipeline
def test_normalizer_single_file(tmp_path: Path) -> None:
    """A file path can be normalized directly."""
    doc: Path = tmp_path / "one.md"
    doc.write_text("\n\nhello\n\n\n\nworld\n", encoding="utf-8")

    MarkdownNormalizer().normalize(doc)

    assert doc.read_text(encoding="utf-8") == "hello\n\nworld"
