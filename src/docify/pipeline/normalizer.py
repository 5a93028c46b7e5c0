# topmark:header:start
#
#   project      : Docify
#   file         : normalizer.py
#   file_relpath : src/docify/pipeline/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown normalization of rendered documents.

Templates render with irregular vertical spacing. Normalization keeps every
non-blank line (a line is blank if it is empty after stripping whitespace) and
joins them with exactly one empty line, so the output has no leading or
trailing blank lines and no runs of them. The output contains no blank line,
which makes normalization idempotent.

Walking a tree is best-effort: per-path errors are logged, recorded as
diagnostics and skipped.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docify.config.logging import get_logger
from docify.core.diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

    from docify.config.logging import DocifyLogger

logger: DocifyLogger = get_logger(__name__)

SEPARATOR: str = "\n\n"


def normalize_text(text: str) -> str:
    r"""Collapse blank-line runs to a single separator.

    Example:
        >>> normalize_text("line1\n\n\n\nline2\n\n")
        'line1\n\nline2'
    """
    lines: list[str] = text.replace("\r", "").split("\n")
    return SEPARATOR.join(line for line in lines if line.strip())


@dataclass
class NormalizeResult:
    """Outcome of a normalization walk.

    Attributes:
        rewritten (list[Path]): Documents whose content changed.
        unchanged (list[Path]): Documents already normalized.
        diagnostics (DiagnosticLog): One error per path that could not be processed.
    """

    rewritten: list[Path] = field(default_factory=lambda: [])
    unchanged: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @property
    def total(self) -> int:
        """Number of documents visited successfully."""
        return len(self.rewritten) + len(self.unchanged)


class MarkdownNormalizer:
    """Normalize every document with the documentation extension under a path.

    Args:
        doc_extension (str): Extension of the documents to rewrite (e.g. ``.md``).
    """

    def __init__(self, doc_extension: str = ".md") -> None:
        self.doc_extension = doc_extension
        self.result = NormalizeResult()

    def normalize(self, path: Path) -> NormalizeResult:
        """Normalize ``path`` (a document or a directory tree) and return the accumulated result."""
        try:
            mode: int = path.lstat().st_mode
            if stat.S_ISDIR(mode):
                for name in sorted(os.listdir(path)):
                    self.normalize(path / name)
            elif path.name.endswith(self.doc_extension):
                self._normalize_file(path)
        except (OSError, UnicodeError) as e:
            logger.error("Error fixing path %s: %s", path, e)
            self.result.diagnostics.add_error(f"Error normalizing path: {e}", path)
        return self.result

    def _normalize_file(self, path: Path) -> None:
        original: str = path.read_text(encoding="utf-8")
        updated: str = normalize_text(original)
        if updated == original:
            self.result.unchanged.append(path)
            logger.trace("Already normalized: %s", path)
            return
        path.write_text(updated, encoding="utf-8")
        self.result.rewritten.append(path)
        logger.debug("Normalized %s", path)
