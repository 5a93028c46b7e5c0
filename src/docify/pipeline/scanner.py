# topmark:header:start
#
#   project      : Docify
#   file         : scanner.py
#   file_relpath : src/docify/pipeline/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive source-tree scanner producing the navigation document.

The scanner walks the input root in pre-order. Directories become group
entries, files with the source extension become leaf entries linking to the
document the documentation tool renders for them, and anything else is ignored.
Excluded paths are pruned together with their subtree.

Scanning is best-effort: an ``OSError`` at one path is logged and recorded in
the returned diagnostics, and the walk continues with the remaining paths.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from docify.config.logging import get_logger
from docify.core.diagnostics import DiagnosticLog
from docify.pipeline.exclusions import ExclusionSet
from docify.pipeline.navigation import NavigationDocument, NavigationEntry
from docify.utils.file import posix_relpath

if TYPE_CHECKING:
    from docify.config import Config
    from docify.config.logging import DocifyLogger

logger: DocifyLogger = get_logger(__name__)


@dataclass
class ScanResult:
    """Outcome of a scan.

    Attributes:
        document (NavigationDocument): Entries collected in traversal order.
        diagnostics (DiagnosticLog): One error per path that could not be scanned.
    """

    document: NavigationDocument
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)


class PathScanner:
    """Walk an input root and collect navigation entries.

    Args:
        input_root (Path): Directory holding the documentable modules.
        exclusions (ExclusionSet): Paths to prune.
        link_prefix (PurePosixPath): Relative path from the navigation document's
            directory to the output root; prepended to every leaf link.
        source_extension (str): Extension of documentable modules (e.g. ``.sol``).
        doc_extension (str): Extension of rendered documents (e.g. ``.md``).
        indent (str): Indent unit of the navigation document.
        sort_entries (bool): Visit directory children in name order. When False,
            the order returned by the filesystem is kept.
    """

    def __init__(
        self,
        input_root: Path,
        exclusions: ExclusionSet,
        *,
        link_prefix: PurePosixPath = PurePosixPath("."),
        source_extension: str = ".sol",
        doc_extension: str = ".md",
        indent: str = "  ",
        sort_entries: bool = True,
    ) -> None:
        self.input_root = input_root
        self.exclusions = exclusions
        self.link_prefix = link_prefix
        self.source_extension = source_extension
        self.doc_extension = doc_extension
        self.sort_entries = sort_entries
        self.document = NavigationDocument(indent=indent)
        self.diagnostics = DiagnosticLog()

    @classmethod
    def from_config(cls, config: Config, exclusions: ExclusionSet) -> PathScanner:
        """Build a scanner whose links point from the summary file to the output root."""
        return cls(
            config.input_dir,
            exclusions,
            link_prefix=posix_relpath(config.output_dir, config.summary_file.parent),
            source_extension=config.source_extension,
            doc_extension=config.doc_extension,
            indent=config.indent,
            sort_entries=config.sort_entries,
        )

    def link_for(self, path: Path) -> str:
        """Return the navigation link of the rendered document for source ``path``.

        The input-root-relative path has its source extension replaced by the
        documentation extension and is prefixed with `link_prefix`.
        """
        rel: PurePosixPath = PurePosixPath(path.relative_to(self.input_root).as_posix())
        stem: str = rel.name[: -len(self.source_extension)]
        target: PurePosixPath = rel.parent / f"{stem}{self.doc_extension}"
        return (self.link_prefix / target).as_posix()

    def scan(self, path: Path, depth: int) -> None:
        """Visit ``path`` at ``depth``, appending entries for it and its subtree."""
        if path in self.exclusions:
            logger.debug("Skipping excluded path: %s", path)
            return
        try:
            mode: int = path.lstat().st_mode
            if stat.S_ISDIR(mode):
                self.document.append(NavigationEntry.group(path.name, depth))
                names: list[str] = os.listdir(path)
                if self.sort_entries:
                    names.sort()
                for name in names:
                    self.scan(path / name, depth + 1)
            elif path.name.endswith(self.source_extension):
                label: str = path.name[: -len(self.source_extension)]
                self.document.append(NavigationEntry.leaf(label, depth, self.link_for(path)))
                logger.trace("Added module %s at depth %d", label, depth)
        except OSError as e:
            logger.error("Error scanning path %s: %s", path, e)
            self.diagnostics.add_error(f"Error scanning path: {e}", path)

    def scan_tree(self) -> ScanResult:
        """Scan from the input root at depth 0 and return the collected result."""
        self.scan(self.input_root, 0)
        logger.info(
            "Scanned %s: %d module(s), %d director(ies), %d error(s)",
            self.input_root,
            len(self.document.leaves),
            len(self.document.groups),
            len(self.diagnostics),
        )
        return ScanResult(document=self.document, diagnostics=self.diagnostics)
