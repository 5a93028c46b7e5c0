# topmark:header:start
#
#   project      : Docify
#   file         : exclusions.py
#   file_relpath : src/docify/pipeline/exclusions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exclusion list: input-root-relative paths skipped while scanning.

The exclusion file holds one path fragment per line. Each fragment is joined
onto the input root with ``/`` and matched by exact string equality against the
POSIX form of the visited path, so there is no glob support and a trailing slash
makes an entry unmatchable. Blank lines are kept; they can never equal a real path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from docify.config.logging import get_logger
from docify.core.errors import ExclusionFileError
from docify.utils.file import read_lines

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExclusionSet:
    """Immutable set of excluded paths, each already joined onto the input root.

    Attributes:
        paths (frozenset[str]): POSIX path strings (``"<input_root>/<fragment>"``).
    """

    paths: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_lines(cls, lines: list[str], input_root: Path) -> ExclusionSet:
        """Join every line onto ``input_root`` without further validation."""
        root: str = input_root.as_posix()
        return cls(frozenset(f"{root}/{line}" for line in lines))

    @classmethod
    def load(cls, exclusion_file: Path, input_root: Path) -> ExclusionSet:
        """Load the exclusion list for ``input_root``.

        Args:
            exclusion_file (Path): Newline-delimited list of relative path fragments.
            input_root (Path): Root the fragments are relative to.

        Returns:
            ExclusionSet: The loaded set.

        Raises:
            ExclusionFileError: If the file cannot be read. An unreadable exclusion
                list leaves the scan result undefined, so this is fatal.
        """
        try:
            lines: list[str] = read_lines(exclusion_file)
        except (OSError, UnicodeError) as e:
            logger.error("Error reading exclusion file %s: %s", exclusion_file, e)
            raise ExclusionFileError(
                f"Error reading file at {exclusion_file}: {e}", path=exclusion_file
            ) from e
        exclusions: ExclusionSet = cls.from_lines(lines, input_root)
        logger.debug("Loaded %d exclusion(s) from %s", len(exclusions), exclusion_file)
        logger.trace("Exclusions: %s", sorted(exclusions.paths))
        return exclusions

    def __contains__(self, path: object) -> bool:
        if isinstance(path, Path):
            return path.as_posix() in self.paths
        return path in self.paths

    def __len__(self) -> int:
        return len(self.paths)
