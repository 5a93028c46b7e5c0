# topmark:header:start
#
#   file         : file.py
#   file_relpath : src/docify/utils/file.py
#   project      : Docify
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File and path utilities shared by the pipeline steps."""

import os
from pathlib import Path, PurePosixPath


def compute_relpath(file_path: Path, root_path: Path) -> Path:
    """Compute the relative path from root_path to file_path.

    Args:
        file_path (Path): The path to compute the relative path for.
        root_path (Path): The directory to compute the relative path from.

    Returns:
        Path: The relative path from root_path to file_path.
    """
    resolved_path = file_path.resolve()
    resolved_root = root_path.resolve()

    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        # Not a direct subpath
        return Path(os.path.relpath(resolved_path, start=resolved_root))


def posix_relpath(file_path: Path, root_path: Path) -> PurePosixPath:
    """Return `compute_relpath` as a POSIX path, suitable for markdown links and YAML."""
    return PurePosixPath(compute_relpath(file_path, root_path).as_posix())


def read_lines(path: Path) -> list[str]:
    r"""Read a UTF-8 text file and split it into lines.

    Every ``\r`` is dropped before splitting on ``\n``, so both line-ending
    conventions yield the same lines. A trailing newline yields a final empty line.

    Args:
        path (Path): File to read.

    Returns:
        list[str]: The lines, without terminators.
    """
    text: str = path.read_text(encoding="utf-8")
    return text.replace("\r", "").split("\n")
