# topmark:header:start
#
#   project      : Docify
#   file         : overview.py
#   file_relpath : src/docify/pipeline/overview.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Front matter of the documentation tree.

Two small fixed-shape documents are produced before the scan:

- the overview page (``README.md``), whose only dynamic content is a link to
  the navigation document;
- the GitBook structure descriptor (``.gitbook.yaml``), pointing to the overview
  and navigation documents.

Both are load-bearing for the published site, so failing to write either one
raises `DocumentWriteError` and aborts the build.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docify.config.logging import get_logger
from docify.constants import OVERVIEW_TITLE
from docify.core.errors import DocumentWriteError
from docify.utils.file import posix_relpath

if TYPE_CHECKING:
    from pathlib import Path

    from docify.config.logging import DocifyLogger

logger: DocifyLogger = get_logger(__name__)

OVERVIEW_TEMPLATE: str = """
# {title}

## Overview

This documentation provides details about all Solidity contracts within the project.
The purpose of this documentation is to help developers understand the structure,
usage, and functionality of each contract.

## Table of Contents

- [SUMMARY](./{summary_link})

"""


def render_overview(
    overview_path: Path,
    navigation_path: Path,
    *,
    title: str = OVERVIEW_TITLE,
) -> str:
    """Return the overview page linking to ``navigation_path``.

    The link is relative to the overview page's directory.
    """
    summary_link: str = posix_relpath(navigation_path, overview_path.parent).as_posix()
    return OVERVIEW_TEMPLATE.format(title=title, summary_link=summary_link)


def render_structure_descriptor(
    descriptor_path: Path,
    overview_path: Path,
    navigation_path: Path,
) -> str:
    """Return the ``.gitbook.yaml`` content for the given documents.

    Paths are written relative to the descriptor's directory (the GitBook root).
    """
    root: Path = descriptor_path.parent
    readme: str = posix_relpath(overview_path, root).as_posix()
    summary: str = posix_relpath(navigation_path, root).as_posix()
    return f"root: ./\nstructure:\n  readme: {readme}\n  summary: {summary}\n"


def write_document(path: Path, content: str, *, what: str) -> None:
    """Write a generated document, creating parent directories as needed.

    Raises:
        DocumentWriteError: If the document cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error("Error writing %s %s: %s", what, path, e)
        raise DocumentWriteError(f"Error writing {what} {path}: {e}", path=path) from e
    logger.info("Generated %s at %s", what, path)


def write_overview(overview_path: Path, navigation_path: Path) -> None:
    """Write the overview page."""
    write_document(overview_path, render_overview(overview_path, navigation_path), what="overview")


def write_structure_descriptor(
    descriptor_path: Path,
    overview_path: Path,
    navigation_path: Path,
) -> None:
    """Write (overwrite) the structure descriptor."""
    write_document(
        descriptor_path,
        render_structure_descriptor(descriptor_path, overview_path, navigation_path),
        what="structure descriptor",
    )
