# topmark:header:start
#
#   project      : Docify
#   file         : runner.py
#   file_relpath : src/docify/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build orchestration.

`run_build` executes the documentation pipeline in order and stops at the first
fatal error. Files written before that point are left in place. Recoverable
per-path problems from scanning and normalization are collected into
`BuildResult.diagnostics`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docify.config.logging import get_logger
from docify.core.diagnostics import DiagnosticLog
from docify.core.errors import MissingPathError
from docify.pipeline.exclusions import ExclusionSet
from docify.pipeline.invoker import DocgenInvoker
from docify.pipeline.normalizer import MarkdownNormalizer, NormalizeResult
from docify.pipeline.overview import write_document, write_overview, write_structure_descriptor
from docify.pipeline.scanner import PathScanner, ScanResult

if TYPE_CHECKING:
    from pathlib import Path

    from docify.config import Config
    from docify.config.logging import DocifyLogger

logger: DocifyLogger = get_logger(__name__)


@dataclass
class BuildResult:
    """Summary of a completed build.

    Attributes:
        scan (ScanResult): Navigation document and scan diagnostics.
        normalize (NormalizeResult): Documents rewritten or left unchanged.
        diagnostics (DiagnosticLog): Config, scan and normalize diagnostics, in that order.
    """

    scan: ScanResult
    normalize: NormalizeResult
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)


def require_directory(path: Path, what: str) -> None:
    """Raise `MissingPathError` unless ``path`` is an existing directory."""
    if not path.is_dir():
        logger.error("%s directory not found at %s", what.capitalize(), path)
        raise MissingPathError(f"{what.capitalize()} directory not found at {path}", path=path)


def scan_sources(config: Config) -> ScanResult:
    """Load exclusions and scan the input tree without writing anything.

    Raises:
        MissingPathError: If the input directory does not exist.
        ExclusionFileError: If the exclusion list cannot be read.
    """
    require_directory(config.input_dir, "input")
    exclusions: ExclusionSet = ExclusionSet.load(config.exclude_file, config.input_dir)
    return PathScanner.from_config(config, exclusions).scan_tree()


def run_build(config: Config) -> BuildResult:
    """Run the whole documentation build for ``config``.

    Steps: validate the input and template directories, load exclusions, write the
    structure descriptor and the overview, scan the input tree, write the
    navigation document, run the documentation tool, then normalize every
    rendered document under the output root.

    Raises:
        DocifyError: Any fatal pipeline error (see `docify.core.errors`).
    """
    require_directory(config.input_dir, "input")
    require_directory(config.templates_dir, "templates")

    exclusions: ExclusionSet = ExclusionSet.load(config.exclude_file, config.input_dir)

    write_structure_descriptor(config.structure_file, config.readme_file, config.summary_file)
    write_overview(config.readme_file, config.summary_file)

    scan: ScanResult = PathScanner.from_config(config, exclusions).scan_tree()
    write_document(config.summary_file, scan.document.render(), what="summary")

    DocgenInvoker.from_config(config).run()

    normalized: NormalizeResult = MarkdownNormalizer(config.doc_extension).normalize(
        config.output_dir
    )
    logger.info(
        "Normalized %d document(s) under %s (%d rewritten)",
        normalized.total,
        config.output_dir,
        len(normalized.rewritten),
    )

    diagnostics = DiagnosticLog.from_iterable(config.diagnostics)
    diagnostics.extend(scan.diagnostics)
    diagnostics.extend(normalized.diagnostics)
    return BuildResult(scan=scan, normalize=normalized, diagnostics=diagnostics)
