# topmark:header:start
#
#   project      : Docify
#   file         : diagnostics.py
#   file_relpath : src/docify/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected during best-effort processing.

Scanning and normalization never abort on a single unreadable path. Instead, the
problem is logged and recorded as a `Diagnostic` in a `DiagnosticLog`, which is
returned to the caller so commands and tests can inspect exactly which paths failed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

if TYPE_CHECKING:
    from pathlib import Path


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING."""

    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, a message and an optional path."""

    level: DiagnosticLevel
    message: str
    path: Path | None = None

    def render(self) -> str:
        """Return a one-line, human-readable rendering of the diagnostic."""
        if self.path is None:
            return f"[{self.level.value}] {self.message}"
        return f"[{self.level.value}] {self.path}: {self.message}"


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_warning + self.n_error

    def describe(self) -> str:
        """Return a short count summary, e.g. ``"1 error(s), 2 warning(s)"``."""
        return f"{self.n_error} error(s), {self.n_warning} warning(s)"


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    n_warn: int = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in diags if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_warning=n_warn, n_error=n_err)


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics emitted during one traversal."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics."""
        return cls(items=list(diagnostics))

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def add_warning(self, message: str, path: Path | None = None) -> None:
        """Add a ``warning`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.WARNING, message, path))

    def add_error(self, message: str, path: Path | None = None) -> None:
        """Add an ``error`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.ERROR, message, path))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append diagnostics collected elsewhere, preserving their order."""
        self.items.extend(diagnostics)

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for this log."""
        return compute_diagnostic_stats(self.items)

    def paths(self) -> list[Path]:
        """Return the paths of all path-bound diagnostics, in order."""
        return [d.path for d in self.items if d.path is not None]

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)
