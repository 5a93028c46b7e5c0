# topmark:header:start
#
#   project      : Docify
#   file         : logging.py
#   file_relpath : src/docify/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify logging: a TRACE level, a logger class and chalk-colored records.

Internal diagnostics go through the loggers returned by `get_logger`. They are
written to stderr, so command output on stdout (for instance ``docify summary``
redirected into a file) never contains log lines. User-facing messages go
through the CLI console instead.

The level is read from ``DOCIFY_LOG_LEVEL`` (``TRACE``, ``DEBUG``, ... or a
number). Logging is effectively off (``CRITICAL``) when the variable is unset.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

ENV_LOG_LEVEL: Final[str] = "DOCIFY_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(name)s:%(lineno)d] [%(funcName)s] %(message)s"
)


class DocifyLogger(logging.Logger):
    """`logging.Logger` with a `trace` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level (below DEBUG)."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(DocifyLogger)


# Highest threshold first; the first threshold a record reaches picks its color.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color the result with chalk."""
        message: str = super().format(record)
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return color(message)
        return chalk.dim(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return the level requested through ``DOCIFY_LOG_LEVEL``, or None.

    Level names are case-insensitive; digits are taken as a numeric level.
    Unknown names are ignored.
    """
    raw: str = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Install a single colored handler on the root logger.

    Args:
        level (int | None): Root level; when None, `resolve_env_log_level` is
            consulted, falling back to CRITICAL.
        stream (TextIO | None): Destination of the records (defaults to stderr).
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> DocifyLogger:
    """Return the `DocifyLogger` named ``name`` (usually ``__name__``)."""
    return cast("DocifyLogger", logging.getLogger(name))
