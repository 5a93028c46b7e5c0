# topmark:header:start
#
#   project      : Docify
#   file         : __init__.py
#   file_relpath : src/docify/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-independent building blocks: exit codes, errors and diagnostics."""

from __future__ import annotations
