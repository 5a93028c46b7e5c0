# topmark:header:start
#
#   project      : Docify
#   file         : __init__.py
#   file_relpath : src/docify/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify package.

Docify assembles a browsable documentation tree for smart-contract sources. It
scans the source tree into a nested table of contents, writes an overview page
and a GitBook structure descriptor, runs the external documentation tool, and
normalizes the markdown it produces.
"""

from __future__ import annotations
