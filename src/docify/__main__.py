# topmark:header:start
#
#   project      : Docify
#   file         : __main__.py
#   file_relpath : src/docify/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Docify via ``python -m docify``.

Delegates to :func:`docify.cli.main.cli`, the same entry point as the
``docify`` console script.

Examples:
    Build the documentation tree from the project root::

        python -m docify build
"""

from __future__ import annotations

from docify.cli.main import cli

if __name__ == "__main__":
    cli()
