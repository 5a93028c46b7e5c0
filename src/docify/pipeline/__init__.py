# topmark:header:start
#
#   project      : Docify
#   file         : __init__.py
#   file_relpath : src/docify/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Documentation-tree assembly pipeline.

Steps, in build order:
    - [`exclusions`][docify.pipeline.exclusions]: load the paths to skip.
    - [`overview`][docify.pipeline.overview]: write the structure descriptor and overview page.
    - [`scanner`][docify.pipeline.scanner]: walk the source tree into a
      [`NavigationDocument`][docify.pipeline.navigation.NavigationDocument].
    - [`invoker`][docify.pipeline.invoker]: run the external documentation tool.
    - [`normalizer`][docify.pipeline.normalizer]: collapse blank-line runs in its output.

[`runner.run_build`][docify.pipeline.runner.run_build] wires them together.
"""

from __future__ import annotations
