# topmark:header:start
#
#   project      : Docify
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Docify test suite.

This file sets up global fixtures, typed mark wrappers and the logging
configuration for test runs. It also provides helpers that lay out a small
project on disk: a contracts tree, a template directory, an exclusion list and
a ``node_modules`` directory with a fake documentation tool.

Notes:
    The fake tool is a Python script installed at
    ``node_modules/solidity-docgen/dist/cli.js``. Tests run it with the current
    interpreter by setting the ``[docgen] node`` key (or
    `Config.node_executable`) to ``sys.executable``.

    Tests should respect the immutable/mutable configuration split: build a
    `MutableConfig`, then `freeze()` it. To tweak a frozen `Config`, call
    `Config.thaw()`, edit, and freeze again.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from docify.config import MutableConfig, logging

if TYPE_CHECKING:
    from collections.abc import Mapping

    from docify.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_docify_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Docify's runtime log level is not forced via env during tests."""
    monkeypatch.delenv("DOCIFY_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so failures come with detailed logs."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


# ------------------ project layout helpers ------------------

#: Fake ``solidity-docgen``: mirrors every ``.sol`` file of ``--input`` into a
#: markdown document under ``--output`` with deliberately irregular blank lines.
FAKE_DOCGEN_OK: str = """\
import pathlib
import sys

args = dict(arg[2:].split("=", 1) for arg in sys.argv[1:])
src = pathlib.Path(args["input"])
out = pathlib.Path(args["output"])
for path in sorted(src.rglob("*.sol")):
    target = out / path.relative_to(src).with_suffix(".md")
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text("\\n\\n# " + path.stem + "\\n\\n\\n\\nbody\\n\\n", encoding="utf-8")
(out.parent / "docgen-args.txt").write_text("\\n".join(sys.argv[1:]), encoding="utf-8")
"""

#: Fake tool that reports a compile error on stderr but exits with status 0.
FAKE_DOCGEN_STDERR: str = """\
import sys

sys.stderr.write("Error: ParserError: Expected ';'\\n")
"""

#: Fake tool that exits nonzero without writing to stderr.
FAKE_DOCGEN_EXIT_3: str = """\
import sys

sys.exit(3)
"""


def write_files(root: Path, files: Mapping[str, str]) -> None:
    """Create ``files`` (relative POSIX path → content) under ``root``."""
    for rel, content in files.items():
        path: Path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def make_project(
    root: Path,
    *,
    contracts: Mapping[str, str] | None = None,
    exclusions: str = "",
    docgen_script: str | None = FAKE_DOCGEN_OK,
    with_solc: bool = True,
) -> Path:
    """Lay out a Docify project with the default directory names under ``root``.

    Args:
        root (Path): Project root (becomes the working directory of a build).
        contracts (Mapping[str, str] | None): Files to create under ``box/contracts``.
        exclusions (str): Content of ``box/docgen/exclude.txt``.
        docgen_script (str | None): Source of the fake tool, or None to omit it.
        with_solc (bool): Whether to install a resolvable ``node_modules/solc``.

    Returns:
        Path: ``root``, for chaining.
    """
    contracts_dir: Path = root / "box" / "contracts"
    contracts_dir.mkdir(parents=True, exist_ok=True)
    write_files(contracts_dir, contracts or {})
    write_files(root / "box" / "docgen", {"exclude.txt": exclusions, "contract.hbs": "{{name}}"})
    if with_solc:
        write_files(root / "node_modules" / "solc", {"package.json": '{"name": "solc"}'})
    if docgen_script is not None:
        write_files(root / "node_modules" / "solidity-docgen" / "dist", {"cli.js": docgen_script})
    return root


def make_config(root: Path, **overrides: Any) -> Config:
    """Return a frozen `Config` for a project under ``root``.

    Defaults are resolved against ``root`` and the fake tool is run with the
    current interpreter. Keyword arguments override `MutableConfig` attributes.
    """
    draft: MutableConfig = MutableConfig.from_defaults(root)
    draft.node_executable = sys.executable
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


def write_node_config(root: Path, extra: str = "") -> Path:
    """Write a ``docify.toml`` in ``root`` that runs the fake tool with this interpreter."""
    path: Path = root / "docify.toml"
    path.write_text(f"[docgen]\nnode = '{sys.executable}'\n{extra}", encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project with two nested contracts, one top-level contract and a README."""
    return make_project(
        tmp_path / "proj",
        contracts={
            "token/ERC20.sol": "contract ERC20 {}",
            "token/IERC20.sol": "interface IERC20 {}",
            "Vault.sol": "contract Vault {}",
            "README.txt": "not a contract",
        },
    )
