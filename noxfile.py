# topmark:header:start
#
#   project      : Docify
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Docify automation via Nox.

Sessions:
  - `lint` / `format_check` / `format`: Ruff on the sources, tests and this file.
  - `tests`: pytest for every Python version listed in the classifiers.
  - `typecheck`: pyright in strict mode.
  - `property_test`: the slow hypothesis properties (opt-in).
  - `package_check`: build sdist/wheel and validate the metadata with twine.

`nox` alone runs the lint and format checks.
"""

from __future__ import annotations

import nox

PYPROJECT = nox.project.load_toml("pyproject.toml")
PYTHONS: list[str] = nox.project.python_versions(PYPROJECT)
LINT_TARGETS: tuple[str, ...] = ("src", "tests", "noxfile.py")

nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv|virtualenv"


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff lint checks."""
    session.install("ruff")
    session.run("ruff", "check", *LINT_TARGETS)


@nox.session
def format_check(session: nox.Session) -> None:
    """Fail when a file is not Ruff-formatted."""
    session.install("ruff")
    session.run("ruff", "format", "--check", *LINT_TARGETS)


@nox.session
def format(session: nox.Session) -> None:
    """Apply Ruff formatting."""
    session.install("ruff")
    session.run("ruff", "format", *LINT_TARGETS)


@nox.session(python=PYTHONS)
def tests(session: nox.Session) -> None:
    """Run the test suite, slow properties excluded."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "-m", "not hypothesis_slow", *session.posargs)


@nox.session
def typecheck(session: nox.Session) -> None:
    """Run pyright against the oldest supported Python."""
    session.install("-e", ".[test]", "pyright")
    session.run("pyright", "--pythonversion", PYTHONS[0])


@nox.session
def property_test(session: nox.Session) -> None:
    """Run only the slow hypothesis properties."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def package_check(session: nox.Session) -> None:
    """Build the distributions and check their metadata."""
    session.install("build", "twine")
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
