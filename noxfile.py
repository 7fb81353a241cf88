"""Quality pipeline for fof9-editor.

``nox`` runs lint, typecheck and tests in that order.  ``nox -s smoke`` is
the quick pre-commit check; ``nox -s roundtrip`` drives the installed CLI
against a freshly created league.
"""

from __future__ import annotations

import nox

nox.options.sessions = ["lint", "typecheck", "tests"]

PACKAGE = "src/fof9_editor"


@nox.session(python=False)
def lint(session: nox.Session) -> None:
    """Ruff check (with fixes) and format check."""
    session.run("ruff", "check", ".", "--fix")
    session.run("ruff", "format", "--check", ".")


@nox.session(python=False)
def typecheck(session: nox.Session) -> None:
    session.run("mypy", "--strict", "--show-error-codes", PACKAGE, "tests")


@nox.session(python=False)
def tests(session: nox.Session) -> None:
    """Full suite; extra arguments go to pytest (``nox -s tests -- -k mapper``)."""
    session.run("pytest", "--tb=short", *session.posargs)


@nox.session(python=False)
def smoke(session: nox.Session) -> None:
    session.run("pytest", "-m", "smoke and not slow", "-q")


@nox.session(python=False)
def roundtrip(session: nox.Session) -> None:
    """Create a league with the CLI, then inspect and validate it."""
    tmp = session.create_tmp()
    session.run("fof9-editor", "new", "Nox League", "--id", "nox", "--dir", tmp)
    project = f"{tmp}/nox.fof9proj"
    session.run("fof9-editor", "info", project)
    session.run("fof9-editor", "--log-level", "VERBOSE", "validate", project)
