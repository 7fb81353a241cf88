"""Smoke tests for the installed distribution and the source layout.

Cheap enough for a pre-commit hook; they catch packaging mistakes before
the slower suites run.
"""

from __future__ import annotations

import importlib.metadata
from pathlib import Path

import pytest

_PACKAGE_DIR = Path(__file__).resolve().parents[2] / "src" / "fof9_editor"


@pytest.mark.smoke
def test_distribution_installed() -> None:
    """The distribution name (fof9-editor) differs from the import name (fof9_editor)."""
    assert importlib.metadata.version("fof9-editor")


@pytest.mark.smoke
def test_console_script_registered() -> None:
    scripts = importlib.metadata.entry_points(group="console_scripts")
    assert any(ep.name == "fof9-editor" and ep.value == "fof9_editor.cli.main:app" for ep in scripts)


@pytest.mark.smoke
@pytest.mark.parametrize("sub", ["records", "storage", "validation", "project", "state", "utils"])
def test_subpackages_have_init(sub: str) -> None:
    assert (_PACKAGE_DIR / sub / "__init__.py").is_file(), f"Missing subpackage: {sub}"


@pytest.mark.smoke
def test_cli_is_a_plain_module_directory() -> None:
    assert (_PACKAGE_DIR / "cli" / "main.py").is_file()
    assert not (_PACKAGE_DIR / "cli" / "__init__.py").exists()
