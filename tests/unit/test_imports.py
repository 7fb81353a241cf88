"""Smoke tests for package imports.

These tests run in pre-commit hooks to catch import errors quickly.
"""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.smoke
def test_can_import_fof9_editor() -> None:
    """Verify package is importable without errors.

    This smoke test catches:
    - Import errors from syntax issues
    - Circular import problems
    - Missing dependencies
    """
    import fof9_editor

    assert fof9_editor is not None
    assert isinstance(fof9_editor.__version__, str)


@pytest.mark.smoke
@pytest.mark.parametrize(
    "module",
    [
        "fof9_editor.records",
        "fof9_editor.storage",
        "fof9_editor.validation",
        "fof9_editor.project",
        "fof9_editor.state",
        "fof9_editor.tables",
        "fof9_editor.cli.main",
    ],
)
def test_can_import_subpackages(module: str) -> None:
    assert importlib.import_module(module) is not None
