"""Unit tests for fof9_editor.version."""

from __future__ import annotations

import subprocess
from importlib.metadata import PackageNotFoundError
from typing import Any

import pytest

from fof9_editor import version as version_mod


def _no_git(*args: Any, **kwargs: Any) -> None:
    raise FileNotFoundError("git")


class TestVersion:
    @pytest.mark.smoke
    def test_info_lines(self) -> None:
        lines = version_mod.get_version_info().splitlines()
        assert lines[0].startswith("FOF9 Editor v")
        assert lines[1].startswith("Commit: ")
        assert lines[2].startswith("Python: ")

    def test_source_tree_is_dev(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _missing(name: str) -> str:
            raise PackageNotFoundError(name)

        monkeypatch.setattr(version_mod, "version", _missing)
        assert version_mod.get_version() == "dev"

    def test_commit_unknown_without_git(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(subprocess, "run", _no_git)
        assert version_mod.get_commit_hash() == "unknown"

    def test_short_version_dev_with_commit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(version_mod, "get_version", lambda: "dev")
        monkeypatch.setattr(version_mod, "get_commit_hash", lambda: "abcdef1234")
        assert version_mod.get_short_version() == "dev (abcdef1)"

    def test_short_version_dev_without_commit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(version_mod, "get_version", lambda: "dev")
        monkeypatch.setattr(version_mod, "get_commit_hash", lambda: "unknown")
        assert version_mod.get_short_version() == "dev"

    def test_short_version_release(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(version_mod, "get_version", lambda: "1.2.0")
        assert version_mod.get_short_version() == "1.2.0"
