"""Unit tests for fof9_editor.storage.atomic."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fof9_editor.storage.atomic import atomic_write_bytes, atomic_write_text, temp_path_for
from fof9_editor.storage.errors import AtomicWriteError, StorageError


class TestTempPath:
    def test_sibling_with_tmp_suffix(self, tmp_path: Path) -> None:
        assert temp_path_for(tmp_path / "players.csv") == tmp_path / "players.csv.tmp"


class TestAtomicWrite:
    @pytest.mark.smoke
    def test_writes_payload(self, tmp_path: Path) -> None:
        target = tmp_path / "out.bin"
        atomic_write_bytes(target, b"\x00\x01data")
        assert target.read_bytes() == b"\x00\x01data"
        assert not temp_path_for(target).exists()

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        target.write_text("old")
        atomic_write_text(target, "new")
        assert target.read_text() == "new"

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "out.txt"
        atomic_write_text(target, "x")
        assert target.read_text() == "x"

    def test_text_is_utf8(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        atomic_write_text(target, "Müller")
        assert target.read_bytes() == "Müller".encode()

    def test_rename_failure_cleans_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "out.txt"
        target.write_text("original")

        def _fail(src: object, dst: object) -> None:
            raise PermissionError("denied")

        monkeypatch.setattr(os, "replace", _fail)
        with pytest.raises(AtomicWriteError, match="denied") as exc_info:
            atomic_write_text(target, "new")

        assert isinstance(exc_info.value, StorageError)
        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert exc_info.value.path == target
        assert target.read_text() == "original"
        assert not temp_path_for(target).exists()

    def test_fsync_failure_cleans_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "out.txt"

        def _fail(fd: int) -> None:
            raise OSError("disk full")

        monkeypatch.setattr(os, "fsync", _fail)
        with pytest.raises(AtomicWriteError, match="disk full"):
            atomic_write_text(target, "data")
        assert not target.exists()
        assert not temp_path_for(target).exists()

    def test_unopenable_destination(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(AtomicWriteError):
            atomic_write_text(blocker / "child.txt", "x")

    def test_interrupt_cleans_up_and_propagates(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "out.txt"

        def _interrupt(fd: int) -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr(os, "fsync", _interrupt)
        with pytest.raises(KeyboardInterrupt):
            atomic_write_text(target, "data")
        assert not temp_path_for(target).exists()
