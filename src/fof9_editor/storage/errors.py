"""Shared exception hierarchy for file storage.

Every failure raised by the storage layer derives from `StorageError`, so
callers can report "could not read/write this file" without caring which
codec produced it.  The underlying `OSError` or `csv.Error` is always
chained as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path


class StorageError(Exception):
    """Base exception for all storage errors."""


class AtomicWriteError(StorageError):
    """Writing, syncing or renaming the temporary file failed."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class TabularReadError(StorageError):
    """A CSV file could not be opened or read (missing, permissions, ...)."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class TabularFormatError(StorageError):
    """A CSV file is malformed (e.g. unbalanced quoting).

    Attributes:
        path: The file being read.
        line: 1-based line of the offending row; the header is line 1.
    """

    def __init__(self, path: Path, line: int, message: str) -> None:
        self.path = path
        self.line = line
        super().__init__(f"{path}: error reading line {line}: {message}")


class TabularWriteError(StorageError):
    """Rows could not be serialized for writing."""
