"""File storage: atomic writes, CSV codec and record repositories."""

from __future__ import annotations

from fof9_editor.storage.atomic import atomic_write_bytes, atomic_write_text
from fof9_editor.storage.errors import (
    AtomicWriteError,
    StorageError,
    TabularFormatError,
    TabularReadError,
    TabularWriteError,
)
from fof9_editor.storage.repository import (
    CsvRepository,
    Repository,
    load_coaches,
    load_league_info,
    load_players,
    load_records,
    load_teams,
    save_coaches,
    save_league_info,
    save_players,
    save_records,
    save_teams,
)
from fof9_editor.storage.tabular import read_numbered, read_records, read_table, write_records

__all__ = [
    "AtomicWriteError",
    "CsvRepository",
    "Repository",
    "StorageError",
    "TabularFormatError",
    "TabularReadError",
    "TabularWriteError",
    "atomic_write_bytes",
    "atomic_write_text",
    "load_coaches",
    "load_league_info",
    "load_players",
    "load_records",
    "load_teams",
    "read_numbered",
    "read_records",
    "read_table",
    "save_coaches",
    "save_league_info",
    "save_players",
    "save_records",
    "save_teams",
    "write_records",
]
