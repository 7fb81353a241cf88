"""Repository pattern for league record files.

Defines an abstract ``Repository`` interface and a concrete
``CsvRepository`` backed by the league's CSV files, plus per-kind
load/save helpers that combine the tabular codec with the schema mapper.
"""

from __future__ import annotations

import abc
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel

from fof9_editor.records.mapper import decode_all, encode_all, header_list
from fof9_editor.records.schema import Coach, LeagueInfo, Player, Team
from fof9_editor.storage.tabular import read_numbered, write_records

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# Logical file roles used in a project's ``csvFiles`` manifest.
ROLE_INFO = "info"
ROLE_PLAYERS = "players"
ROLE_COACHES = "coaches"
ROLE_TEAMS = "teams"
ROLE_TEAM_COLORS = "teamColors"

# ---------------------------------------------------------------------------
# Per-kind file helpers
# ---------------------------------------------------------------------------


def load_records(path: Path, model_cls: type[RecordT]) -> list[RecordT]:
    """Read *path* and decode every row as *model_cls*.

    Raises:
        TabularReadError: The file is missing or unreadable.
        TabularFormatError: The CSV is malformed.
        DecodeError: A value does not fit its field's type.
    """
    _, rows = read_numbered(path)
    records = decode_all([row for _, row in rows], model_cls, lines=[line for line, _ in rows])
    logger.info("loaded %d %s records from %s", len(records), model_cls.__name__, path)
    return records


def save_records(path: Path, records: Sequence[BaseModel], model_cls: type[BaseModel]) -> None:
    """Write *records* to *path* with the full *model_cls* column header.

    An empty *records* list produces a header-only file.
    """
    write_records(path, header_list(model_cls), encode_all(records))
    logger.info("saved %d %s records to %s", len(records), model_cls.__name__, path)


def load_players(path: Path) -> list[Player]:
    return load_records(path, Player)


def load_coaches(path: Path) -> list[Coach]:
    return load_records(path, Coach)


def load_teams(path: Path) -> list[Team]:
    return load_records(path, Team)


def load_league_info(path: Path) -> list[LeagueInfo]:
    return load_records(path, LeagueInfo)


def save_players(path: Path, players: Sequence[Player]) -> None:
    save_records(path, players, Player)


def save_coaches(path: Path, coaches: Sequence[Coach]) -> None:
    save_records(path, coaches, Coach)


def save_teams(path: Path, teams: Sequence[Team]) -> None:
    save_records(path, teams, Team)


def save_league_info(path: Path, info: Sequence[LeagueInfo]) -> None:
    save_records(path, info, LeagueInfo)


# ---------------------------------------------------------------------------
# Abstract Repository
# ---------------------------------------------------------------------------


class Repository(abc.ABC):
    """Abstract base class for league record persistence."""

    @abc.abstractmethod
    def get_players(self) -> list[Player]:
        """Return all stored players."""

    @abc.abstractmethod
    def get_coaches(self) -> list[Coach]:
        """Return all stored coaches."""

    @abc.abstractmethod
    def get_teams(self) -> list[Team]:
        """Return all stored teams."""

    @abc.abstractmethod
    def get_league_info(self) -> list[LeagueInfo]:
        """Return the stored league settings rows."""

    @abc.abstractmethod
    def save_players(self, players: Sequence[Player]) -> None:
        """Persist players (overwrite)."""

    @abc.abstractmethod
    def save_coaches(self, coaches: Sequence[Coach]) -> None:
        """Persist coaches (overwrite)."""

    @abc.abstractmethod
    def save_teams(self, teams: Sequence[Team]) -> None:
        """Persist teams (overwrite)."""

    @abc.abstractmethod
    def save_league_info(self, info: Sequence[LeagueInfo]) -> None:
        """Persist league settings (overwrite)."""


# ---------------------------------------------------------------------------
# CSV Repository
# ---------------------------------------------------------------------------


class CsvRepository(Repository):
    """Repository backed by the CSV files named in a project manifest.

    Args:
        base_path: Directory the manifest paths are relative to (normally
            the directory holding the project descriptor).
        csv_files: Mapping of file role (``"players"``, ``"coaches"``,
            ``"teams"``, ``"info"``) to a path relative to *base_path*.

    A role missing from the manifest, or whose file does not exist yet,
    reads as an empty list.  Saving a role missing from the manifest is
    skipped.
    """

    def __init__(self, base_path: Path, csv_files: Mapping[str, str]) -> None:
        self._base_path = base_path
        self._csv_files = dict(csv_files)

    def path_for(self, role: str) -> Path | None:
        """Return the absolute file path for *role*, or ``None`` if unmapped."""
        relative = self._csv_files.get(role)
        if not relative:
            return None
        return self._base_path / relative

    # -- reads ---------------------------------------------------------------

    def _load(self, role: str, model_cls: type[RecordT]) -> list[RecordT]:
        path = self.path_for(role)
        if path is None:
            logger.debug("no %r file in manifest", role)
            return []
        if not path.exists():
            logger.info("%s file %s does not exist yet", role, path)
            return []
        return load_records(path, model_cls)

    def get_players(self) -> list[Player]:
        return self._load(ROLE_PLAYERS, Player)

    def get_coaches(self) -> list[Coach]:
        return self._load(ROLE_COACHES, Coach)

    def get_teams(self) -> list[Team]:
        return self._load(ROLE_TEAMS, Team)

    def get_league_info(self) -> list[LeagueInfo]:
        return self._load(ROLE_INFO, LeagueInfo)

    # -- writes --------------------------------------------------------------

    def _save(self, role: str, records: Sequence[BaseModel], model_cls: type[BaseModel]) -> None:
        path = self.path_for(role)
        if path is None:
            logger.warning("no %r file in manifest; %d records not saved", role, len(records))
            return
        save_records(path, records, model_cls)

    def save_players(self, players: Sequence[Player]) -> None:
        self._save(ROLE_PLAYERS, players, Player)

    def save_coaches(self, coaches: Sequence[Coach]) -> None:
        self._save(ROLE_COACHES, coaches, Coach)

    def save_teams(self, teams: Sequence[Team]) -> None:
        self._save(ROLE_TEAMS, teams, Team)

    def save_league_info(self, info: Sequence[LeagueInfo]) -> None:
        self._save(ROLE_INFO, info, LeagueInfo)
