"""Shared editor state: the open project, its records and the dirty flag.

`AppState` is constructed explicitly and handed to whatever needs it.
Every accessor takes the same lock, so a UI thread and a background
worker can read and replace fields without tearing.  File I/O in
`AppState.load_project` and `AppState.save_project` happens outside the
lock: the state is snapshotted or swapped in under the lock, never held
across a read or write.
"""

from __future__ import annotations

import copy
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

from fof9_editor.project.codec import load_project, save_project
from fof9_editor.project.descriptor import Project
from fof9_editor.records.schema import Coach, LeagueInfo, Player, Team
from fof9_editor.storage.repository import CsvRepository

logger = logging.getLogger(__name__)

SECTION_PLAYERS = "players"
SECTION_COACHES = "coaches"
SECTION_TEAMS = "teams"
SECTION_LEAGUE = "league"


class StateError(Exception):
    """An operation needs state that has not been set (e.g. no open project)."""


@dataclass
class _Snapshot:
    project: Project
    project_path: Path
    revision: int
    players: list[Player] = field(default_factory=list)
    coaches: list[Coach] = field(default_factory=list)
    teams: list[Team] = field(default_factory=list)
    league_info: list[LeagueInfo] = field(default_factory=list)


class AppState:
    """Mutex-guarded holder for the editor's current project and records.

    Replacing any record collection marks the state dirty; a successful
    load or save marks it clean.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._project: Project | None = None
        self._project_path: Path | None = None
        self._players: list[Player] = []
        self._coaches: list[Coach] = []
        self._teams: list[Team] = []
        self._league_info: list[LeagueInfo] = []
        self._dirty = False
        # Bumped by every change that a save would have to write.
        self._revision = 0
        self._current_section = SECTION_PLAYERS
        self._selected_index = -1

    # -- project -------------------------------------------------------------

    def get_project(self) -> Project | None:
        with self._lock:
            return self._project

    def set_project(self, project: Project | None) -> None:
        with self._lock:
            self._project = project
            self._revision += 1

    def get_project_path(self) -> Path | None:
        with self._lock:
            return self._project_path

    def set_project_path(self, path: Path | None) -> None:
        with self._lock:
            self._project_path = path
            self._revision += 1

    def has_project(self) -> bool:
        with self._lock:
            return self._project is not None

    # -- record collections --------------------------------------------------

    def get_players(self) -> list[Player]:
        with self._lock:
            return list(self._players)

    def set_players(self, players: list[Player]) -> None:
        with self._lock:
            self._players = list(players)
            self._dirty = True
            self._revision += 1

    def get_coaches(self) -> list[Coach]:
        with self._lock:
            return list(self._coaches)

    def set_coaches(self, coaches: list[Coach]) -> None:
        with self._lock:
            self._coaches = list(coaches)
            self._dirty = True
            self._revision += 1

    def get_teams(self) -> list[Team]:
        with self._lock:
            return list(self._teams)

    def set_teams(self, teams: list[Team]) -> None:
        with self._lock:
            self._teams = list(teams)
            self._dirty = True
            self._revision += 1

    def get_league_info(self) -> list[LeagueInfo]:
        with self._lock:
            return list(self._league_info)

    def set_league_info(self, info: list[LeagueInfo]) -> None:
        with self._lock:
            self._league_info = list(info)
            self._dirty = True
            self._revision += 1

    # -- dirty flag ----------------------------------------------------------

    def is_dirty(self) -> bool:
        with self._lock:
            return self._dirty

    def mark_dirty(self) -> None:
        with self._lock:
            self._dirty = True
            self._revision += 1

    def mark_clean(self) -> None:
        with self._lock:
            self._dirty = False

    # -- UI position ---------------------------------------------------------

    def get_current_section(self) -> str:
        with self._lock:
            return self._current_section

    def set_current_section(self, section: str) -> None:
        with self._lock:
            self._current_section = section

    def get_selected_index(self) -> int:
        with self._lock:
            return self._selected_index

    def set_selected_index(self, index: int) -> None:
        with self._lock:
            self._selected_index = index

    def reset(self) -> None:
        """Close the project and clear every field back to its initial value."""
        with self._lock:
            self._project = None
            self._project_path = None
            self._players = []
            self._coaches = []
            self._teams = []
            self._league_info = []
            self._dirty = False
            self._revision += 1
            self._current_section = SECTION_PLAYERS
            self._selected_index = -1

    # -- persistence ---------------------------------------------------------

    def load_project(self, path: Path) -> None:
        """Open the project at *path* together with every CSV in its manifest.

        Manifest paths are resolved against the directory holding *path*.
        Files listed but not yet created load as empty collections.  On any
        failure the current state is left untouched and the error propagates.

        Raises:
            ProjectError: The descriptor cannot be loaded.
            StorageError: A listed CSV file cannot be read or parsed.
            RecordError: A CSV value does not fit its field.
        """
        project = load_project(path)
        repo = CsvRepository(path.parent, project.csv_files)
        try:
            players = repo.get_players()
            coaches = repo.get_coaches()
            teams = repo.get_teams()
            league_info = repo.get_league_info()
        except Exception:
            logger.warning("failed to load record files for project %s", path)
            raise

        with self._lock:
            self._project = project
            self._project_path = path
            self._players = players
            self._coaches = coaches
            self._teams = teams
            self._league_info = league_info
            self._dirty = False
            self._revision += 1
            self._selected_index = -1
        logger.info(
            "opened %s: %d players, %d coaches, %d teams",
            path,
            len(players),
            len(coaches),
            len(teams),
        )

    def save_project(self) -> None:
        """Write the descriptor and every record file of the open project.

        ``lastModified`` is refreshed before writing.  The dirty flag is
        cleared only if every file was written and nothing changed while
        the files were being written; a change made during the save stays
        in memory, still dirty, and the refreshed descriptor is not put back
        over it.

        Raises:
            StateError: No project is open.
            ProjectSaveError: The descriptor could not be written.
            StorageError: A record file could not be written.
        """
        snapshot = self._snapshot()
        snapshot.project.touch()
        save_project(snapshot.project, snapshot.project_path)

        repo = CsvRepository(snapshot.project_path.parent, snapshot.project.csv_files)
        repo.save_players(snapshot.players)
        repo.save_coaches(snapshot.coaches)
        repo.save_teams(snapshot.teams)
        if snapshot.league_info:
            repo.save_league_info(snapshot.league_info)

        with self._lock:
            unchanged = self._revision == snapshot.revision
            if unchanged:
                self._project = snapshot.project
                self._dirty = False
        if unchanged:
            logger.info("saved project to %s", snapshot.project_path)
        else:
            logger.info("saved project to %s; edits made during the save are still unsaved", snapshot.project_path)

    def _snapshot(self) -> _Snapshot:
        with self._lock:
            if self._project is None or self._project_path is None:
                msg = "no project is open"
                raise StateError(msg)
            return _Snapshot(
                project=copy.deepcopy(self._project),
                project_path=self._project_path,
                revision=self._revision,
                players=list(self._players),
                coaches=list(self._coaches),
                teams=list(self._teams),
                league_info=list(self._league_info),
            )
