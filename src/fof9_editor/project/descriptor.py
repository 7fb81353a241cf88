"""Project descriptor model (the ``.fof9proj`` JSON document).

A project names a custom league and lists the CSV files that make it up.
JSON keys are camelCase; the Python attributes are snake_case aliases of
them.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fof9_editor.storage.repository import (
    ROLE_COACHES,
    ROLE_INFO,
    ROLE_PLAYERS,
    ROLE_TEAM_COLORS,
    ROLE_TEAMS,
)

PROJECT_FORMAT_VERSION = "1.0"
PROJECT_FILE_SUFFIX = ".fof9proj"


class Project(BaseModel):
    """League metadata plus the manifest of the league's CSV files."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = Field(default="", alias="version")
    league_name: str = Field(default="", alias="leagueName")
    identifier: str = Field(default="", alias="identifier")
    created: datetime | None = Field(default=None, alias="created")
    last_modified: datetime | None = Field(default=None, alias="lastModified")
    base_year: int = Field(default=0, alias="baseYear")
    data_path: str = Field(default="", alias="dataPath")
    reference_path: str = Field(default="", alias="referencePath")
    csv_files: dict[str, str] = Field(default_factory=dict, alias="csvFiles")
    user_preferences: dict[str, Any] = Field(default_factory=dict, alias="userPreferences")

    @field_validator("csv_files", "user_preferences", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def csv_path(self, role: str) -> str:
        """Return the manifest path for *role*, or ``""`` if it is not listed."""
        return self.csv_files.get(role, "")

    def resolve_csv(self, role: str, base_dir: Path) -> Path | None:
        """Return *role*'s file as a path under *base_dir*, or ``None``."""
        relative = self.csv_path(role)
        return base_dir / relative if relative else None

    def touch(self) -> None:
        """Set ``last_modified`` to the current UTC time."""
        self.last_modified = datetime.now(timezone.utc)


def new_project(name: str, identifier: str, base_year: int) -> Project:
    """Create a project with the standard directory layout and file manifest.

    Example:
        >>> project = new_project("My League", "myleague", 2025)
        >>> project.csv_path("players")
        'data/myleague_players.csv'
    """
    now = datetime.now(timezone.utc)
    return Project(
        version=PROJECT_FORMAT_VERSION,
        league_name=name,
        identifier=identifier,
        created=now,
        last_modified=now,
        base_year=base_year,
        data_path="./data/",
        reference_path="./reference/",
        csv_files={
            ROLE_INFO: f"data/{identifier}_info.csv",
            ROLE_PLAYERS: f"data/{identifier}_players.csv",
            ROLE_COACHES: f"data/{identifier}_coaches.csv",
            ROLE_TEAMS: "data/team_info.csv",
            ROLE_TEAM_COLORS: "data/team_colors.csv",
        },
        user_preferences={},
    )
