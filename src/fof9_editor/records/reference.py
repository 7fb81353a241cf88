"""Reference (lookup) data used to populate editor drop-downs.

Football positions, coach roles and the list of known teams, with
name <-> id lookups in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from fof9_editor.records.schema import COACH_POSITION_NAMES, Team


class Position(BaseModel):
    """A football position as listed in the game's reference files."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(default=0, alias="ID")
    name: str = Field(default="", alias="NAME")
    abbreviation: str = Field(default="", alias="ABBREVIATION")
    position_type: str = Field(default="", alias="TYPE")


_OFFENSE = "Offense"
_DEFENSE = "Defense"
_SPECIAL = "Special Teams"

_DEFAULT_POSITIONS: tuple[tuple[str, str, str], ...] = (
    ("Quarterback", "QB", _OFFENSE),
    ("Running Back", "RB", _OFFENSE),
    ("Fullback", "FB", _OFFENSE),
    ("Wide Receiver", "WR", _OFFENSE),
    ("Tight End", "TE", _OFFENSE),
    ("Left Tackle", "LT", _OFFENSE),
    ("Left Guard", "LG", _OFFENSE),
    ("Center", "C", _OFFENSE),
    ("Right Guard", "RG", _OFFENSE),
    ("Right Tackle", "RT", _OFFENSE),
    ("Left Defensive End", "LE", _DEFENSE),
    ("Right Defensive End", "RE", _DEFENSE),
    ("Defensive Tackle", "DT", _DEFENSE),
    ("Left Outside Linebacker", "LOLB", _DEFENSE),
    ("Middle Linebacker", "MLB", _DEFENSE),
    ("Right Outside Linebacker", "ROLB", _DEFENSE),
    ("Cornerback", "CB", _DEFENSE),
    ("Free Safety", "FS", _DEFENSE),
    ("Strong Safety", "SS", _DEFENSE),
    ("Kicker", "K", _SPECIAL),
    ("Punter", "P", _SPECIAL),
    ("Long Snapper", "LS", _SPECIAL),
)


def default_positions() -> list[Position]:
    """Return the standard position list; ids are 0 (QB) through 21 (LS)."""
    return [
        Position(id=idx, name=name, abbreviation=abbr, position_type=kind)
        for idx, (name, abbr, kind) in enumerate(_DEFAULT_POSITIONS)
    ]


def position_name(position_id: int) -> str:
    for pos in default_positions():
        if pos.id == position_id:
            return pos.name
    return "Unknown"


def position_abbreviation(position_id: int) -> str:
    for pos in default_positions():
        if pos.id == position_id:
            return pos.abbreviation
    return "??"


@dataclass
class ReferenceData:
    """Lookup tables shared by the record forms.

    Unknown names map to ``-1``; unknown ids map to a placeholder label.
    """

    positions: list[Position] = field(default_factory=default_positions)
    teams: list[Team] = field(default_factory=list)

    def position_options(self) -> list[str]:
        return [pos.name for pos in self.positions]

    def position_id_by_name(self, name: str) -> int:
        for pos in self.positions:
            if pos.name == name:
                return pos.id
        return -1

    def team_options(self) -> list[str]:
        return [team.display_name for team in self.teams]

    def team_id_by_name(self, display_name: str) -> int:
        for team in self.teams:
            if team.display_name == display_name:
                return team.team_id
        return -1

    def team_name_by_id(self, team_id: int) -> str:
        for team in self.teams:
            if team.team_id == team_id:
                return team.display_name
        return "Unknown Team"

    def coach_position_options(self) -> list[str]:
        return list(COACH_POSITION_NAMES)

    def coach_position_id_by_name(self, name: str) -> int:
        try:
            return COACH_POSITION_NAMES.index(name)
        except ValueError:
            return -1

    def coach_position_name_by_id(self, position_id: int) -> str:
        if 0 <= position_id < len(COACH_POSITION_NAMES):
            return COACH_POSITION_NAMES[position_id]
        return "Unknown Position"
