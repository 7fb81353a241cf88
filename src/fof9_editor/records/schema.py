"""Pydantic v2 schema models for FOF9 custom-league records.

Defines the typed records (Player, Coach, Team, LeagueInfo) that the
editor works with.  Every field that maps to a column of the league CSV
files carries that column name as its Pydantic *alias*; the schema mapper
(`fof9_editor.records.mapper`) discovers the column layout from these
aliases, so adding a column only means adding an aliased field here.

All columns default to the zero value of their type.  The game uses 0 or
an empty string to mean "not set", and files written by older tools may
omit columns entirely.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Coach position / stadium code constants
# ---------------------------------------------------------------------------

COACH_HEAD_COACH: int = 0
COACH_OFFENSIVE_COORDINATOR: int = 1
COACH_DEFENSIVE_COORDINATOR: int = 2
COACH_SPECIAL_TEAMS_COORDINATOR: int = 3
COACH_STRENGTH_CONDITIONING: int = 4

COACH_POSITION_NAMES: tuple[str, ...] = (
    "Head Coach",
    "Offensive Coordinator",
    "Defensive Coordinator",
    "Special Teams Coordinator",
    "Strength & Conditioning",
)

ROOF_OUTDOOR: int = 0
ROOF_DOME: int = 1
ROOF_RETRACTABLE: int = 2

TURF_GRASS: int = 0
TURF_ARTIFICIAL: int = 1
TURF_HYBRID: int = 2


class _Record(BaseModel):
    """Common configuration for CSV-backed records."""

    model_config = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# Player
# ---------------------------------------------------------------------------


class Player(_Record):
    """A football player with physical, career, contract and skill data.

    Skill columns use -1 in the game files to request auto-generation; the
    editor treats them as plain integers.
    """

    # Basic info
    player_id: int = Field(default=0, alias="PLAYERID")
    last_name: str = Field(default="", alias="LASTNAME")
    first_name: str = Field(default="", alias="FIRSTNAME")

    # Team and position
    team: int = Field(default=0, alias="TEAM")
    position_key: int = Field(default=0, alias="POSITION_KEY")
    uniform: int = Field(default=0, alias="UNIFORM")

    # Physical attributes
    height: int = Field(default=0, alias="HEIGHT")
    weight: int = Field(default=0, alias="WEIGHT")
    hand_size: int = Field(default=0, alias="HANDSIZE")
    arm_length: int = Field(default=0, alias="ARMLENGTH")

    # Birth info
    birth_month: int = Field(default=0, alias="BIRTHMONTH")
    birth_day: int = Field(default=0, alias="BIRTHDAY")
    birth_year: int = Field(default=0, alias="BIRTHYEAR")
    birth_city: str = Field(default="", alias="BIRTHCITY")
    birth_city_id: int = Field(default=0, alias="CITYID")

    # College
    college: str = Field(default="", alias="COLLEGE")
    college_id: int = Field(default=0, alias="COLLEGEID")

    # Draft history
    year_entry: int = Field(default=0, alias="YEARENTRY")
    round_drafted: int = Field(default=0, alias="ROUNDDRAFTED")
    selection_drafted: int = Field(default=0, alias="SELECTIONDRAFTED")
    supplemental: int = Field(default=0, alias="SUPPLEMENTAL")
    original_team: int = Field(default=0, alias="ORIGINALTEAM")

    # Career
    experience: int = Field(default=0, alias="EXPERIENCE")
    year_signed: int = Field(default=0, alias="YEARSIGNED")
    play_percentage: int = Field(default=0, alias="PLAYPERCENTAGE")
    hall_of_fame_points: int = Field(default=0, alias="HALLOFFAMEPOINTS")

    # Contract
    salary_years: int = Field(default=0, alias="SALARYYEARS")
    salary_year1: int = Field(default=0, alias="SALARYYEAR1")
    bonus_year1: int = Field(default=0, alias="BONUSYEAR1")
    salary_year2: int = Field(default=0, alias="SALARYYEAR2")
    bonus_year2: int = Field(default=0, alias="BONUSYEAR2")
    salary_year3: int = Field(default=0, alias="SALARYYEAR3")
    bonus_year3: int = Field(default=0, alias="BONUSYEAR3")
    salary_year4: int = Field(default=0, alias="SALARYYEAR4")
    bonus_year4: int = Field(default=0, alias="BONUSYEAR4")
    salary_year5: int = Field(default=0, alias="SALARYYEAR5")
    bonus_year5: int = Field(default=0, alias="BONUSYEAR5")

    overall_rating: int = Field(default=0, alias="OVERALLRATING")

    # Skills
    skill_speed: int = Field(default=0, alias="SKILL_SPEED")
    skill_power: int = Field(default=0, alias="SKILL_POWER")
    hole_recognition: int = Field(default=0, alias="HOLE_RECOGNITION")
    elusiveness: int = Field(default=0, alias="ELUSIVENESS")
    blitz_pickup: int = Field(default=0, alias="BLITZ_PICKUP")
    catch_hands: int = Field(default=0, alias="CATCH_HANDS")
    adjust_to_ball: int = Field(default=0, alias="ADJUST_TO_BALL")
    route_running: int = Field(default=0, alias="ROUTE_RUNNING")
    catch_in_traffic: int = Field(default=0, alias="CATCH_IN_TRAFFIC")
    defeat_blockers: int = Field(default=0, alias="DEFEAT_BLOCKERS")
    secure_handling: int = Field(default=0, alias="SECURE_HANDLING")
    run_block_technique: int = Field(default=0, alias="RUN_BLOCK_TECHNIQUE")
    pass_block_technique: int = Field(default=0, alias="PASS_BLOCK_TECHNIQUE")
    blocking_strength: int = Field(default=0, alias="BLOCKING_STRENGTH")
    scheme_acquisition: int = Field(default=0, alias="SCHEME_ACQUISITION")
    punt_distance: int = Field(default=0, alias="PUNT_DISTANCE")
    punt_hang_time: int = Field(default=0, alias="PUNT_HANG_TIME")
    punt_directional: int = Field(default=0, alias="PUNT_DIRECTIONAL")
    kickoff_hang_time: int = Field(default=0, alias="KICKOFF_HANG_TIME")
    field_goal_accuracy: int = Field(default=0, alias="FIELD_GOAL_ACCURACY")
    field_goal_distance: int = Field(default=0, alias="FIELD_GOAL_DISTANCE")
    run_defense: int = Field(default=0, alias="RUN_DEFENSE")
    pass_rush_technique: int = Field(default=0, alias="PASS_RUSH_TECHNIQUE")
    pass_rush_strength: int = Field(default=0, alias="PASS_RUSH_STRENGTH")
    pass_defense_man: int = Field(default=0, alias="PASS_DEFENSE_MAN")
    pass_defense_physical: int = Field(default=0, alias="PASS_DEFENSE_PHYSICAL")
    pass_defense_zone: int = Field(default=0, alias="PASS_DEFENSE_ZONE")
    pass_defense_hands: int = Field(default=0, alias="PASS_DEFENSE_HANDS")
    defensive_diagnosis: int = Field(default=0, alias="DEFENSIVE_DIAGNOSIS")
    special_teams: int = Field(default=0, alias="SPECIAL_TEAMS")
    punt_returns: int = Field(default=0, alias="PUNT_RETURNS")
    kick_returns: int = Field(default=0, alias="KICK_RETURNS")
    long_snapping: int = Field(default=0, alias="LONG_SNAPPING")
    kick_holding: int = Field(default=0, alias="KICK_HOLDING")
    endurance: int = Field(default=0, alias="ENDURANCE")

    # Draft class
    base_year: int = Field(default=0, alias="BASE_YEAR")

    @property
    def display_name(self) -> str:
        """Full name as shown in player lists."""
        return f"{self.first_name} {self.last_name}"


# ---------------------------------------------------------------------------
# Coach
# ---------------------------------------------------------------------------


class Coach(_Record):
    """A coaching staff member."""

    last_name: str = Field(default="", alias="LASTNAME")
    first_name: str = Field(default="", alias="FIRSTNAME")

    birth_month: int = Field(default=0, alias="BIRTHMONTH")
    birth_day: int = Field(default=0, alias="BIRTHDAY")
    birth_year: int = Field(default=0, alias="BIRTHYEAR")
    birth_city: str = Field(default="", alias="BIRTHCITY")
    birth_city_id: int = Field(default=0, alias="CITYID")

    college: str = Field(default="", alias="COLLEGE")
    college_id: int = Field(default=0, alias="COLLEGEID")

    team: int = Field(default=0, alias="TEAM")
    position: int = Field(default=0, alias="POSITION")
    position_group: int = Field(default=0, alias="POSITIONGROUP")

    offensive_style: int = Field(default=0, alias="OFFENSIVESTYLE")
    defensive_style: int = Field(default=0, alias="DEFENSIVESTYLE")

    # Units of $10,000.
    pay_scale: int = Field(default=0, alias="PAYSCALE")

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def position_name(self) -> str:
        """Human-readable staff role, ``"Unknown"`` for out-of-range codes."""
        if 0 <= self.position < len(COACH_POSITION_NAMES):
            return COACH_POSITION_NAMES[self.position]
        return "Unknown"


# ---------------------------------------------------------------------------
# Team
# ---------------------------------------------------------------------------


class Team(_Record):
    """A franchise: identity, colours, stadium and future-stadium plans."""

    year: int = Field(default=0, alias="YEAR")
    team_id: int = Field(default=0, alias="TEAMID")
    team_name: str = Field(default="", alias="TEAMNAME")
    nick_name: str = Field(default="", alias="NICKNAME")
    abbreviation: str = Field(default="", alias="ABBREVIATION")

    conference: int = Field(default=0, alias="CONFERENCE")
    division: int = Field(default=0, alias="DIVISION")

    # References cities.csv
    city: int = Field(default=0, alias="CITY")

    primary_red: int = Field(default=0, alias="PRIMARYRED")
    primary_green: int = Field(default=0, alias="PRIMARYGREEN")
    primary_blue: int = Field(default=0, alias="PRIMARYBLUE")
    secondary_red: int = Field(default=0, alias="SECONDARYRED")
    secondary_green: int = Field(default=0, alias="SECONDARYGREEN")
    secondary_blue: int = Field(default=0, alias="SECONDARYBLUE")

    roof: int = Field(default=0, alias="ROOF")
    turf: int = Field(default=0, alias="TURF")
    built: int = Field(default=0, alias="BUILT")
    capacity: int = Field(default=0, alias="CAPACITY")
    luxury: int = Field(default=0, alias="LUXURY")
    condition: int = Field(default=0, alias="CONDITION")

    attendance: int = Field(default=0, alias="ATTENDANCE")
    support: int = Field(default=0, alias="SUPPORT")

    plan: int = Field(default=0, alias="PLAN")
    completed: int = Field(default=0, alias="COMPLETED")
    future: int = Field(default=0, alias="FUTURE")
    future_name: str = Field(default="", alias="FUTURENAME")
    future_abbr: str = Field(default="", alias="FUTUREABBR")
    future_roof: int = Field(default=0, alias="FUTUREROOF")
    future_turf: int = Field(default=0, alias="FUTURETURF")
    future_cap: int = Field(default=0, alias="FUTURECAP")
    future_luxury: int = Field(default=0, alias="FUTURELUXURY")
    team_contribution: int = Field(default=0, alias="TEAMCONTRIBUTION")

    @property
    def display_name(self) -> str:
        return f"{self.team_name} {self.nick_name}"

    @property
    def primary_color(self) -> tuple[int, int, int]:
        """Primary colour as an 8-bit RGB triple."""
        return (self.primary_red & 0xFF, self.primary_green & 0xFF, self.primary_blue & 0xFF)

    @property
    def secondary_color(self) -> tuple[int, int, int]:
        return (self.secondary_red & 0xFF, self.secondary_green & 0xFF, self.secondary_blue & 0xFF)


# ---------------------------------------------------------------------------
# League info
# ---------------------------------------------------------------------------


class LeagueInfo(_Record):
    """League-wide settings: schedule layout, salary cap and salary minimums.

    ``schedule_id`` has the form ``"teams_divisions_games"`` (e.g.
    ``"32_8_17"``).  The salary cap is stored in units of $100,000 and the
    minimums in units of $10,000.
    """

    schedule_id: str = Field(default="", alias="SCHEDULEID")
    base_year: int = Field(default=0, alias="BASE_YEAR")
    salary_cap: int = Field(default=0, alias="SALARYCAP")

    minimum: int = Field(default=0, alias="MINIMUM")
    salary1: int = Field(default=0, alias="SALARY1")
    salary2: int = Field(default=0, alias="SALARY2")
    salary3: int = Field(default=0, alias="SALARY3")
    salary45: int = Field(default=0, alias="SALARY45")
    salary789: int = Field(default=0, alias="SALARY789")
    salary10: int = Field(default=0, alias="SALARY10")

    def salary_minimum(self, experience: int) -> int:
        """Return the salary floor for a player with *experience* seasons.

        There is no bucket for six seasons; that value (like any negative
        one) falls back to the rookie minimum, matching the game data.
        """
        if experience == 0:
            return self.minimum
        if experience == 1:
            return self.salary1
        if experience == 2:
            return self.salary2
        if experience == 3:
            return self.salary3
        if 4 <= experience <= 5:
            return self.salary45
        if 7 <= experience <= 9:
            return self.salary789
        if experience >= 10:
            return self.salary10
        return self.minimum

    def schedule_id_is_valid(self) -> bool:
        """Return ``True`` when ``schedule_id`` has exactly three ``_``-separated parts."""
        return len(self.schedule_id.split("_")) == 3


def new_default_league_info(base_year: int) -> LeagueInfo:
    """Return league settings matching a standard 32-team, 17-game league."""
    return LeagueInfo(
        schedule_id="32_8_17",
        base_year=base_year,
        salary_cap=2000,
        minimum=70,
        salary1=85,
        salary2=100,
        salary3=115,
        salary45=130,
        salary789=150,
        salary10=180,
    )
