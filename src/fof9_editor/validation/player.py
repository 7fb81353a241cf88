"""Game constraints for player records."""

from __future__ import annotations

from fof9_editor.records.schema import Player
from fof9_editor.validation.result import FieldCheck, ValidationResult, check_field, run_checks
from fof9_editor.validation.rules import int_range, max_length, min_length, required, year_range

_PLAYER_CHECKS: tuple[FieldCheck, ...] = (
    FieldCheck("FirstName", "first_name", (required("First name is required"), min_length(1), max_length(50))),
    FieldCheck("LastName", "last_name", (required("Last name is required"), min_length(1), max_length(50))),
    # 32 teams
    FieldCheck("Team", "team", (int_range(0, 31),)),
    FieldCheck("Position", "position_key", (int_range(0, 21),)),
    FieldCheck("Uniform", "uniform", (int_range(0, 99),)),
    FieldCheck("OverallRating", "overall_rating", (int_range(0, 99),)),
    # Inches: 5'0" to 7'6"
    FieldCheck("Height", "height", (int_range(60, 90),)),
    FieldCheck("Weight", "weight", (int_range(150, 400),)),
    FieldCheck("HandSize", "hand_size", (int_range(7, 12),), optional=True),
    FieldCheck("ArmLength", "arm_length", (int_range(28, 38),), optional=True),
    FieldCheck("Experience", "experience", (int_range(0, 25),)),
    FieldCheck("College", "college", (max_length(50),), optional=True),
    FieldCheck("YearEntry", "year_entry", (year_range(1920, 2100),), optional=True),
    # 0 = undrafted
    FieldCheck("RoundDrafted", "round_drafted", (int_range(0, 7),)),
    FieldCheck("SelectionDrafted", "selection_drafted", (int_range(1, 300),), optional=True),
)

_CHECKS_BY_NAME: dict[str, FieldCheck] = {check.field: check for check in _PLAYER_CHECKS}
_CHECKS_BY_NAME["PositionKey"] = _CHECKS_BY_NAME["Position"]
# A single edited name reports the field key ("FirstName is required").
_CHECKS_BY_NAME["FirstName"] = FieldCheck(
    "FirstName", "first_name", (required("FirstName is required"), min_length(1), max_length(50))
)
_CHECKS_BY_NAME["LastName"] = FieldCheck(
    "LastName", "last_name", (required("LastName is required"), min_length(1), max_length(50))
)


def validate_player(player: Player) -> ValidationResult:
    """Check every constrained player field and collect all violations."""
    return run_checks(player, _PLAYER_CHECKS)


def validate_player_field(field_name: str, value: object) -> ValidationResult:
    """Check one edited player value, e.g. ``("Height", 72)``."""
    return check_field(Player, _CHECKS_BY_NAME, field_name, value)
