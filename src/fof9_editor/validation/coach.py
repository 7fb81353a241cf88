"""Game constraints for coach records."""

from __future__ import annotations

from fof9_editor.records.schema import Coach
from fof9_editor.validation.result import FieldCheck, ValidationResult, check_field, run_checks
from fof9_editor.validation.rules import (
    day_range,
    int_range,
    max_length,
    min_length,
    month_range,
    non_negative,
    required,
    year_range,
)

_COACH_CHECKS: tuple[FieldCheck, ...] = (
    FieldCheck("FirstName", "first_name", (required("First name is required"), min_length(1), max_length(50))),
    FieldCheck("LastName", "last_name", (required("Last name is required"), min_length(1), max_length(50))),
    FieldCheck("Team", "team", (int_range(0, 31),)),
    # 0=HC, 1=OC, 2=DC, 3=ST, 4=S&C
    FieldCheck("Position", "position", (int_range(0, 4),)),
    FieldCheck("PositionGroup", "position_group", (non_negative(),)),
    FieldCheck("BirthMonth", "birth_month", (month_range(),), optional=True),
    FieldCheck("BirthDay", "birth_day", (day_range(),), optional=True),
    FieldCheck("BirthYear", "birth_year", (year_range(1920, 2020),), optional=True),
    FieldCheck("BirthCity", "birth_city", (max_length(50),), optional=True),
    FieldCheck("BirthCityID", "birth_city_id", (non_negative(),), optional=True),
    FieldCheck("College", "college", (max_length(50),), optional=True),
    FieldCheck("CollegeID", "college_id", (non_negative(),), optional=True),
    FieldCheck("OffensiveStyle", "offensive_style", (int_range(0, 6),)),
    FieldCheck("DefensiveStyle", "defensive_style", (int_range(0, 4),)),
    # $10K units, up to $99.99M
    FieldCheck("PayScale", "pay_scale", (int_range(0, 9999),)),
)

_CHECKS_BY_NAME: dict[str, FieldCheck] = {check.field: check for check in _COACH_CHECKS}
# A single edited name reports the field key ("FirstName is required").
_CHECKS_BY_NAME["FirstName"] = FieldCheck(
    "FirstName", "first_name", (required("FirstName is required"), min_length(1), max_length(50))
)
_CHECKS_BY_NAME["LastName"] = FieldCheck(
    "LastName", "last_name", (required("LastName is required"), min_length(1), max_length(50))
)


def validate_coach(coach: Coach) -> ValidationResult:
    """Check every constrained coach field and collect all violations."""
    return run_checks(coach, _COACH_CHECKS)


def validate_coach_field(field_name: str, value: object) -> ValidationResult:
    return check_field(Coach, _CHECKS_BY_NAME, field_name, value)
