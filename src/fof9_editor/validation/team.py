"""Game constraints for team records.

Besides per-field bounds, a team's average attendance may not exceed its
stadium capacity, and the future-stadium fields are only checked while a
stadium plan is active (``PLAN != 0``).
"""

from __future__ import annotations

from fof9_editor.records.schema import Team
from fof9_editor.validation.result import FieldCheck, ValidationResult, check_field, run_checks
from fof9_editor.validation.rules import (
    int_range,
    max_length,
    min_length,
    non_negative,
    required,
    rgb_component,
    year_range,
)

_ROOF_OR_TURF = int_range(0, 2)
_CAPACITY = int_range(1000, 200000)
_LUXURY = int_range(0, 500)

_IDENTITY_AND_STADIUM_CHECKS: tuple[FieldCheck, ...] = (
    FieldCheck("TeamName", "team_name", (required("Team name is required"), min_length(1), max_length(50))),
    FieldCheck("NickName", "nick_name", (required("Nickname is required"), min_length(1), max_length(50))),
    FieldCheck("Abbreviation", "abbreviation", (required("Abbreviation is required"), min_length(2), max_length(5))),
    FieldCheck("Year", "year", (year_range(1920, 2100),)),
    FieldCheck("TeamID", "team_id", (int_range(0, 31),)),
    # 0=AFC, 1=NFC
    FieldCheck("Conference", "conference", (int_range(0, 1),)),
    FieldCheck("Division", "division", (int_range(0, 3),)),
    FieldCheck("City", "city", (non_negative(),)),
    FieldCheck("PrimaryRed", "primary_red", (rgb_component(),)),
    FieldCheck("PrimaryGreen", "primary_green", (rgb_component(),)),
    FieldCheck("PrimaryBlue", "primary_blue", (rgb_component(),)),
    FieldCheck("SecondaryRed", "secondary_red", (rgb_component(),)),
    FieldCheck("SecondaryGreen", "secondary_green", (rgb_component(),)),
    FieldCheck("SecondaryBlue", "secondary_blue", (rgb_component(),)),
    FieldCheck("Roof", "roof", (_ROOF_OR_TURF,)),
    FieldCheck("Turf", "turf", (_ROOF_OR_TURF,)),
    FieldCheck("Built", "built", (year_range(1900, 2100),), optional=True),
    FieldCheck("Capacity", "capacity", (_CAPACITY,)),
    FieldCheck("Luxury", "luxury", (_LUXURY,)),
    FieldCheck("Condition", "condition", (int_range(1, 10),)),
)

_ATTENDANCE_CHECK = FieldCheck("Attendance", "attendance", (non_negative(),))
_SUPPORT_CHECK = FieldCheck("Support", "support", (int_range(0, 100),))

_FUTURE_STADIUM_CHECKS: tuple[FieldCheck, ...] = (
    FieldCheck("FutureName", "future_name", (max_length(50),), optional=True),
    FieldCheck("FutureAbbr", "future_abbr", (max_length(5),), optional=True),
    FieldCheck("FutureRoof", "future_roof", (_ROOF_OR_TURF,)),
    FieldCheck("FutureTurf", "future_turf", (_ROOF_OR_TURF,)),
    FieldCheck("FutureCap", "future_cap", (_CAPACITY,), optional=True),
    FieldCheck("FutureLuxury", "future_luxury", (_LUXURY,)),
)

_CHECKS_BY_NAME: dict[str, FieldCheck] = {
    check.field: check
    for check in (
        *_IDENTITY_AND_STADIUM_CHECKS,
        _ATTENDANCE_CHECK,
        _SUPPORT_CHECK,
        *_FUTURE_STADIUM_CHECKS,
    )
}
# A single edited name reports the field key ("TeamName is required"), and a
# future capacity edited on its own has no "0 means unset" exemption.
_CHECKS_BY_NAME["TeamName"] = FieldCheck(
    "TeamName", "team_name", (required("TeamName is required"), min_length(1), max_length(50))
)
_CHECKS_BY_NAME["NickName"] = FieldCheck(
    "NickName", "nick_name", (required("NickName is required"), min_length(1), max_length(50))
)
_CHECKS_BY_NAME["FutureCap"] = FieldCheck("FutureCap", "future_cap", (_CAPACITY,))


def validate_team(team: Team) -> ValidationResult:
    """Check every constrained team field and collect all violations."""
    result = run_checks(team, _IDENTITY_AND_STADIUM_CHECKS)

    if team.attendance > team.capacity:
        result.add_error("Attendance", "cannot exceed stadium capacity")
    else:
        result.merge(_ATTENDANCE_CHECK.run(team.attendance))

    result.merge(_SUPPORT_CHECK.run(team.support))

    if team.plan != 0:
        result.merge(run_checks(team, _FUTURE_STADIUM_CHECKS))
    return result


def validate_team_field(field_name: str, value: object) -> ValidationResult:
    """Check one edited team value.

    Cross-field rules (attendance vs. capacity, the stadium-plan switch)
    need the whole record and only run in `validate_team`.
    """
    return check_field(Team, _CHECKS_BY_NAME, field_name, value)
