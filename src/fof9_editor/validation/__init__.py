"""Field validation for league records."""

from __future__ import annotations

from fof9_editor.validation.coach import validate_coach, validate_coach_field
from fof9_editor.validation.player import validate_player, validate_player_field
from fof9_editor.validation.result import (
    FieldCheck,
    FieldViolation,
    ValidationResult,
    run_checks,
    validate_field,
)
from fof9_editor.validation.rules import (
    Rule,
    day_range,
    int_max,
    int_min,
    int_range,
    max_length,
    min_length,
    month_range,
    non_negative,
    one_of,
    positive,
    required,
    rgb_component,
    year_range,
)
from fof9_editor.validation.team import validate_team, validate_team_field

__all__ = [
    "FieldCheck",
    "FieldViolation",
    "Rule",
    "ValidationResult",
    "day_range",
    "int_max",
    "int_min",
    "int_range",
    "max_length",
    "min_length",
    "month_range",
    "non_negative",
    "one_of",
    "positive",
    "required",
    "rgb_component",
    "run_checks",
    "validate_coach",
    "validate_coach_field",
    "validate_field",
    "validate_player",
    "validate_player_field",
    "validate_team",
    "validate_team_field",
    "year_range",
]
