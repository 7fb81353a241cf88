"""Validation results and the field-check runner.

`validate_field` applies every rule to a value and records one
`FieldViolation` per failing rule.  Results from several fields are
combined with `ValidationResult.merge`.  Nothing here raises on bad data:
the caller inspects ``result.valid`` and ``result.errors`` and decides what
to do.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel

from fof9_editor.validation.rules import Rule

T = TypeVar("T")


@dataclass(frozen=True)
class FieldViolation:
    """One failed rule on one field."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Accumulated violations for a value, a field, or a whole record.

    A result is valid iff it holds no violations.
    """

    errors: list[FieldViolation] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.append(FieldViolation(field_name, message))

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Append *other*'s violations to this result and return ``self``."""
        self.errors.extend(other.errors)
        return self

    def has_error(self, field_name: str) -> bool:
        return any(err.field == field_name for err in self.errors)

    def get_error(self, field_name: str) -> str:
        """Return the first message for *field_name*, or ``""``."""
        for err in self.errors:
            if err.field == field_name:
                return err.message
        return ""

    def errors_for(self, field_name: str) -> list[str]:
        return [err.message for err in self.errors if err.field == field_name]

    @property
    def fields(self) -> list[str]:
        """Names of the fields with at least one violation, in first-seen order."""
        return list(dict.fromkeys(err.field for err in self.errors))


def validate_field(field_name: str, value: T, *rules: Rule[T]) -> ValidationResult:
    """Apply every rule in *rules* to *value*.

    All rules run, so three failing rules produce three violations.
    """
    result = ValidationResult()
    for rule in rules:
        message = rule(value)
        if message is not None:
            result.add_error(field_name, message)
    return result


# ---------------------------------------------------------------------------
# Declarative per-record checks
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldCheck:
    """Rules for one record attribute.

    Attributes:
        field: Name reported in violations (e.g. ``"Height"``).
        attr: Attribute of the record model holding the value.
        rules: Rules applied in order.
        optional: When ``True`` a zero / empty value means "not set" and is
            not checked.
    """

    field: str
    attr: str
    rules: tuple[Rule[Any], ...]
    optional: bool = False

    def run(self, value: Any) -> ValidationResult:
        if self.optional and not value:
            return ValidationResult()
        return validate_field(self.field, value, *self.rules)


def run_checks(record: BaseModel, checks: Iterable[FieldCheck]) -> ValidationResult:
    """Run *checks* in order against *record* and merge their results."""
    result = ValidationResult()
    for check in checks:
        result.merge(check.run(getattr(record, check.attr)))
    return result


def check_field(
    model_cls: type[BaseModel],
    checks: Mapping[str, FieldCheck],
    field_name: str,
    value: object,
) -> ValidationResult:
    """Validate a single edited value by its reported field name.

    Unknown field names produce a valid result.  A value whose type does not
    match the model attribute (e.g. text typed into a numeric field) is
    reported as a violation instead of being passed to the rules.
    """
    check = checks.get(field_name)
    if check is None:
        return ValidationResult()
    expected = model_cls.model_fields[check.attr].annotation
    if not isinstance(expected, type) or not _matches(value, expected):
        result = ValidationResult()
        type_name = expected.__name__ if isinstance(expected, type) else str(expected)
        result.add_error(field_name, f"expected {type_name} value, got {type(value).__name__}")
        return result
    return FieldCheck(field_name, check.attr, check.rules, check.optional).run(value)


def _matches(value: object, expected: type) -> bool:
    if isinstance(value, bool) and expected is not bool:
        return False
    return isinstance(value, expected)
