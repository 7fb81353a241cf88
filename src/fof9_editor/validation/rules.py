"""Reusable field rules.

Each factory returns a *rule*: a function of one value that returns
``None`` when the value is acceptable, or a human-readable message.  Rules
are typed by the value they inspect (``Rule[str]`` or ``Rule[int]``), so a
string rule is never applied to an integer field.

Usage:
    >>> from fof9_editor.validation.rules import int_range
    >>> check = int_range(0, 99)
    >>> check(42) is None
    True
    >>> check(120)
    'must be between 0 and 99'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")

Rule = Callable[[T], str | None]
"""A single check on a value of type ``T``."""

# ---------------------------------------------------------------------------
# String rules
# ---------------------------------------------------------------------------


def required(message: str = "") -> Rule[str]:
    """Fail when the string is empty after trimming whitespace."""

    def check(value: str) -> str | None:
        if not value.strip():
            return message or "this field is required"
        return None

    return check


def min_length(minimum: int) -> Rule[str]:
    """Fail when the trimmed string is shorter than *minimum* characters."""

    def check(value: str) -> str | None:
        if len(value.strip()) < minimum:
            return f"must be at least {minimum} characters"
        return None

    return check


def max_length(maximum: int) -> Rule[str]:
    """Fail when the raw (untrimmed) string is longer than *maximum*."""

    def check(value: str) -> str | None:
        if len(value) > maximum:
            return f"must be at most {maximum} characters"
        return None

    return check


# ---------------------------------------------------------------------------
# Integer rules
# ---------------------------------------------------------------------------


def int_range(low: int, high: int) -> Rule[int]:
    """Fail unless ``low <= value <= high``."""

    def check(value: int) -> str | None:
        if value < low or value > high:
            return f"must be between {low} and {high}"
        return None

    return check


def int_min(minimum: int) -> Rule[int]:
    def check(value: int) -> str | None:
        if value < minimum:
            return f"must be at least {minimum}"
        return None

    return check


def int_max(maximum: int) -> Rule[int]:
    def check(value: int) -> str | None:
        if value > maximum:
            return f"must be at most {maximum}"
        return None

    return check


def non_negative() -> Rule[int]:
    def check(value: int) -> str | None:
        if value < 0:
            return "must be zero or greater"
        return None

    return check


def positive() -> Rule[int]:
    def check(value: int) -> str | None:
        if value <= 0:
            return "must be a positive number"
        return None

    return check


def year_range(first_year: int, last_year: int) -> Rule[int]:
    """Same bounds check as `int_range`, worded for calendar years."""

    def check(value: int) -> str | None:
        if value < first_year or value > last_year:
            return f"year must be between {first_year} and {last_year}"
        return None

    return check


def month_range() -> Rule[int]:
    return int_range(1, 12)


def day_range() -> Rule[int]:
    return int_range(1, 31)


def rgb_component() -> Rule[int]:
    """One 8-bit colour channel."""
    return int_range(0, 255)


def one_of(*allowed: int) -> Rule[int]:
    """Fail unless the value is one of *allowed*."""
    choices = frozenset(allowed)
    listed = ", ".join(str(a) for a in allowed)

    def check(value: int) -> str | None:
        if value not in choices:
            return f"must be one of: {listed}"
        return None

    return check
