"""Schema mapper: flat CSV rows <-> typed record models.

A *flat record* is one CSV row as a ``dict`` of column name to string
value.  A *typed record* is one of the Pydantic models in
`fof9_editor.records.schema`.  The column layout of a model is discovered
from its field aliases (see `field_specs`), so this module contains no
per-field code.

Conversion rules:

* A column missing from the row, or present with an empty string, leaves
  the field at its zero default.  Neither is an error.
* Integers are parsed as base-10 signed numbers, reals as decimal floats,
  booleans from the canonical spellings (``1 t T TRUE true True`` and
  ``0 f F FALSE false False``); strings are copied verbatim.
* On output integers use decimal notation, reals the shortest
  representation that parses back to the same float, booleans
  ``"true"``/``"false"``.
"""

from __future__ import annotations

import enum
import functools
import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------


class RecordError(Exception):
    """Base exception for record conversion errors."""


class DecodeError(RecordError):
    """A CSV value could not be converted to its field's type.

    Attributes:
        field: Model field name that failed.
        column: CSV column the value came from.
        value: The offending raw string.
        reason: Short description of the failure.
        line: 1-based file line of the row (header is line 1), if known.
    """

    def __init__(
        self,
        field: str,
        column: str,
        value: str,
        reason: str,
        *,
        line: int | None = None,
    ) -> None:
        self.field = field
        self.column = column
        self.value = value
        self.reason = reason
        self.line = line
        msg = f"field {field} (column {column}): {reason}: {value!r}"
        if line is not None:
            msg = f"line {line}: {msg}"
        super().__init__(msg)


class EncodeError(RecordError):
    """A field value cannot be written as a CSV string."""


# ---------------------------------------------------------------------------
# Field schema discovery
# ---------------------------------------------------------------------------


class FieldKind(enum.Enum):
    """Semantic type of a CSV-backed field."""

    INTEGER = "integer"
    REAL = "real"
    STRING = "string"
    BOOLEAN = "boolean"
    UNSUPPORTED = "unsupported"


_KIND_BY_ANNOTATION: dict[object, FieldKind] = {
    int: FieldKind.INTEGER,
    float: FieldKind.REAL,
    str: FieldKind.STRING,
    bool: FieldKind.BOOLEAN,
}


@dataclass(frozen=True)
class FieldSpec:
    """One column of a record kind's file schema."""

    name: str
    column: str
    kind: FieldKind


@functools.cache
def field_specs(model_cls: type[BaseModel]) -> tuple[FieldSpec, ...]:
    """Return the column schema of *model_cls* in field declaration order.

    Only fields with an alias take part; the alias is the CSV column name.
    The result is computed once per class.
    """
    specs: list[FieldSpec] = []
    for name, info in model_cls.model_fields.items():
        if info.alias is None:
            continue
        kind = _KIND_BY_ANNOTATION.get(info.annotation, FieldKind.UNSUPPORTED)
        specs.append(FieldSpec(name=name, column=info.alias, kind=kind))
    logger.debug("%s: discovered %d columns", model_cls.__name__, len(specs))
    return tuple(specs)


def header_list(model_cls: type[BaseModel]) -> list[str]:
    """Return the CSV header for *model_cls*; matches the keys of `encode`."""
    return [spec.column for spec in field_specs(model_cls)]


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _parse_value(spec: FieldSpec, raw: str) -> object:
    if spec.kind is FieldKind.STRING:
        return raw
    if spec.kind is FieldKind.INTEGER:
        if not _INT_PATTERN.fullmatch(raw):
            raise DecodeError(spec.name, spec.column, raw, "invalid integer value")
        return int(raw)
    if spec.kind is FieldKind.REAL:
        if not _FLOAT_PATTERN.fullmatch(raw):
            raise DecodeError(spec.name, spec.column, raw, "invalid real value")
        return float(raw)
    if spec.kind is FieldKind.BOOLEAN:
        if raw in _TRUE_STRINGS:
            return True
        if raw in _FALSE_STRINGS:
            return False
        raise DecodeError(spec.name, spec.column, raw, "invalid boolean value")
    raise DecodeError(spec.name, spec.column, raw, "unsupported field type")


def decode(row: Mapping[str, str], model_cls: type[RecordT]) -> RecordT:
    """Build a *model_cls* instance from one flat CSV row.

    Args:
        row: Column name to raw string value.
        model_cls: The record model to build.

    Returns:
        A fully populated record.

    Raises:
        DecodeError: A value could not be parsed for its field's type.  No
            partial record is returned.
    """
    # Keyed by alias so models without ``populate_by_name`` decode too.
    values: dict[str, object] = {}
    for spec in field_specs(model_cls):
        raw = row.get(spec.column)
        if raw is None or raw == "":
            continue
        values[spec.column] = _parse_value(spec, raw)
    try:
        return model_cls.model_validate(values)
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = str(first["loc"][0]) if first["loc"] else "?"
        spec_at = next((s for s in field_specs(model_cls) if loc in (s.column, s.name)), None)
        name, column = (spec_at.name, spec_at.column) if spec_at else (loc, loc)
        raise DecodeError(name, column, row.get(column, ""), first["msg"]) from exc


def decode_all(
    rows: Iterable[Mapping[str, str]],
    model_cls: type[RecordT],
    *,
    lines: Sequence[int] | None = None,
) -> list[RecordT]:
    """Decode every row, tagging a failure with its file line number.

    Args:
        rows: Flat rows in file order.
        model_cls: The record model to build.
        lines: Start line of each row, as returned by
            `fof9_editor.storage.tabular.read_numbered`.  Without it, rows
            are assumed to sit one per line directly below the header.
    """
    records: list[RecordT] = []
    for idx, row in enumerate(rows):
        try:
            records.append(decode(row, model_cls))
        except DecodeError as exc:
            line = lines[idx] if lines is not None else idx + 2
            raise DecodeError(exc.field, exc.column, exc.value, exc.reason, line=line) from exc
    return records


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _format_value(spec: FieldSpec, value: object) -> str:
    if spec.kind is FieldKind.STRING and isinstance(value, str):
        return value
    if spec.kind is FieldKind.BOOLEAN and isinstance(value, bool):
        return "true" if value else "false"
    if spec.kind is FieldKind.INTEGER and isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if spec.kind is FieldKind.REAL and isinstance(value, (int, float)) and not isinstance(value, bool):
        return repr(float(value))
    msg = f"field {spec.name} (column {spec.column}): cannot encode {type(value).__name__} as {spec.kind.value}"
    raise EncodeError(msg)


def encode(record: BaseModel) -> dict[str, str]:
    """Convert a typed record into a flat CSV row.

    The result has exactly the columns of `header_list` for the record's
    class, in the same order.

    Raises:
        EncodeError: A field has an unsupported type or holds a value that
            does not match its declared type.
    """
    return {
        spec.column: _format_value(spec, getattr(record, spec.name))
        for spec in field_specs(type(record))
    }


def encode_all(records: Sequence[BaseModel]) -> list[dict[str, str]]:
    return [encode(record) for record in records]
