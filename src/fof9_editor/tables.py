"""Tabular views of record collections backed by pandas.

The editor's record lists are sortable and filterable.  These helpers
build a typed ``DataFrame`` from a record list (one column per CSV column,
validated with a Pandera schema derived from the record model) and apply
the list operations to it.  Row labels are the positions of the records
in the source list, so a filtered or sorted view still maps back to the
record it shows.

Usage:
    >>> from fof9_editor.records import Coach
    >>> from fof9_editor.tables import records_frame, filter_frame
    >>> df = records_frame([Coach(last_name="Reid", team=3)], Coach)
    >>> filter_frame(df, "reid", ["LASTNAME"]).index.tolist()
    [0]
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd  # type: ignore[import-untyped]
import pandera.pandas as pa
from pydantic import BaseModel

from fof9_editor.records.mapper import FieldKind, field_specs

_DTYPES: dict[FieldKind, type] = {
    FieldKind.INTEGER: int,
    FieldKind.REAL: float,
    FieldKind.STRING: str,
    FieldKind.BOOLEAN: bool,
}


def frame_schema(model_cls: type[BaseModel]) -> pa.DataFrameSchema:
    """Return the Pandera schema for a frame of *model_cls* records.

    Columns are the record's CSV columns in declaration order; values are
    coerced to the column's type.
    """
    return pa.DataFrameSchema(
        {
            spec.column: pa.Column(_DTYPES[spec.kind], nullable=False)
            for spec in field_specs(model_cls)
            if spec.kind in _DTYPES
        },
        strict=True,
        ordered=True,
        coerce=True,
    )


def records_frame(records: Sequence[BaseModel], model_cls: type[BaseModel]) -> pd.DataFrame:
    """Build a validated frame with one row per record.

    Raises:
        TypeError: A record is not an instance of *model_cls*.
    """
    specs = [spec for spec in field_specs(model_cls) if spec.kind in _DTYPES]
    for record in records:
        if not isinstance(record, model_cls):
            msg = f"expected {model_cls.__name__} records, got {type(record).__name__}"
            raise TypeError(msg)
    rows = [{spec.column: getattr(record, spec.name) for spec in specs} for record in records]
    df = pd.DataFrame(rows, columns=[spec.column for spec in specs])
    return frame_schema(model_cls).validate(df)


def _require_columns(df: pd.DataFrame, columns: Sequence[str]) -> None:
    if not columns:
        return
    pa.DataFrameSchema({col: pa.Column() for col in columns}, strict=False).validate(df)


def filter_frame(df: pd.DataFrame, text: str, columns: Sequence[str]) -> pd.DataFrame:
    """Keep rows where any of *columns* contains *text*, ignoring case.

    Blank *text* keeps every row.  Row labels are preserved.

    Raises:
        pa.errors.SchemaError: One of *columns* is not in *df*.
    """
    _require_columns(df, columns)
    needle = text.strip().lower()
    if not needle or not columns:
        return df.copy()
    mask = pd.Series(False, index=df.index)
    for col in columns:
        mask |= df[col].astype(str).str.lower().str.contains(needle, regex=False)
    return df[mask]


def sort_frame(df: pd.DataFrame, column: str, *, ascending: bool = True) -> pd.DataFrame:
    """Sort rows by *column*; text columns sort case-insensitively.

    The sort is stable, so rows with equal keys keep their relative order.

    Raises:
        pa.errors.SchemaError: *column* is not in *df*.
    """
    _require_columns(df, [column])

    def _key(values: pd.Series) -> pd.Series:
        if pd.api.types.is_string_dtype(values) or values.dtype == object:
            return values.astype(str).str.lower()
        return values

    return df.sort_values(column, ascending=ascending, kind="mergesort", key=_key)


def row_positions(df: pd.DataFrame) -> list[int]:
    """Return the source-list positions of the rows in *df*, in display order."""
    return [int(label) for label in df.index]
