"""Header-driven CSV reading and atomic CSV writing.

Files are UTF-8, comma-delimited, with a header row.  Header names are
case-preserving.  Reading is tolerant of short rows (missing trailing
values read as ``""``) and of empty files (zero records); writing always
goes through `fof9_editor.storage.atomic`.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from fof9_editor.storage.atomic import atomic_write_text
from fof9_editor.storage.errors import TabularFormatError, TabularReadError, TabularWriteError
from fof9_editor.utils.logger import VERBOSE

logger = logging.getLogger(__name__)

FlatRecord = dict[str, str]


def read_numbered(path: Path) -> tuple[list[str], list[tuple[int, FlatRecord]]]:
    """Read a CSV file, pairing each row with the physical line it starts on.

    Header names and values are stripped of surrounding whitespace.  Blank
    lines are skipped.  Values beyond the last header are ignored.  Line
    numbers are 1-based with the header on line 1; a quoted cell spanning
    several lines moves every later row down accordingly.

    Args:
        path: CSV file to read.

    Returns:
        ``(headers, rows)`` where each row is ``(start_line, record)``.
        Both are empty for an empty file; a header-only file yields its
        headers and no rows.

    Raises:
        TabularReadError: The file does not exist or cannot be opened.
        TabularFormatError: A row is malformed; the error names the line
            the row starts on.
    """
    try:
        fh = path.open(newline="", encoding="utf-8-sig")
    except OSError as exc:
        raise TabularReadError(path, f"cannot open file: {exc}") from exc

    headers: list[str] = []
    rows: list[tuple[int, FlatRecord]] = []
    with fh:
        reader = csv.reader(fh, strict=True)
        start = 1
        try:
            header_row = next(reader, None)
            if header_row is None:
                logger.log(VERBOSE, "%s is empty", path)
                return [], []
            headers = [name.strip() for name in header_row]
            while True:
                start = reader.line_num + 1
                row = next(reader, None)
                if row is None:
                    break
                if not row:
                    continue
                record = {
                    header: row[idx].strip() if idx < len(row) else ""
                    for idx, header in enumerate(headers)
                }
                rows.append((start, record))
        except csv.Error as exc:
            raise TabularFormatError(path, start, str(exc)) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TabularReadError(path, f"read failed: {exc}") from exc

    logger.log(VERBOSE, "read %d records from %s", len(rows), path)
    return headers, rows


def read_table(path: Path) -> tuple[list[str], list[FlatRecord]]:
    """Read a CSV file into its header and a list of row mappings.

    See `read_numbered` for the parsing rules and errors.
    """
    headers, rows = read_numbered(path)
    return headers, [record for _, record in rows]


def read_records(path: Path) -> list[FlatRecord]:
    """Read a CSV file and return only its rows.  See `read_table`."""
    _, records = read_table(path)
    return records


def serialize_records(headers: Sequence[str], records: Iterable[Mapping[str, str]]) -> str:
    """Render *records* as CSV text with *headers* as the first line.

    A record lacking a header key writes ``""`` in that column; keys not in
    *headers* are dropped.

    Raises:
        TabularWriteError: *headers* is empty.
    """
    if not headers:
        msg = "headers cannot be empty"
        raise TabularWriteError(msg)
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(headers)
    for record in records:
        writer.writerow([record.get(header, "") for header in headers])
    return buffer.getvalue()


def write_records(path: Path, headers: Sequence[str], records: Iterable[Mapping[str, str]]) -> None:
    """Atomically replace *path* with a CSV of *records*.

    Raises:
        TabularWriteError: *headers* is empty.
        AtomicWriteError: The file could not be written.
    """
    text = serialize_records(headers, records)
    atomic_write_text(path, text)
