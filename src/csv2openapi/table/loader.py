from __future__ import annotations

import csv as _csv
import logging
import sys
from pathlib import Path
from typing import Dict, List, Union

from ..errors import InputNotFoundError, InputReadError, TableParseError
from .types import SkippedRow, Table

logger = logging.getLogger("csv2openapi")


# Whole file is held in memory; no per-field cap.
_csv.field_size_limit(sys.maxsize)


def _check_header(header: List[str], path: Path) -> List[str]:
    seen = set()
    for i, name in enumerate(header, start=1):
        if name == "":
            raise TableParseError(f"{path}: header column {i} has an empty name")
        if name in seen:
            raise TableParseError(f"{path}: duplicate column name {name!r} in header")
        seen.add(name)
    return list(header)


def _read_records(path: Path, delimiter: str) -> List[tuple]:
    """Return (start_line, fields) for every non-blank record, header included."""
    records = []
    start = 1
    try:
        with path.open("r", newline="", encoding="utf-8-sig") as f:
            reader = _csv.reader(f, delimiter=delimiter, strict=True)
            for fields in reader:
                if fields:
                    records.append((start, fields))
                start = reader.line_num + 1
    except UnicodeDecodeError as e:
        raise InputReadError(f"{path}: not valid UTF-8 text ({e.reason})") from e
    except _csv.Error as e:
        raise TableParseError(f"{path}:{start}: {e}") from e
    except OSError as e:
        raise InputReadError(f"{path}: cannot read input ({e.strerror or e})") from e
    return records


def read_table(
    csv_path: Union[str, Path],
    *,
    delimiter: str = ",",
    strict: bool = False,
) -> Table:
    """
    Load a delimited text file with a header line into a Table.

    Each data record becomes a Row keyed by the header names, in header
    order. Values stay raw strings. Records whose field count differs from
    the header are skipped with a warning, or raise TableParseError when
    ``strict`` is set.
    """
    path = Path(csv_path)
    if not path.is_file():
        if path.exists():
            raise InputReadError(f"{path}: not a regular file")
        raise InputNotFoundError(f"Input file not found: {path}")

    records = _read_records(path, delimiter)
    if not records:
        raise TableParseError(f"{path}: missing header row")

    _, header = records[0]
    columns = _check_header(header, path)
    table = Table(source=str(path), columns=columns)

    for line, fields in records[1:]:
        if len(fields) != len(columns):
            if strict:
                raise TableParseError(
                    f"{path}:{line}: expected {len(columns)} fields, found {len(fields)}"
                )
            logger.warning(
                "%s:%d: skipping row with %d fields (header has %d)",
                path, line, len(fields), len(columns),
            )
            table.skipped.append(SkippedRow(line=line, expected=len(columns), found=len(fields)))
            continue
        row: Dict[str, str] = dict(zip(columns, fields))
        table.rows.append(row)

    logger.debug("%s: %d column(s), %d row(s)", path, len(columns), len(table.rows))
    return table
