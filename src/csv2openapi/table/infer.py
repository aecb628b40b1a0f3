from __future__ import annotations

import logging
import re
from fractions import Fraction
from typing import List, Sequence

from .types import INTEGER, NUMBER, STRING, Column, Table

logger = logging.getLogger("csv2openapi")

# A string column becomes an enum when it has strictly fewer distinct
# values than this share of the row count.
ENUM_CARDINALITY_RATIO = Fraction(1, 4)

# Whole-string literals. No surrounding whitespace, no inf/nan, no hex,
# no digit separators. Leading zeros are accepted.
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_integer_literal(s: str) -> bool:
    return INTEGER_RE.fullmatch(s) is not None


def is_number_literal(s: str) -> bool:
    """True for any integer or decimal literal, with optional exponent."""
    return NUMBER_RE.fullmatch(s) is not None


def distinct_in_order(values: Sequence[str]) -> List[str]:
    seen = set()
    out = []
    for v in values:
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out


def infer_column(name: str, values: Sequence[str], row_count: int) -> Column:
    """
    Classify one column from its raw values.

    integer if every value is an integer literal, else number if every
    value is a numeric literal, else string. A string column also gets
    its distinct values as an enum when they number strictly fewer than
    ENUM_CARDINALITY_RATIO * row_count. With zero rows the column is a
    plain string.
    """
    if row_count == 0:
        return Column(name=name, declared_type=STRING)

    if all(is_integer_literal(v) for v in values):
        return Column(name=name, declared_type=INTEGER)
    if all(is_number_literal(v) for v in values):
        return Column(name=name, declared_type=NUMBER)

    distinct = distinct_in_order(values)
    if len(distinct) < row_count * ENUM_CARDINALITY_RATIO:
        return Column(name=name, declared_type=STRING, enum_values=distinct)
    return Column(name=name, declared_type=STRING)


def infer_columns(table: Table) -> List[Column]:
    columns = []
    for name in table.columns:
        col = infer_column(name, table.values(name), len(table.rows))
        logger.debug(
            "column %r: %s%s",
            col.name,
            col.declared_type,
            f" enum={col.enum_values}" if col.enum_values is not None else "",
        )
        columns.append(col)
    return columns
