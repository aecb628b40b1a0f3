from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

INTEGER = "integer"
NUMBER = "number"
STRING = "string"


@dataclass(frozen=True)
class Column:
    """
    A named field across all rows, with its inferred declared type.

    Invariants:
    - declared_type is one of integer|number|string
    - enum_values is only set on string columns; it holds each distinct
      raw value once, in first-seen order
    """

    name: str
    declared_type: str = STRING
    enum_values: Optional[List[str]] = None


@dataclass(frozen=True)
class SkippedRow:
    line: int                   # physical line the record started on
    expected: int
    found: int


@dataclass
class Table:
    source: str
    columns: List[str]          # header order, unique
    rows: List[Dict[str, str]] = field(default_factory=list)
    skipped: List[SkippedRow] = field(default_factory=list)

    def values(self, column: str) -> List[str]:
        return [row.get(column, "") for row in self.rows]
