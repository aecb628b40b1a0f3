from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from csv2openapi.openapi.build import build_document, item_name_for
from csv2openapi.openapi.emit import FORMAT_EXTENSIONS, write_document
from csv2openapi.openapi.models import OpenAPIDocument
from csv2openapi.table.infer import infer_columns
from csv2openapi.table.loader import read_table
from csv2openapi.table.types import Column, SkippedRow

logger = logging.getLogger("csv2openapi")

# Quote character and line terminators of the csv dialect
RESERVED_DELIMITERS = frozenset({'"', "\n", "\r"})


@dataclass(frozen=True)
class ConvertOptions:
    fmt: str = "yaml"
    outdir: Path = field(default_factory=lambda: Path("."))
    delimiter: str = ","
    strict: bool = False
    dry_run: bool = False

    def __post_init__(self):
        if self.fmt not in FORMAT_EXTENSIONS:
            raise ValueError(
                f"Unsupported output format {self.fmt!r}; choose one of {sorted(FORMAT_EXTENSIONS)}"
            )
        if len(self.delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {self.delimiter!r}")
        if self.delimiter in RESERVED_DELIMITERS:
            raise ValueError(f"Delimiter {self.delimiter!r} clashes with CSV quoting or line endings")


@dataclass(frozen=True)
class ConvertResult:
    item_name: str
    document: OpenAPIDocument
    columns: List[Column]
    skipped: List[SkippedRow]
    output_path: Optional[Path] = None      # None on dry run
    text: Optional[str] = None              # rendered document on dry run


def convert_file(csv_path: Union[str, Path], options: Optional[ConvertOptions] = None) -> ConvertResult:
    """Read a tabular file, infer its columns and write the API description."""
    options = options or ConvertOptions()

    table = read_table(csv_path, delimiter=options.delimiter, strict=options.strict)
    columns = infer_columns(table)

    item_name = item_name_for(csv_path)
    doc = build_document(item_name, columns, table.rows)

    out = write_document(
        doc,
        item_name,
        fmt=options.fmt,
        outdir=options.outdir,
        dry_run=options.dry_run,
    )

    if table.skipped:
        logger.warning("%s: skipped %d malformed row(s)", table.source, len(table.skipped))

    return ConvertResult(
        item_name=item_name,
        document=doc,
        columns=columns,
        skipped=list(table.skipped),
        output_path=None if options.dry_run else out,
        text=out if options.dry_run else None,
    )
