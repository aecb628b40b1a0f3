# csv2openapi/openapi/build.py

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Sequence, Union

from csv2openapi.table.types import STRING, Column
from csv2openapi.openapi.models import (
    Info,
    MediaType,
    OpenAPIDocument,
    Operation,
    Parameter,
    ParameterSchema,
    PathItem,
    Response,
)

OK_STATUS = "200"
JSON_MEDIA_TYPE = "application/json"


def item_name_for(csv_path: Union[str, Path]) -> str:
    """Input file name without directory prefix or final extension."""
    return Path(csv_path).stem


def pluralize(name: str) -> str:
    return f"{name}s"


def column_to_parameter(column: Column) -> Parameter:
    schema = ParameterSchema(type=column.declared_type)
    if column.declared_type == STRING and column.enum_values is not None:
        schema = ParameterSchema(type=column.declared_type, enum=list(column.enum_values))
    return Parameter(name=column.name, in_="query", schema_=schema)


def build_document(
    item_name: str,
    columns: Sequence[Column],
    rows: Sequence[Dict[str, str]],
) -> OpenAPIDocument:
    """
    Synthesize the API description for one tabular resource.

    One path (``/<item_name>``) with a single ``get`` operation, one query
    parameter per column in header order, and a 200 response whose example
    is the first row verbatim, or an empty object when there are no rows.
    """
    example = dict(rows[0]) if rows else {}

    operation = Operation(
        summary=f"Get all {pluralize(item_name)}",
        parameters=[column_to_parameter(c) for c in columns],
        responses={
            OK_STATUS: Response(
                content={JSON_MEDIA_TYPE: MediaType(example=example)},
            ),
        },
    )

    return OpenAPIDocument(
        info=Info(title=f"Access {item_name}"),
        paths={f"/{item_name}": PathItem(get=operation)},
    )


def document_to_dict(doc: OpenAPIDocument) -> Dict[str, Any]:
    """Plain mapping with OpenAPI key names, absent enums omitted."""
    return doc.model_dump(mode="json", by_alias=True, exclude_none=True)
