from __future__ import annotations
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

OPENAPI_VERSION = "3.0.0"
DOCUMENT_VERSION = "1.0.0"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ParameterSchema(_Frozen):
    # Declared column type; enum only for low-cardinality string columns
    type: str
    enum: Optional[List[str]] = None


class Parameter(_Frozen):
    name: str
    in_: str = Field(default="query", alias="in")
    schema_: ParameterSchema = Field(alias="schema")


class MediaType(_Frozen):
    example: Dict[str, str] = Field(default_factory=dict)


class Response(_Frozen):
    description: str = Field(default="Successful response")
    content: Dict[str, MediaType]


class Operation(_Frozen):
    summary: str
    parameters: List[Parameter]
    responses: Dict[str, Response]


class PathItem(_Frozen):
    get: Operation


class Info(_Frozen):
    title: str
    version: str = Field(default=DOCUMENT_VERSION)


class OpenAPIDocument(_Frozen):
    # Root of the generated API description
    openapi: str = Field(default=OPENAPI_VERSION)
    info: Info
    paths: Dict[str, PathItem]
