# csv2openapi/errors.py

from __future__ import annotations


class Csv2OpenAPIError(Exception):
    """Base for every failure the converter reports to the user."""

    exit_code: int = 1


class InputNotFoundError(Csv2OpenAPIError, FileNotFoundError):
    exit_code = 3


class InputReadError(Csv2OpenAPIError, OSError):
    exit_code = 4


class TableParseError(Csv2OpenAPIError, ValueError):
    exit_code = 5


class OutputWriteError(Csv2OpenAPIError, OSError):
    exit_code = 6
