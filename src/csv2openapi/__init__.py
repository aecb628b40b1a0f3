from . import errors
from . import table
from . import openapi
from . import convert

__all__ = [
    "errors",
    "table",
    "openapi",
    "convert",
]

__version__ = "0.1.0"
