from . import types
from . import loader
from . import infer

__all__ = [
    "types",
    "loader",
    "infer",
]
