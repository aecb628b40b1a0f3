from . import models
from . import build
from . import emit

__all__ = [
    "models",
    "build",
    "emit",
]
