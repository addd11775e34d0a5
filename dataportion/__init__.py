"""
dataportion - Extract reproducible, strategy-driven portions of vectors,
matrices, tables and lists of those.

The selected positions are attached to every result as ``indices``.
"""

__version__ = "0.1.0"
__author__ = "dataportion Project"

from .api import complement, portion
from .core import (
    ParameterError,
    PortionConfig,
    PortionError,
    Strategy,
    TypeMismatchError,
    UnsupportedKindError,
)
from .data import Matrix, Table, Vector

__all__ = [
    # Entry points
    "portion",
    "complement",

    # Containers
    "Vector",
    "Matrix",
    "Table",

    # Configuration
    "PortionConfig",
    "Strategy",

    # Errors
    "PortionError",
    "ParameterError",
    "TypeMismatchError",
    "UnsupportedKindError",
]
