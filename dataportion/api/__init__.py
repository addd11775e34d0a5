"""Public entry points of dataportion."""

from .portion import ShapeDispatcher, complement, portion, table_as_matrix

__all__ = [
    "portion",
    "complement",
    "ShapeDispatcher",
    "table_as_matrix",
]
