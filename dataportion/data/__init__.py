"""Container kinds and the selection machinery working on them."""

from .containers import Container, Matrix, Table, Vector, as_container, is_nested

__all__ = [
    "Container",
    "Vector",
    "Matrix",
    "Table",
    "as_container",
    "is_nested",
]
