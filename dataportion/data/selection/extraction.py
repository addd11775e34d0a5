"""Attribute-preserving extraction of sub-containers.

Extraction never changes ``attrs``. Labels are subset together with the
data, and label arrays that end up empty are dropped. Two-dimensional
containers always stay two-dimensional, even with a single row or column
left. The ``indices`` field is not carried over: the caller attaches the
IndexSet of the new selection.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from dataportion.core.exceptions import TypeMismatchError
from dataportion.data.containers import Container, Matrix, Table, Vector


def _positions(selector: Any, length: int) -> np.ndarray:
    if selector is None:
        return np.arange(length)
    positions = np.asarray(selector, dtype=int).reshape(-1)
    if positions.size and (positions.min() < 0 or positions.max() >= length):
        raise IndexError(f"positions out of range for axis of length {length}")
    return positions


def _subset_labels(labels: np.ndarray | None, positions: np.ndarray) -> np.ndarray | None:
    if labels is None or positions.size == 0:
        return None
    return labels[positions]


def extract_vector(x: Vector, positions: Any) -> Vector:
    """Elements of ``x`` at ``positions``, with names subset accordingly."""
    if not isinstance(x, Vector):
        raise TypeMismatchError(f"'x' must be a vector, got {type(x).__name__}")
    positions = _positions(positions, len(x))
    return Vector(
        values=x.values[positions],
        names=_subset_labels(x.names, positions),
        attrs=x.attrs,
    )


def extract_matrix(x: Matrix, rows: Any = None, cols: Any = None) -> Matrix:
    """Sub-matrix at ``rows`` x ``cols``; None keeps the whole axis."""
    if not isinstance(x, Matrix):
        raise TypeMismatchError(f"'x' must be a matrix, got {type(x).__name__}")
    n_rows, n_cols = x.shape
    rows = _positions(rows, n_rows)
    cols = _positions(cols, n_cols)
    return Matrix(
        values=x.values[np.ix_(rows, cols)],
        row_names=_subset_labels(x.row_names, rows),
        col_names=_subset_labels(x.col_names, cols),
        attrs=x.attrs,
    )


def extract_table(x: Table, rows: Any = None, cols: Any = None) -> Table:
    """Sub-table at ``rows`` x ``cols`` keeping every column's dtype."""
    if not isinstance(x, Table):
        raise TypeMismatchError(f"'x' must be a data frame, got {type(x).__name__}")
    n_rows, n_cols = x.shape
    rows = _positions(rows, n_rows)
    cols = _positions(cols, n_cols)
    frame = x.frame.iloc[rows, cols]
    # iloc may return a view; detach it so later edits do not leak back
    frame = frame.copy()
    frame.attrs = dict(x.frame.attrs)
    return Table(frame, attrs=x.attrs)


def extract(x: Container, rows: Any = None, cols: Any = None) -> Container:
    """Dispatch to the extractor of the container kind.

    For a :class:`Vector` the positions are passed as ``rows``; giving
    ``cols`` is a :class:`TypeMismatchError`.
    """
    if isinstance(x, Vector):
        if cols is not None:
            raise TypeMismatchError("'x' is one-dimensional and has no columns")
        return extract_vector(x, rows)
    if isinstance(x, Matrix):
        return extract_matrix(x, rows, cols)
    if isinstance(x, Table):
        return extract_table(x, rows, cols)
    raise TypeMismatchError(f"cannot extract from {type(x).__name__}")
