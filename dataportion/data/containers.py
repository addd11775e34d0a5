"""Container kinds understood by :func:`dataportion.portion`.

The set of kinds is closed:

- :class:`Vector`: one-dimensional numeric, boolean or textual values.
- :class:`Matrix`: homogeneous two-dimensional values.
- :class:`Table`: heterogeneous two-dimensional data backed by a
  :class:`pandas.DataFrame`.
- nested: a ``list`` or ``tuple`` of the above.

Each container keeps its metadata as explicit fields. Labels are
shape-dependent and are recomputed by extraction, ``attrs`` holds custom
tags that survive extraction untouched, and ``indices`` is the IndexSet
attached by ``portion``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

import numpy as np
import pandas as pd

from dataportion.core.exceptions import ParameterError, TypeMismatchError, UnsupportedKindError

NUMERIC = "numeric"
BOOLEAN = "boolean"
TEXTUAL = "textual"


def value_kind(values: np.ndarray) -> str:
    """Classify the scalar type of an array as numeric, boolean or textual."""
    kind = values.dtype.kind
    if kind == "b":
        return BOOLEAN
    if kind in "iuf":
        return NUMERIC
    return TEXTUAL


def _labels(labels: Any, expected: int, what: str) -> np.ndarray | None:
    if labels is None:
        return None
    labels = np.asarray(labels)
    if labels.ndim != 1 or len(labels) != expected:
        raise ParameterError(f"'{what}' must have length {expected}, got shape {labels.shape}")
    if len(labels) == 0:
        return None
    return labels


def _as_indices(indices: Any) -> np.ndarray | None:
    if indices is None:
        return None
    return np.asarray(indices, dtype=int)


@dataclass(eq=False)
class Vector:
    """One-dimensional sequence of scalars with optional element names."""

    values: np.ndarray
    names: np.ndarray | None = None
    attrs: dict[str, Any] = field(default_factory=dict)
    indices: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.values = np.asarray(self.values)
        if self.values.ndim != 1:
            raise TypeMismatchError(f"'x' must be one-dimensional, got {self.values.ndim} dimensions")
        self.names = _labels(self.names, len(self.values), "names")
        self.attrs = dict(self.attrs)
        self.indices = _as_indices(self.indices)

    @property
    def kind(self) -> str:
        return value_kind(self.values)

    @property
    def shape(self) -> tuple[int]:
        return self.values.shape

    def __len__(self) -> int:
        return len(self.values)

    def to_native(self) -> np.ndarray | pd.Series:
        """Numpy array, or a ``pandas.Series`` indexed by ``names`` when named.

        The series carries ``attrs`` and, once portioned, ``indices`` in its
        ``attrs``.
        """
        if self.names is None:
            return self.values.copy()
        series = pd.Series(self.values, index=self.names)
        series.attrs = _native_attrs(self.attrs, self.indices)
        return series


@dataclass(eq=False)
class Matrix:
    """Homogeneous two-dimensional array with optional row and column names."""

    values: np.ndarray
    row_names: np.ndarray | None = None
    col_names: np.ndarray | None = None
    attrs: dict[str, Any] = field(default_factory=dict)
    indices: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.values = np.asarray(self.values)
        if self.values.ndim != 2:
            raise TypeMismatchError(f"'x' must be a matrix, got {self.values.ndim} dimensions")
        n_rows, n_cols = self.values.shape
        self.row_names = _labels(self.row_names, n_rows, "row_names")
        self.col_names = _labels(self.col_names, n_cols, "col_names")
        self.attrs = dict(self.attrs)
        self.indices = _as_indices(self.indices)

    @property
    def kind(self) -> str:
        return value_kind(self.values)

    @property
    def shape(self) -> tuple[int, int]:
        return self.values.shape

    def __len__(self) -> int:
        return self.values.shape[0]

    def to_native(self) -> np.ndarray:
        return self.values.copy()


@dataclass(eq=False)
class Table:
    """Heterogeneous table; row and column labels live on the frame."""

    frame: pd.DataFrame
    attrs: dict[str, Any] = field(default_factory=dict)
    indices: np.ndarray | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.frame, pd.DataFrame):
            raise TypeMismatchError(f"'x' must be a data frame, got {type(self.frame).__name__}")
        self.attrs = dict(self.attrs)
        self.indices = _as_indices(self.indices)

    @property
    def shape(self) -> tuple[int, int]:
        return self.frame.shape

    def __len__(self) -> int:
        return len(self.frame)

    def to_native(self) -> pd.DataFrame:
        """Copy of the frame whose ``attrs`` hold ``attrs`` and ``indices``."""
        frame = self.frame.copy()
        frame.attrs = _native_attrs(self.attrs, self.indices)
        return frame


Container = Union[Vector, Matrix, Table]


def _native_attrs(attrs: dict[str, Any], indices: np.ndarray | None) -> dict[str, Any]:
    native = dict(attrs)
    if indices is not None:
        native["indices"] = indices.copy()
    return native


def is_nested(x: Any) -> bool:
    """A list or tuple that is not a flat sequence of scalars."""
    if not isinstance(x, (list, tuple)):
        return False
    return len(x) == 0 or not all(_is_scalar(item) for item in x)


def _is_scalar(item: Any) -> bool:
    return item is None or np.isscalar(item)


def as_container(x: Any) -> Container:
    """Wrap a raw object into its container kind.

    Containers are returned as they are. Nested input is not handled here,
    see :func:`is_nested`.

    Raises:
        UnsupportedKindError: When ``x`` has no container kind.
    """
    if isinstance(x, (Vector, Matrix, Table)):
        return x
    if isinstance(x, pd.DataFrame):
        return Table(x, attrs=x.attrs)
    if isinstance(x, pd.Series):
        names = None if _is_default_index(x.index) else x.index.to_numpy()
        return Vector(x.to_numpy(), names=names, attrs=x.attrs)
    if isinstance(x, np.ndarray):
        if x.ndim == 1:
            return Vector(x)
        if x.ndim == 2:
            return Matrix(x)
        raise UnsupportedKindError(f"no 'portion' method for {x.ndim}-dimensional arrays")
    if isinstance(x, (list, tuple)) and not is_nested(x):
        return Vector(np.asarray(x))
    raise UnsupportedKindError(f"no 'portion' method for class {type(x).__name__!r}")


def _is_default_index(index: pd.Index) -> bool:
    return isinstance(index, pd.RangeIndex) and index.start == 0 and index.step == 1
