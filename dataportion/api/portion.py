"""The ``portion`` entry point and its dispatcher over container kinds.

Example:
    >>> import numpy as np
    >>> from dataportion import portion
    >>> kept = portion(np.arange(10), proportion=0.5, how="first")
    >>> kept.values
    array([0, 1, 2, 3, 4])
    >>> kept.indices
    array([0, 1, 2, 3, 4])
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
import pandas as pd

from dataportion.core.config import DEFAULT_CENTERS, DEFAULT_HOW, DEFAULT_N_INIT, PortionConfig, Strategy
from dataportion.core.exceptions import ParameterError, TypeMismatchError, UnsupportedKindError
from dataportion.core.logging import get_logger
from dataportion.data.containers import (
    BOOLEAN,
    TEXTUAL,
    Container,
    Matrix,
    Table,
    Vector,
    as_container,
    is_nested,
)
from dataportion.data.selection import extract_matrix, extract_table, extract_vector, select_indices

logger = get_logger(__name__)


class ShapeDispatcher:
    """Portion any supported container with one validated configuration.

    Each container kind has its own handler. Nested lists and tuples are
    portioned element by element, every element independently and with its
    own ``indices``. Anything else raises :class:`UnsupportedKindError`.
    """

    def __init__(self, config: PortionConfig) -> None:
        self.config = config.validate()
        self._handlers: tuple[tuple[type, Callable[[Any], Container]], ...] = (
            (Vector, self._portion_vector),
            (Matrix, self._portion_matrix),
            (Table, self._portion_table),
        )

    def dispatch(self, x: Any) -> Container | list | tuple:
        if is_nested(x):
            return self._portion_nested(x)
        container = as_container(x)
        for kind, handler in self._handlers:
            if isinstance(container, kind):
                logger.debug(f"Portioning {kind.__name__} of shape {container.shape}")
                return handler(container)
        raise UnsupportedKindError(f"no 'portion' method for class {type(container).__name__!r}")

    def _indices(self, n: int, data: np.ndarray | None = None) -> np.ndarray:
        cfg = self.config
        return select_indices(
            n,
            cfg.proportion,
            how=cfg.how,
            centers=cfg.centers,
            data=data if cfg.how.is_clustering else None,
            random_state=cfg.random_state,
            n_init=cfg.n_init,
        )

    def _portion_nested(self, x: list | tuple) -> list | tuple:
        logger.debug(f"Portioning {len(x)} nested elements")
        return type(x)(self.dispatch(_as_element(item)) for item in x)

    def _portion_vector(self, x: Vector) -> Vector:
        kind = x.kind
        if kind == TEXTUAL and self.config.how.is_clustering:
            raise TypeMismatchError("'x' must be numeric")
        if kind == BOOLEAN:
            numeric = Vector(x.values.astype(float), names=x.names, attrs=x.attrs)
            result = self._portion_vector(numeric)
            return Vector(
                result.values.astype(bool),
                names=result.names,
                attrs=result.attrs,
                indices=result.indices,
            )
        indices = self._indices(len(x), data=x.values)
        result = extract_vector(x, indices)
        result.indices = indices
        return result

    def _axis_indices(self, values: np.ndarray, ignore: tuple[int, ...]) -> np.ndarray:
        """Indices along the active axis of a 2-D array.

        ``values`` is oriented with items in rows. ``ignore`` holds feature
        columns left out of the clustering input.
        """
        n, n_features = values.shape
        if not self.config.how.is_clustering:
            return self._indices(n)
        if ignore:
            if max(ignore) >= n_features:
                raise ParameterError(
                    f"'ignore' positions must be < {n_features} (the number of features), got {list(ignore)}"
                )
            values = np.delete(values, ignore, axis=1)
        if values.shape[1] == 0:
            raise ParameterError("no features left to cluster on, check 'ignore'")
        return self._indices(n, data=values)

    def _portion_matrix(self, x: Matrix) -> Matrix:
        byrow = self.config.byrow
        values = x.values if byrow else x.values.T
        indices = self._axis_indices(values, self.config.ignore)
        result = extract_matrix(x, rows=indices) if byrow else extract_matrix(x, cols=indices)
        result.indices = indices
        return result

    def _portion_table(self, x: Table) -> Table:
        byrow = self.config.byrow
        frame = x.frame
        ignore = self.config.ignore if self.config.how.is_clustering else ()
        if ignore:
            limit = frame.shape[1] if byrow else frame.shape[0]
            if max(ignore) >= limit:
                raise ParameterError(f"'ignore' positions must be < {limit}, got {list(ignore)}")
            keep = np.setdiff1d(np.arange(limit), ignore)
            frame = frame.iloc[:, keep] if byrow else frame.iloc[keep, :]
        values = table_as_matrix(frame)
        indices = self._axis_indices(values if byrow else values.T, ())
        result = extract_table(x, rows=indices) if byrow else extract_table(x, cols=indices)
        result.indices = indices
        return result


def _as_element(item: Any) -> Any:
    """Scalars inside a nested collection are length-1 vectors."""
    if np.isscalar(item):
        return Vector(np.asarray([item]))
    return item


def table_as_matrix(frame: pd.DataFrame) -> np.ndarray:
    """Homogeneous view of a frame for computing indices.

    Float when every column is real numeric or boolean, object otherwise
    (complex columns included).
    """
    if all(_is_real_dtype(dtype) for dtype in frame.dtypes):
        return frame.to_numpy(dtype=float, na_value=np.nan)
    return frame.to_numpy(dtype=object)


def _is_real_dtype(dtype) -> bool:
    return pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_complex_dtype(dtype)


def portion(
    x: Any,
    proportion: float | None = None,
    how: str | Strategy = DEFAULT_HOW,
    centers: int = DEFAULT_CENTERS,
    byrow: bool = True,
    ignore: Any = (),
    random_state: int | np.random.Generator | None = None,
    n_init: int = DEFAULT_N_INIT,
) -> Container | list | tuple:
    """Extract a portion of a vector, matrix, table, or list of those.

    Args:
        x: Object to portion: a :class:`Vector`, :class:`Matrix` or
            :class:`Table`, a numpy array, list of scalars, pandas Series or
            DataFrame, or a list/tuple of any of these.
        proportion: Relative portion size in [0, 1], rounded up.
        how: ``"random"`` (default), ``"first"``, ``"last"``, ``"similar"``
            or ``"dissimilar"``. The last two cluster the data with k-means
            and need numeric ``x``.
        centers: Number of k-means centers, clustering strategies only.
        byrow: For 2-D ``x``, portion rows (True) or columns (False).
        ignore: For 2-D ``x`` and clustering strategies, column positions
            (row positions if ``byrow`` is False) to leave out of the
            clustering input. They stay selectable.
        random_state: Seed or ``numpy.random.Generator`` for the random
            draw and k-means.
        n_init: Number of k-means restarts.

    Returns:
        A container of the same kind as ``x`` (a list/tuple of containers
        for nested ``x``) whose ``indices`` hold the selected positions.

    Raises:
        ParameterError: Invalid arguments.
        TypeMismatchError: Clustering on non-numeric data.
        UnsupportedKindError: ``x`` cannot be portioned.

    Example:
        >>> portion([1.0, 1.0, 2.0, 2.0], proportion=0.5, how="dissimilar").indices
        array([0, 2])
    """
    config = PortionConfig(
        proportion=proportion,
        how=how,
        centers=centers,
        byrow=byrow,
        ignore=ignore,
        random_state=random_state,
        n_init=n_init,
    )
    return ShapeDispatcher(config).dispatch(x)


def complement(x: Any, portioned: Any, byrow: bool = True) -> Container | list | tuple:
    """The part of ``x`` that ``portion`` did not select.

    Args:
        x: The object that was portioned.
        portioned: The result of ``portion(x, ...)``.
        byrow: Must match the ``byrow`` used for portioning 2-D input.

    Returns:
        Container(s) of the same kind as ``x`` holding the remaining
        positions, which are also set as ``indices``.
    """
    if is_nested(x):
        if not isinstance(portioned, (list, tuple)) or len(portioned) != len(x):
            raise TypeMismatchError("'portioned' must be a list with one result per element of 'x'")
        return type(x)(complement(item, part, byrow=byrow) for item, part in zip(x, portioned))

    container = as_container(x)
    if getattr(portioned, "indices", None) is None:
        raise TypeMismatchError("'portioned' carries no indices, pass the result of portion()")
    if isinstance(container, Vector) or byrow:
        n = len(container)
    else:
        n = container.shape[1]
    rest = np.setdiff1d(np.arange(n), portioned.indices)

    if isinstance(container, Vector):
        result = extract_vector(container, rest)
    elif isinstance(container, Matrix):
        result = extract_matrix(container, rows=rest) if byrow else extract_matrix(container, cols=rest)
    else:
        result = extract_table(container, rows=rest) if byrow else extract_table(container, cols=rest)
    result.indices = rest
    return result
