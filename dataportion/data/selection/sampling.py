"""Array-level selection strategies.

Every function returns a sorted, duplicate-free 1D int array of positions
along one axis. :func:`select_indices` is the single entry point used by
the dispatcher; the individual strategies are exposed for direct use.
"""

from __future__ import annotations

import math

import numpy as np

from dataportion.core.config import DEFAULT_CENTERS, DEFAULT_N_INIT, Strategy
from dataportion.core.exceptions import ParameterError, TypeMismatchError
from dataportion.core.logging import get_logger
from dataportion.data.containers import BOOLEAN, NUMERIC, value_kind

from .clustering import build_cluster, cluster_indices

logger = get_logger(__name__)


def target_count(n: int, proportion: float) -> int:
    """Number of positions to keep: ``ceil(n * proportion)``, within [0, n]."""
    if n < 0:
        raise ParameterError(f"axis length must be >= 0, got {n}")
    if not 0 <= proportion <= 1:
        raise ParameterError(f"please set 'proportion' to a numeric between 0 and 1, got {proportion!r}")
    return min(n, max(0, math.ceil(n * proportion)))


def random_sample(
    n_total: int,
    n_samples: int,
    random_state: int | np.random.Generator | None = None,
) -> np.ndarray:
    """Draw ``n_samples`` distinct positions uniformly without replacement.

    Args:
        n_total: Axis length.
        n_samples: Number of positions to draw (at most ``n_total``).
        random_state: Seed or generator. None = non-deterministic.

    Returns:
        Sorted 1D int array of drawn positions.
    """
    rng = np.random.default_rng(random_state)
    return np.sort(rng.choice(n_total, size=n_samples, replace=False)).astype(int)


def first_sample(n_total: int, n_samples: int) -> np.ndarray:
    """The first ``n_samples`` positions."""
    return np.arange(n_samples)


def last_sample(n_total: int, n_samples: int) -> np.ndarray:
    """The last ``n_samples`` positions, left to right."""
    return np.arange(n_total - n_samples, n_total)


def cluster_sample(
    data: np.ndarray,
    n_samples: int,
    similar: bool,
    centers: int = DEFAULT_CENTERS,
    random_state: int | np.random.Generator | None = None,
    n_init: int = DEFAULT_N_INIT,
) -> np.ndarray:
    """Cluster ``data`` and pick similar or dissimilar positions.

    Args:
        data: Vector, or matrix with items in rows.
        n_samples: Number of positions to pick.
        similar: Pick from as few clusters as possible (True) or spread
            over all clusters (False).
        centers: Requested number of k-means centers.
        random_state: Seed or generator for k-means.
        n_init: Number of k-means restarts.

    Returns:
        Sorted 1D int array of selected positions.
    """
    cluster = build_cluster(data, centers, random_state=random_state, n_init=n_init)
    return cluster_indices(cluster, n_samples, similar=similar)


def select_indices(
    n: int,
    proportion: float,
    how: str | Strategy = Strategy.RANDOM,
    centers: int = DEFAULT_CENTERS,
    data: np.ndarray | None = None,
    random_state: int | np.random.Generator | None = None,
    n_init: int = DEFAULT_N_INIT,
) -> np.ndarray:
    """Positions to keep along an axis of length ``n``.

    Args:
        n: Axis length.
        proportion: Share of the axis to keep, rounded up.
        how: Selection strategy.
        centers: k-means centers, clustering strategies only.
        data: Values to cluster (length ``n`` vector or ``n`` x k matrix),
            clustering strategies only.
        random_state: Seed or generator for random draws and k-means.
        n_init: Number of k-means restarts.

    Returns:
        Sorted 1D int array of ``ceil(n * proportion)`` positions.

    Raises:
        ParameterError: Unknown strategy, or clustering without ``data``.
        TypeMismatchError: Clustering on non-numeric ``data``.
    """
    strategy = Strategy.parse(how)
    m = target_count(n, proportion)
    logger.debug(f"Selecting {m} of {n} positions ({strategy.value})")

    if strategy is Strategy.RANDOM:
        return random_sample(n, m, random_state=random_state)
    if strategy is Strategy.FIRST:
        return first_sample(n, m)
    if strategy is Strategy.LAST:
        return last_sample(n, m)

    if data is None:
        raise ParameterError(f"how='{strategy.value}' needs the data to cluster")
    data = np.asarray(data)
    if value_kind(data) not in (NUMERIC, BOOLEAN):
        raise TypeMismatchError("'x' must be numeric")
    if data.shape[0] != n:
        raise ParameterError(f"data to cluster has {data.shape[0]} items, expected {n}")
    if m == 0:
        return np.arange(0)
    return cluster_sample(
        data,
        m,
        similar=strategy is Strategy.SIMILAR,
        centers=centers,
        random_state=random_state,
        n_init=n_init,
    )
