"""K-means based selection of similar or dissimilar items.

:func:`build_cluster` assigns every item (vector element or matrix row) to a
cluster and :func:`cluster_indices` turns that assignment into an IndexSet:

- similar: fill the quota from cluster 0, then cluster 1, and so on, so
  the selection comes from as few clusters as possible;
- dissimilar: take one item per cluster in turn (round-robin in label
  order), so the selection spreads over all clusters.

Example:
    >>> cluster = np.array([0, 0, 1, 1])
    >>> cluster_indices(cluster, 2, similar=True)
    array([0, 1])
    >>> cluster_indices(cluster, 2, similar=False)
    array([0, 2])
"""

from __future__ import annotations

from collections import deque

import numpy as np
from sklearn.cluster import KMeans

from dataportion.core.config import DEFAULT_N_INIT, is_integral
from dataportion.core.exceptions import ParameterError, TypeMismatchError
from dataportion.core.logging import get_logger
from dataportion.data.containers import BOOLEAN, NUMERIC, value_kind

logger = get_logger(__name__)


def correct_centers(data: np.ndarray, centers: int) -> int:
    """Cap the number of centers to what the data supports.

    A single item always gets one center. Otherwise a matrix is capped at
    its number of distinct rows minus one, a vector at its number of
    distinct values.

    Args:
        data: 1-D values or 2-D matrix with items in rows.
        centers: Requested number of centers.

    Returns:
        The corrected number of centers (may be < 1 for degenerate
        matrices; the caller decides what to do with it).
    """
    if data.shape[0] == 1:
        return 1
    if data.ndim == 2:
        return min(centers, np.unique(data, axis=0).shape[0] - 1)
    return min(centers, np.unique(data).shape[0])


def relabel_by_appearance(labels: np.ndarray) -> np.ndarray:
    """Renumber cluster labels 0..C-1 in order of first appearance."""
    _, first = np.unique(labels, return_index=True)
    order = labels[np.sort(first)]
    mapping = {int(label): new for new, label in enumerate(order)}
    return np.array([mapping[int(label)] for label in labels], dtype=int)


def build_cluster(
    data: np.ndarray,
    centers: int,
    random_state: int | np.random.Generator | None = None,
    n_init: int = DEFAULT_N_INIT,
) -> np.ndarray:
    """Cluster items with k-means.

    Args:
        data: Numeric (or boolean) vector, or matrix with items in rows and
            features in columns.
        centers: Requested number of clusters, see :func:`correct_centers`.
        random_state: Seed or generator for the k-means initialisation.
        n_init: Number of k-means restarts.

    Returns:
        1D int array of cluster labels ``0..C-1`` numbered by first
        appearance.

    Raises:
        TypeMismatchError: If ``data`` is not numeric.
        ParameterError: If ``centers`` is not a single integer, ``data`` is
            empty or holds NaN/inf, or fewer than one center remains after
            correction.
    """
    data = np.asarray(data)
    if value_kind(data) not in (NUMERIC, BOOLEAN):
        raise TypeMismatchError("'x' must be numeric")
    if not is_integral(centers):
        raise ParameterError(f"'centers' must be a single integer, got {centers!r}")
    if data.ndim not in (1, 2):
        raise TypeMismatchError(f"'x' must be a vector or a matrix, got {data.ndim} dimensions")
    if data.shape[0] == 0:
        what = "nrow(x)" if data.ndim == 2 else "length(x)"
        raise ParameterError(f"{what} must be > 0")
    data = data.astype(float)
    if not np.isfinite(data).all():
        raise ParameterError("'x' must not contain missing or infinite values for clustering")

    n_centers = correct_centers(data, int(centers))
    if n_centers < 1:
        raise ParameterError(
            f"'centers' must be >= 1 after correction for {data.shape[0]} items "
            f"(requested {centers}, data has too few distinct rows)"
        )
    if n_centers != centers:
        logger.debug(f"Reduced centers from {centers} to {n_centers}")

    if n_centers == 1:
        return np.zeros(data.shape[0], dtype=int)

    features = data.reshape(-1, 1) if data.ndim == 1 else data
    if isinstance(random_state, np.random.Generator):
        random_state = int(random_state.integers(np.iinfo(np.int32).max))
    kmeans = KMeans(n_clusters=n_centers, n_init=n_init, random_state=random_state)
    labels = kmeans.fit_predict(features)
    return relabel_by_appearance(labels)


def cluster_indices(cluster: np.ndarray, m: int, similar: bool = True) -> np.ndarray:
    """Pick ``m`` items from a cluster assignment.

    Args:
        cluster: Cluster label per item, labels ``0..C-1``.
        m: Number of items to pick (capped at the number of items).
        similar: Fill cluster by cluster (True) or round-robin (False).

    Returns:
        Sorted 1D int array of selected positions.
    """
    cluster = np.asarray(cluster, dtype=int)
    if m < 0:
        raise ParameterError(f"'m' must be >= 0, got {m}")
    m = min(int(m), len(cluster))
    labels = np.unique(cluster)
    members = [np.flatnonzero(cluster == label) for label in labels]

    selected: list[int] = []
    if similar:
        for member in members:
            if len(selected) >= m:
                break
            selected.extend(member[: m - len(selected)].tolist())
    else:
        queues = [deque(member.tolist()) for member in members]
        i = 0
        while len(selected) < m:
            queue = queues[i % len(queues)]
            i += 1
            if not queue:
                continue
            selected.append(queue.popleft())

    return np.sort(np.asarray(selected, dtype=int))
