"""
Selection module: turning a strategy into positions and positions into data.

Functions:
    select_indices: Positions to keep along one axis for a given strategy
    target_count: Number of positions kept for a proportion
    random_sample, first_sample, last_sample: Count-based strategies
    cluster_sample: Similar/dissimilar selection via k-means
    build_cluster: K-means cluster assignment with center-count correction
    cluster_indices: Similar/dissimilar positions from a cluster assignment
    extract, extract_vector, extract_matrix, extract_table: Attribute
        preserving sub-container extraction
"""

from .clustering import build_cluster, cluster_indices, correct_centers, relabel_by_appearance
from .extraction import extract, extract_matrix, extract_table, extract_vector
from .sampling import (
    cluster_sample,
    first_sample,
    last_sample,
    random_sample,
    select_indices,
    target_count,
)

__all__ = [
    "select_indices",
    "target_count",
    "random_sample",
    "first_sample",
    "last_sample",
    "cluster_sample",
    "build_cluster",
    "cluster_indices",
    "correct_centers",
    "relabel_by_appearance",
    "extract",
    "extract_vector",
    "extract_matrix",
    "extract_table",
]
