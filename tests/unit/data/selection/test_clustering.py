"""
Unit tests for k-means clustering and cluster-based index selection.

Tests cover:
- Center-count correction for vectors and matrices
- Label canonicalisation
- Similar (cluster by cluster) and dissimilar (round-robin) selection
- Error handling
"""
import numpy as np
import pytest

from dataportion.core.exceptions import ParameterError, TypeMismatchError
from dataportion.data.selection.clustering import (
    build_cluster,
    cluster_indices,
    correct_centers,
    relabel_by_appearance,
)


class TestCorrectCenters:
    """Tests for correct_centers."""

    def test_single_item(self):
        assert correct_centers(np.array([5.0]), 4) == 1
        assert correct_centers(np.array([[1.0, 2.0]]), 4) == 1

    def test_vector_capped_at_distinct_values(self):
        assert correct_centers(np.array([1.0, 1.0, 2.0, 2.0]), 5) == 2
        assert correct_centers(np.array([1.0, 2.0, 3.0]), 2) == 2

    def test_matrix_capped_at_distinct_rows_minus_one(self):
        data = np.array([[0.0, 0.0], [0.0, 0.0], [1.0, 1.0], [2.0, 2.0]])
        assert correct_centers(data, 5) == 2
        assert correct_centers(data, 1) == 1

    def test_matrix_with_identical_rows(self):
        assert correct_centers(np.ones((3, 2)), 2) == 0


class TestRelabel:
    """Tests for relabel_by_appearance."""

    def test_first_item_gets_label_zero(self):
        labels = relabel_by_appearance(np.array([2, 2, 0, 1, 0]))
        np.testing.assert_array_equal(labels, [0, 0, 1, 2, 1])

    def test_already_canonical(self):
        labels = np.array([0, 1, 1, 2])
        np.testing.assert_array_equal(relabel_by_appearance(labels), labels)


class TestBuildCluster:
    """Tests for build_cluster."""

    def test_vector_two_groups(self):
        cluster = build_cluster(np.array([1.0, 1.0, 2.0, 2.0]), 2, random_state=0)
        np.testing.assert_array_equal(cluster, [0, 0, 1, 1])

    def test_matrix_two_groups(self, two_groups):
        cluster = build_cluster(two_groups, 2, random_state=0)
        np.testing.assert_array_equal(cluster, [0, 1, 0, 1, 0, 1])

    def test_single_item(self):
        np.testing.assert_array_equal(build_cluster(np.array([3.0]), 5), [0])

    def test_boolean_accepted(self):
        cluster = build_cluster(np.array([True, False, True]), 2, random_state=0)
        np.testing.assert_array_equal(cluster, [0, 1, 0])

    def test_one_center_assigns_everything_to_zero(self):
        cluster = build_cluster(np.array([1.0, 5.0, 9.0]), 1)
        np.testing.assert_array_equal(cluster, [0, 0, 0])

    def test_reproducible_with_seed(self):
        data = np.random.default_rng(1).normal(size=(30, 3))
        first = build_cluster(data, 3, random_state=42)
        second = build_cluster(data, 3, random_state=42)
        np.testing.assert_array_equal(first, second)

    def test_generator_random_state(self):
        data = np.random.default_rng(1).normal(size=(20, 2))
        first = build_cluster(data, 3, random_state=np.random.default_rng(7))
        second = build_cluster(data, 3, random_state=np.random.default_rng(7))
        np.testing.assert_array_equal(first, second)

    def test_textual_rejected(self):
        with pytest.raises(TypeMismatchError, match="'x' must be numeric"):
            build_cluster(np.array(["a", "b"]), 2)

    def test_non_integer_centers(self):
        with pytest.raises(ParameterError, match="'centers' must be a single integer"):
            build_cluster(np.array([1.0, 2.0]), 1.5)

    def test_empty_vector(self):
        with pytest.raises(ParameterError, match=r"length\(x\) must be > 0"):
            build_cluster(np.array([], dtype=float), 2)

    def test_empty_matrix(self):
        with pytest.raises(ParameterError, match=r"nrow\(x\) must be > 0"):
            build_cluster(np.zeros((0, 2)), 2)

    def test_degenerate_matrix(self):
        with pytest.raises(ParameterError, match="after correction"):
            build_cluster(np.ones((4, 2)), 2)

    @pytest.mark.parametrize(
        "data",
        [np.array([1.0, np.nan, 3.0, 4.0]), np.array([[0.0, 1.0], [np.inf, 2.0], [3.0, 4.0]])],
    )
    def test_non_finite_rejected(self, data):
        with pytest.raises(ParameterError, match="'x' must not contain missing"):
            build_cluster(data, 2)


class TestClusterIndices:
    """Tests for cluster_indices."""

    def test_similar_takes_first_cluster(self):
        np.testing.assert_array_equal(cluster_indices(np.array([0, 0, 1, 1]), 2, similar=True), [0, 1])

    def test_dissimilar_one_per_cluster(self):
        np.testing.assert_array_equal(cluster_indices(np.array([0, 0, 1, 1]), 2, similar=False), [0, 2])

    def test_similar_spills_into_next_cluster(self):
        cluster = np.array([1, 0, 1, 0, 2])
        np.testing.assert_array_equal(cluster_indices(cluster, 3, similar=True), [0, 1, 3])

    def test_similar_follows_label_order_not_size(self):
        cluster = np.array([1, 1, 1, 0])
        np.testing.assert_array_equal(cluster_indices(cluster, 1, similar=True), [3])

    def test_dissimilar_round_robin_skips_exhausted(self):
        # cluster 0 = {0}, cluster 1 = {1, 2, 3}, cluster 2 = {4, 5}
        cluster = np.array([0, 1, 1, 1, 2, 2])
        np.testing.assert_array_equal(cluster_indices(cluster, 4, similar=False), [0, 1, 2, 4])
        np.testing.assert_array_equal(cluster_indices(cluster, 5, similar=False), [0, 1, 2, 4, 5])

    def test_result_is_sorted(self):
        cluster = np.array([1, 1, 0, 0, 2])
        result = cluster_indices(cluster, 3, similar=False)
        np.testing.assert_array_equal(result, np.sort(result))
        np.testing.assert_array_equal(result, [0, 2, 4])

    @pytest.mark.parametrize("similar", [True, False])
    def test_all_and_none(self, similar):
        cluster = np.array([0, 1, 0, 2, 1])
        np.testing.assert_array_equal(cluster_indices(cluster, 5, similar=similar), np.arange(5))
        assert cluster_indices(cluster, 0, similar=similar).size == 0

    @pytest.mark.parametrize("similar", [True, False])
    def test_count_capped(self, similar):
        assert len(cluster_indices(np.array([0, 1]), 10, similar=similar)) == 2

    def test_negative_count(self):
        with pytest.raises(ParameterError, match="'m'"):
            cluster_indices(np.array([0, 1]), -1)
