"""Tests for container kinds and raw input normalisation."""

import numpy as np
import pandas as pd
import pytest

from dataportion.core.exceptions import ParameterError, TypeMismatchError, UnsupportedKindError
from dataportion.data.containers import (
    BOOLEAN,
    NUMERIC,
    TEXTUAL,
    Matrix,
    Table,
    Vector,
    as_container,
    is_nested,
    value_kind,
)


class TestValueKind:
    """Tests for value_kind classification."""

    @pytest.mark.parametrize(
        "values, expected",
        [
            (np.array([1, 2]), NUMERIC),
            (np.array([1.5, 2.0]), NUMERIC),
            (np.array([True, False]), BOOLEAN),
            (np.array(["a", "b"]), TEXTUAL),
            (np.array([1, "a"], dtype=object), TEXTUAL),
            (np.array([1 + 2j]), TEXTUAL),
        ],
    )
    def test_kinds(self, values, expected):
        assert value_kind(values) == expected


class TestVector:
    """Tests for the Vector container."""

    def test_rejects_two_dimensions(self):
        with pytest.raises(TypeMismatchError, match="one-dimensional"):
            Vector(np.zeros((2, 2)))

    def test_names_length_checked(self):
        with pytest.raises(ParameterError, match="'names'"):
            Vector([1, 2, 3], names=["a", "b"])

    def test_attrs_are_copied(self):
        attrs = {"unit": "nm"}
        vector = Vector([1, 2], attrs=attrs)
        attrs["unit"] = "cm"
        assert vector.attrs == {"unit": "nm"}

    def test_to_native_unnamed(self):
        native = Vector([1, 2, 3], indices=[0, 1, 2]).to_native()
        assert isinstance(native, np.ndarray)
        np.testing.assert_array_equal(native, [1, 2, 3])

    def test_to_native_named(self):
        vector = Vector([1, 2], names=["a", "b"], attrs={"unit": "nm"}, indices=[3, 7])
        series = vector.to_native()
        assert isinstance(series, pd.Series)
        assert list(series.index) == ["a", "b"]
        assert series.attrs["unit"] == "nm"
        np.testing.assert_array_equal(series.attrs["indices"], [3, 7])


class TestMatrix:
    """Tests for the Matrix container."""

    def test_rejects_one_dimension(self):
        with pytest.raises(TypeMismatchError, match="must be a matrix"):
            Matrix(np.arange(3))

    def test_labels_checked_per_axis(self):
        with pytest.raises(ParameterError, match="'col_names'"):
            Matrix(np.zeros((2, 3)), row_names=["a", "b"], col_names=["x"])

    def test_len_is_row_count(self):
        assert len(Matrix(np.zeros((4, 2)))) == 4


class TestTable:
    """Tests for the Table container."""

    def test_requires_frame(self):
        with pytest.raises(TypeMismatchError, match="data frame"):
            Table(np.zeros((2, 2)))

    def test_to_native_records_indices(self, mixed_frame):
        frame = Table(mixed_frame, attrs={"source": "lab"}, indices=[0]).to_native()
        assert frame.attrs["source"] == "lab"
        np.testing.assert_array_equal(frame.attrs["indices"], [0])
        assert mixed_frame.attrs == {}


class TestAsContainer:
    """Tests for as_container and is_nested."""

    def test_containers_pass_through(self):
        vector = Vector([1])
        assert as_container(vector) is vector

    def test_flat_list_is_vector(self):
        container = as_container([1, 2, 3])
        assert isinstance(container, Vector)
        assert container.kind == NUMERIC

    def test_ndarray_kinds(self):
        assert isinstance(as_container(np.arange(3)), Vector)
        assert isinstance(as_container(np.zeros((2, 2))), Matrix)

    def test_series_with_labels(self):
        series = pd.Series([1, 2], index=["a", "b"])
        series.attrs["unit"] = "nm"
        container = as_container(series)
        assert isinstance(container, Vector)
        assert list(container.names) == ["a", "b"]
        assert container.attrs == {"unit": "nm"}

    def test_series_with_default_index_has_no_names(self):
        assert as_container(pd.Series([1, 2])).names is None

    def test_frame_is_table(self, mixed_frame):
        assert isinstance(as_container(mixed_frame), Table)

    @pytest.mark.parametrize("x", [np.zeros((2, 2, 2)), {"a": 1}, 3.0, "text"])
    def test_unsupported(self, x):
        with pytest.raises(UnsupportedKindError, match="no 'portion' method"):
            as_container(x)

    def test_is_nested(self):
        assert is_nested([np.arange(3), [1, 2]])
        assert is_nested([])
        assert not is_nested([1, 2, 3])
        assert not is_nested(np.arange(3))
