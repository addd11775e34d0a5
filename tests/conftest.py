"""
Pytest configuration for dataportion tests.

Shared fixtures: small containers of every kind and a logging reset so
tests configuring logging do not leak handlers into each other.
"""

import numpy as np
import pandas as pd
import pytest

from dataportion.core.logging import reset_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_logging()


@pytest.fixture
def two_groups():
    """Six rows forming two well separated groups, interleaved."""
    return np.array([
        [0.0, 0.0],
        [10.0, 10.0],
        [0.0, 1.0],
        [10.0, 11.0],
        [0.5, 0.5],
        [10.5, 10.5],
    ])


@pytest.fixture
def mixed_frame():
    """Data frame with integer, float, string and boolean columns."""
    return pd.DataFrame(
        {
            "a": [1, 2, 3, 4, 5, 6],
            "b": [0.1, 0.2, 5.1, 5.2, 0.15, 5.15],
            "c": ["u", "v", "w", "x", "y", "z"],
            "d": [True, False, True, False, True, False],
        },
        index=["r1", "r2", "r3", "r4", "r5", "r6"],
    )


@pytest.fixture
def letters_matrix():
    """3 x 4 textual matrix with row and column names."""
    return np.array(list("ABCDEFGHIJKL")).reshape(3, 4)
