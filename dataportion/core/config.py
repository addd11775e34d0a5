"""Call configuration for :func:`dataportion.portion`."""

from __future__ import annotations

import dataclasses
import math
import numbers
from enum import Enum
from typing import Any

import numpy as np

from .exceptions import ParameterError

DEFAULT_HOW = "random"
DEFAULT_CENTERS = 2
DEFAULT_BYROW = True
DEFAULT_N_INIT = 10


class Strategy(str, Enum):
    """How to pick the portion.

    ``RANDOM``, ``FIRST`` and ``LAST`` work on the raw order of the axis.
    ``SIMILAR`` and ``DISSIMILAR`` cluster the data first and therefore need
    numeric input.
    """

    RANDOM = "random"
    FIRST = "first"
    LAST = "last"
    SIMILAR = "similar"
    DISSIMILAR = "dissimilar"

    @property
    def is_clustering(self) -> bool:
        return self in (Strategy.SIMILAR, Strategy.DISSIMILAR)

    @classmethod
    def parse(cls, value: str | Strategy) -> Strategy:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        valid = ", ".join(f"'{s.value}'" for s in cls)
        raise ParameterError(f"please use a valid method for 'how' (one of {valid}), got {value!r}")


def is_integral(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, numbers.Real) and math.isfinite(value) and float(value).is_integer()


@dataclasses.dataclass
class PortionConfig:
    """Parameters of a single ``portion`` call.

    Attributes:
        proportion: Relative portion size in [0, 1], rounded up to a count.
        how: Selection strategy, see :class:`Strategy`.
        centers: Number of k-means centers for clustering strategies.
        byrow: Portion rows (True) or columns (False) of 2-D input.
        ignore: Feature positions left out of the clustering input of 2-D
            data (columns when ``byrow`` is True, rows otherwise).
        random_state: Seed or ``numpy.random.Generator`` for the random draw
            and the k-means initialisation. None = non-deterministic.
        n_init: Number of k-means restarts.
    """

    proportion: float | None = None
    how: str | Strategy = DEFAULT_HOW
    centers: int = DEFAULT_CENTERS
    byrow: bool = DEFAULT_BYROW
    ignore: tuple[int, ...] = ()
    random_state: int | np.random.Generator | None = None
    n_init: int = DEFAULT_N_INIT

    def validate(self) -> PortionConfig:
        """Check every field and normalise ``how`` and ``ignore``.

        Returns:
            self, to allow ``PortionConfig(...).validate()``.

        Raises:
            ParameterError: On the first violated constraint.
        """
        if self.proportion is None:
            raise ParameterError("please specify 'proportion'")
        p = self.proportion
        if (
            isinstance(p, (bool, np.bool_))
            or not isinstance(p, numbers.Real)
            or math.isnan(p)
            or not 0 <= p <= 1
        ):
            raise ParameterError(f"please set 'proportion' to a numeric between 0 and 1, got {p!r}")
        self.proportion = float(p)

        self.how = Strategy.parse(self.how)

        if self.how.is_clustering:
            if not is_integral(self.centers) or int(self.centers) < 1:
                raise ParameterError(f"'centers' must be a single positive integer, got {self.centers!r}")
            self.centers = int(self.centers)
            if not is_integral(self.n_init) or int(self.n_init) < 1:
                raise ParameterError(f"'n_init' must be a single positive integer, got {self.n_init!r}")
            self.n_init = int(self.n_init)

        if not isinstance(self.byrow, (bool, np.bool_)):
            raise ParameterError(f"'byrow' must be a single boolean, got {self.byrow!r}")
        self.byrow = bool(self.byrow)

        ignore = np.atleast_1d(np.asarray(self.ignore if self.ignore is not None else ()))
        if not self.how.is_clustering:
            # only consulted by clustering strategies
            self.ignore = tuple(ignore.tolist())
            return self
        if ignore.size and (ignore.dtype.kind not in "iu" or ignore.ndim != 1):
            raise ParameterError(f"'ignore' must be a sequence of integer positions, got {self.ignore!r}")
        if ignore.size and ignore.min() < 0:
            raise ParameterError(f"'ignore' positions must be >= 0, got {self.ignore!r}")
        self.ignore = tuple(sorted({int(i) for i in ignore}))

        return self

    def to_dict(self) -> dict:
        """Plain-dict view, with ``how`` as its string value."""
        how = self.how.value if isinstance(self.how, Strategy) else self.how
        random_state = self.random_state if not isinstance(self.random_state, np.random.Generator) else None
        return {
            "proportion": self.proportion,
            "how": how,
            "centers": self.centers,
            "byrow": self.byrow,
            "ignore": list(self.ignore),
            "random_state": random_state,
            "n_init": self.n_init,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PortionConfig:
        """Build a config from a dict, filling defaults for missing keys."""
        unknown = set(data) - {f.name for f in dataclasses.fields(cls)}
        if unknown:
            raise ParameterError(f"unknown configuration keys: {sorted(unknown)}")
        return cls(
            proportion=data.get("proportion"),
            how=data.get("how", DEFAULT_HOW),
            centers=data.get("centers", DEFAULT_CENTERS),
            byrow=data.get("byrow", DEFAULT_BYROW),
            ignore=tuple(data.get("ignore", ())),
            random_state=data.get("random_state"),
            n_init=data.get("n_init", DEFAULT_N_INIT),
        )
