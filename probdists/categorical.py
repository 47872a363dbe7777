"""The categorical (generalised Bernoulli) distribution over ``0..k``."""

from __future__ import annotations

import math
import operator
import random
from functools import reduce
from itertools import accumulate
from typing import Iterable, Sequence

from .core import BadParamsError, Distribution


def _fold_sum(values: Iterable[float]) -> float:
    """Plain left-to-right floating point sum."""
    return reduce(operator.add, values, 0.0)


def _is_valid_prob_mass(prob_mass: Sequence[float]) -> bool:
    total = 0.0
    for mass in prob_mass:
        if math.isnan(mass) or mass < 0.0:
            return False
        total += mass
    return total != 0.0


def prob_mass_to_cdf(prob_mass: Iterable[float]) -> list[float]:
    """Running sums of the given probability masses, without any validation."""
    return list(accumulate(prob_mass, operator.add))


def binary_index(search: Sequence[float], val: float) -> int:
    """Position of `val` in the sorted sequence `search`.

    Returns the index of an element equal to `val` if there is one, otherwise
    the index of the first element greater than it (``len(search)`` if none is).
    """
    low = 0
    high = len(search) - 1
    while low <= high:
        mid = low + (high - low) // 2
        element = search[mid]
        if element > val:
            high = mid - 1
        elif element < val:
            low = mid + 1
        else:
            return mid
    return min(len(search), max(low, 0))


def sample_unchecked(rng: random.Random, cdf: Sequence[float]) -> float:
    """Draw a category from an unnormalised cdf without checking it."""
    draw = rng.random() * cdf[-1]
    return float(next(i for i, value in enumerate(cdf) if value >= draw))


class Categorical(Distribution):
    """Categorical distribution defined by (unnormalised) probability masses."""

    __slots__ = ("_norm_pmf", "_cdf")

    def __init__(self, prob_mass: Iterable[float]) -> None:
        masses = [float(m) for m in prob_mass]
        if not _is_valid_prob_mass(masses):
            raise BadParamsError(
                "probability masses must be non-negative, not NaN, and not all zero"
            )
        cdf = prob_mass_to_cdf(masses)
        total = cdf[-1]
        self._cdf = tuple(cdf)
        self._norm_pmf = tuple(m / total for m in masses)

    def __repr__(self) -> str:
        return f"Categorical(prob_mass={list(self._norm_pmf)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Categorical):
            return NotImplemented
        return (self._norm_pmf, self._cdf) == (other._norm_pmf, other._cdf)

    def __hash__(self) -> int:
        return hash(("Categorical", self._norm_pmf, self._cdf))

    @property
    def _cdf_max(self) -> float:
        return self._cdf[-1]

    def min(self) -> int:
        return 0

    def max(self) -> int:
        return len(self._cdf) - 1

    def mean(self) -> float:
        return _fold_sum(idx * p for idx, p in enumerate(self._norm_pmf))

    def variance(self) -> float:
        mu = self.mean()
        return _fold_sum((idx - mu) * (idx - mu) * p for idx, p in enumerate(self._norm_pmf))

    def entropy(self) -> float:
        return -_fold_sum(p * math.log(p) for p in self._norm_pmf if p > 0.0)

    def median(self) -> float:
        return float(self.inverse_cdf(0.5))

    def pmf(self, x: int) -> float:
        if 0 <= x < len(self._norm_pmf):
            return self._norm_pmf[x]
        return 0.0

    def ln_pmf(self, x: int) -> float:
        mass = self.pmf(x)
        return math.log(mass) if mass > 0.0 else -math.inf

    def cdf(self, x: int) -> float:
        if x < 0:
            return 0.0
        if x >= len(self._cdf):
            return 1.0
        return self._cdf[x] / self._cdf_max

    def inverse_cdf(self, x: float) -> int:
        """First category whose cumulative probability reaches `x`, for `x` in (0, 1)."""
        if x >= 1.0 or x <= 0.0:
            raise ValueError("x must lie strictly between 0 and 1")
        return binary_index(self._cdf, x * self._cdf_max)

    def sample(self, rng: random.Random) -> float:
        return sample_unchecked(rng, self._cdf)