"""The empirical distribution built from a multiset of observed values."""

from __future__ import annotations

import bisect
import math
import random
from typing import Iterable

from .core import Distribution

_BISECTION_STEPS = 16


def _divide(numerator: float, denominator: float) -> float:
    """Division that follows IEEE rules for a zero denominator."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


class Empirical(Distribution):
    """Empirical distribution with a streaming mean and variance.

    NaN data points are ignored.
    """

    __slots__ = ("_sum", "_mean_and_var", "_counts", "_keys")

    def __init__(self, samples: Iterable[float] = ()) -> None:
        self._sum = 0.0
        self._mean_and_var: tuple[float, float] | None = None
        self._counts: dict[float, int] = {}
        self._keys: list[float] = []
        for point in samples:
            self.add(point)

    def __repr__(self) -> str:
        return f"Empirical(samples={len(self._keys)} distinct values)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Empirical):
            return NotImplemented
        return (
            self._sum == other._sum
            and self._mean_and_var == other._mean_and_var
            and self._counts == other._counts
        )

    __hash__ = None  # mutable

    def add(self, data_point: float) -> None:
        """Record one observation."""
        data_point = float(data_point)
        if math.isnan(data_point):
            return
        self._sum += 1.0
        if self._mean_and_var is None:
            self._mean_and_var = (data_point, 0.0)
        else:
            mean, var = self._mean_and_var
            total = self._sum
            var = var + (total - 1.0) * (data_point - mean) * (data_point - mean) / total
            mean = mean + (data_point - mean) / total
            self._mean_and_var = (mean, var)
        if data_point in self._counts:
            self._counts[data_point] += 1
        else:
            self._counts[data_point] = 1
            bisect.insort(self._keys, data_point)

    def remove(self, data_point: float) -> None:
        """Forget one observation equal to `data_point`; absent values are ignored."""
        data_point = float(data_point)
        if math.isnan(data_point) or data_point not in self._counts:
            return
        if self._mean_and_var is None:
            return
        count = self._counts[data_point]
        if count == 1 and len(self._counts) == 1:
            self._counts.clear()
            self._keys.clear()
            self._mean_and_var = None
            self._sum = 0.0
            return
        mean, var = self._mean_and_var
        mean = (self._sum * mean - data_point) / (self._sum - 1.0)
        var = var - (self._sum - 1.0) * (data_point - mean) * (data_point - mean) / self._sum
        self._sum -= 1.0
        if count == 1:
            del self._counts[data_point]
            self._keys.pop(bisect.bisect_left(self._keys, data_point))
        else:
            self._counts[data_point] = count - 1
        self._mean_and_var = (mean, var)

    def min(self) -> float:
        """Smallest observation; raises ValueError when there are none."""
        if not self._keys:
            raise ValueError("empirical distribution has no samples")
        return self._keys[0]

    def max(self) -> float:
        """Largest observation; raises ValueError when there are none."""
        if not self._keys:
            raise ValueError("empirical distribution has no samples")
        return self._keys[-1]

    def mean(self) -> float | None:
        return None if self._mean_and_var is None else self._mean_and_var[0]

    def variance(self) -> float | None:
        """Sample variance, or None when there are no observations."""
        if self._mean_and_var is None:
            return None
        return _divide(self._mean_and_var[1], self._sum - 1.0)

    def cdf(self, x: float) -> float:
        below = 0
        for key in self._keys:
            if key > x:
                break
            below += self._counts[key]
        return _divide(float(below), self._sum)

    def _inverse_cdf(self, p: float) -> float:
        """Approximate ``inf { x | F(x) >= p }`` by bisection."""
        if p == 0.0:
            return self.min()
        if p == 1.0:
            return self.max()
        high = 2.0
        low = -high
        while self.cdf(low) > p:
            low = low + low
        while self.cdf(high) < p:
            high = high + high
        for _ in range(_BISECTION_STEPS):
            mid = (high + low) / 2.0
            if self.cdf(mid) >= p:
                high = mid
            else:
                low = mid
        return (high + low) / 2.0

    def sample(self, rng: random.Random) -> float:
        return self._inverse_cdf(rng.random())