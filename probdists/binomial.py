"""The binomial distribution."""

from __future__ import annotations

import math
import random
from functools import lru_cache

from scipy.special import betainc

from .core import BadParamsError, Distribution, is_zero, ulps_eq

_MAX_FACTORIAL = 170


@lru_cache(maxsize=None)
def _ln_factorial(x: int) -> float:
    if x <= 1:
        return 0.0
    if x > _MAX_FACTORIAL:
        return math.lgamma(x + 1.0)
    return math.log(float(math.factorial(x)))


def _ln_binomial(n: int, k: int) -> float:
    if k > n:
        return -math.inf
    return _ln_factorial(n) - _ln_factorial(k) - _ln_factorial(n - k)


class Binomial(Distribution):
    """Binomial distribution of `n` trials each succeeding with probability `p`."""

    __slots__ = ("_p", "_n")

    def __init__(self, p: float, n: int) -> None:
        p = float(p)
        if math.isnan(p) or p < 0.0 or p > 1.0:
            raise BadParamsError("p must lie in [0, 1]")
        n = int(n)
        if n < 0:
            raise BadParamsError("n must not be negative")
        self._p = p
        self._n = n

    def __repr__(self) -> str:
        return f"Binomial(p={self._p!r}, n={self._n!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Binomial):
            return NotImplemented
        return (self._p, self._n) == (other._p, other._n)

    def __hash__(self) -> int:
        return hash(("Binomial", self._p, self._n))

    def p(self) -> float:
        return self._p

    def n(self) -> int:
        return self._n

    def min(self) -> int:
        return 0

    def max(self) -> int:
        return self._n

    def mean(self) -> float:
        return self._p * self._n

    def variance(self) -> float:
        return self._p * (1.0 - self._p) * self._n

    def entropy(self) -> float:
        if is_zero(self._p) or ulps_eq(self._p, 1.0):
            return 0.0
        total = 0.0
        for x in range(self._n + 1):
            prob = self.pmf(x)
            total -= prob * math.log(prob)
        return total

    def skewness(self) -> float:
        numerator = 1.0 - 2.0 * self._p
        denominator = math.sqrt(self._n * self._p * (1.0 - self._p))
        if denominator == 0.0:
            if numerator == 0.0:
                return math.nan
            return math.copysign(math.inf, numerator)
        return numerator / denominator

    def median(self) -> float:
        return float(math.floor(self._p * self._n))

    def mode(self) -> int:
        if is_zero(self._p):
            return 0
        if ulps_eq(self._p, 1.0):
            return self._n
        return math.floor((self._n + 1.0) * self._p)

    def pmf(self, x: int) -> float:
        if x < 0 or x > self._n:
            return 0.0
        if is_zero(self._p):
            return 1.0 if x == 0 else 0.0
        if ulps_eq(self._p, 1.0):
            return 1.0 if x == self._n else 0.0
        return math.exp(self._ln_mass(x))

    def ln_pmf(self, x: int) -> float:
        if x < 0 or x > self._n:
            return -math.inf
        if is_zero(self._p):
            return 0.0 if x == 0 else -math.inf
        if ulps_eq(self._p, 1.0):
            return 0.0 if x == self._n else -math.inf
        return self._ln_mass(x)

    def _ln_mass(self, x: int) -> float:
        return (
            _ln_binomial(self._n, x)
            + x * math.log(self._p)
            + (self._n - x) * math.log(1.0 - self._p)
        )

    def cdf(self, x: int) -> float:
        if x < 0:
            return 0.0
        if x >= self._n:
            return 1.0
        return float(betainc(float(self._n - x), x + 1.0, 1.0 - self._p))

    def sample(self, rng: random.Random) -> float:
        return float(sum(1 for _ in range(self._n) if rng.random() < self._p))