"""The Bernoulli distribution, a binomial distribution with a single trial."""

from __future__ import annotations

import random

from .binomial import Binomial
from .core import Distribution


class Bernoulli(Distribution):
    """Bernoulli distribution with probability of success `p`."""

    __slots__ = ("_b",)

    def __init__(self, p: float) -> None:
        self._b = Binomial(p, 1)

    def __repr__(self) -> str:
        return f"Bernoulli(p={self._b.p()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bernoulli):
            return NotImplemented
        return self._b == other._b

    def __hash__(self) -> int:
        return hash(("Bernoulli", self._b.p()))

    def p(self) -> float:
        return self._b.p()

    def n(self) -> int:
        """Number of trials, always 1."""
        return 1

    def min(self) -> int:
        return 0

    def max(self) -> int:
        return 1

    def mean(self) -> float:
        return self._b.mean()

    def variance(self) -> float:
        return self._b.variance()

    def entropy(self) -> float:
        return self._b.entropy()

    def skewness(self) -> float:
        return self._b.skewness()

    def median(self) -> float:
        return self._b.median()

    def mode(self) -> int:
        return self._b.mode()

    def pmf(self, x: int) -> float:
        return self._b.pmf(x)

    def ln_pmf(self, x: int) -> float:
        return self._b.ln_pmf(x)

    def cdf(self, x: int) -> float:
        return self._b.cdf(x)

    def sample(self, rng: random.Random) -> float:
        return 1.0 if rng.random() < self.p() else 0.0