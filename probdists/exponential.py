"""The exponential distribution."""

from __future__ import annotations

import math
import random

from .core import BadParamsError, Distribution


class Exp(Distribution):
    """Exponential distribution with rate λ."""

    __slots__ = ("_rate",)

    def __init__(self, rate: float) -> None:
        rate = float(rate)
        if math.isnan(rate) or rate <= 0.0:
            raise BadParamsError("rate must be a positive number")
        self._rate = rate

    def __repr__(self) -> str:
        return f"Exp(rate={self._rate!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Exp):
            return NotImplemented
        return self._rate == other._rate

    def __hash__(self) -> int:
        return hash(("Exp", self._rate))

    def rate(self) -> float:
        return self._rate

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return math.inf

    def mean(self) -> float:
        return 1.0 / self._rate

    def variance(self) -> float:
        return 1.0 / (self._rate * self._rate)

    def entropy(self) -> float:
        return 1.0 - math.log(self._rate)

    def skewness(self) -> float:
        return 2.0

    def median(self) -> float:
        return math.log(2.0) / self._rate

    def mode(self) -> float:
        return 0.0

    def pdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        return self._rate * math.exp(-self._rate * x)

    def ln_pdf(self, x: float) -> float:
        if x < 0.0:
            return -math.inf
        return math.log(self._rate) - self._rate * x

    def cdf(self, x: float) -> float:
        if x < 0.0:
            return 0.0
        return 1.0 - math.exp(-self._rate * x)

    def sample(self, rng: random.Random) -> float:
        return rng.expovariate(1.0) / self._rate