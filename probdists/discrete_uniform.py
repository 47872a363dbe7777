"""The discrete uniform distribution over an inclusive integer range."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from .core import BadParamsError, Distribution


@dataclass(frozen=True)
class DiscreteUniform(Distribution):
    """Uniform distribution over the integers ``low..=high``."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.high < self.low:
            raise BadParamsError("high must not be less than low")

    def min(self) -> int:
        return self.low

    def max(self) -> int:
        return self.high

    def mean(self) -> float:
        return (self.low + self.high) / 2.0

    def variance(self) -> float:
        diff = float(self.high - self.low)
        return ((diff + 1.0) * (diff + 1.0) - 1.0) / 12.0

    def entropy(self) -> float:
        return math.log(float(self.high - self.low) + 1.0)

    def skewness(self) -> float:
        return 0.0

    def median(self) -> float:
        return (self.low + self.high) / 2.0

    def mode(self) -> int:
        """The middle element, since every element is equally likely."""
        return math.floor((self.low + self.high) / 2.0)

    def pmf(self, x: int) -> float:
        if self.low <= x <= self.high:
            return 1.0 / float(self.high - self.low + 1)
        return 0.0

    def ln_pmf(self, x: int) -> float:
        if self.low <= x <= self.high:
            return -math.log(float(self.high - self.low + 1))
        return -math.inf

    def cdf(self, x: int) -> float:
        if x < self.low:
            return 0.0
        if x >= self.high:
            return 1.0
        lower = float(self.low)
        upper = float(self.high)
        return min((float(x) - lower + 1.0) / (upper - lower + 1.0), 1.0)

    def sample(self, rng: random.Random) -> float:
        return float(rng.randint(self.low, self.high))