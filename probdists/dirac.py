"""The Dirac delta distribution, all mass at a single point."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from .core import BadParamsError, Distribution


@dataclass(frozen=True)
class Dirac(Distribution):
    """Distribution that always produces the value `v`."""

    v: float

    def __post_init__(self) -> None:
        value = float(self.v)
        if math.isnan(value):
            raise BadParamsError("v must not be NaN")
        object.__setattr__(self, "v", value)

    def min(self) -> float:
        return self.v

    def max(self) -> float:
        return self.v

    def mean(self) -> float:
        return self.v

    def variance(self) -> float:
        return 0.0

    def entropy(self) -> float:
        return 0.0

    def skewness(self) -> float:
        return 0.0

    def median(self) -> float:
        return self.v

    def mode(self) -> float:
        return self.v

    def cdf(self, x: float) -> float:
        """0 below `v`, 1 from `v` onwards."""
        return 0.0 if x < self.v else 1.0

    def sample(self, rng: random.Random) -> float:
        return self.v