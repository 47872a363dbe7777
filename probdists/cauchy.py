"""The Cauchy (Lorentz) distribution."""

from __future__ import annotations

import math
import random

from .core import BadParamsError, Distribution


class Cauchy(Distribution):
    """Cauchy distribution with location x₀ and scale γ.

    Its mean, variance and skewness are undefined and report None.
    """

    __slots__ = ("_location", "_scale")

    def __init__(self, location: float, scale: float) -> None:
        location = float(location)
        scale = float(scale)
        if math.isnan(location) or math.isnan(scale) or scale <= 0.0:
            raise BadParamsError("location must be a number and scale must be positive")
        self._location = location
        self._scale = scale

    def __repr__(self) -> str:
        return f"Cauchy(location={self._location!r}, scale={self._scale!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cauchy):
            return NotImplemented
        return (self._location, self._scale) == (other._location, other._scale)

    def __hash__(self) -> int:
        return hash(("Cauchy", self._location, self._scale))

    def location(self) -> float:
        return self._location

    def scale(self) -> float:
        return self._scale

    def min(self) -> float:
        return -math.inf

    def max(self) -> float:
        return math.inf

    def entropy(self) -> float:
        return math.log(4.0 * math.pi * self._scale)

    def median(self) -> float:
        return self._location

    def mode(self) -> float:
        return self._location

    def _denominator(self, x: float) -> float:
        z = (x - self._location) / self._scale
        return math.pi * self._scale * (1.0 + z * z)

    def pdf(self, x: float) -> float:
        return 1.0 / self._denominator(x)

    def ln_pdf(self, x: float) -> float:
        return -math.log(self._denominator(x))

    def cdf(self, x: float) -> float:
        return (1.0 / math.pi) * math.atan((x - self._location) / self._scale) + 0.5

    def sample(self, rng: random.Random) -> float:
        return self._location + self._scale * math.tan(math.pi * (rng.random() - 0.5))