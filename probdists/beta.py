"""The beta distribution on the unit interval."""

from __future__ import annotations

import math
import random

from scipy.special import betainc, betaln, digamma

from .core import BadParamsError, Distribution, is_zero, ulps_eq

_LARGE_SHAPE = 80.0


def _powf(base: float, exponent: float) -> float:
    """Power with IEEE semantics for a zero base and a negative exponent."""
    if base == 0.0 and exponent < 0.0:
        return math.inf
    return math.pow(base, exponent)


class Beta(Distribution):
    """Beta distribution with shape parameters α (`shape_a`) and β (`shape_b`)."""

    __slots__ = ("_a", "_b")

    def __init__(self, shape_a: float, shape_b: float) -> None:
        a = float(shape_a)
        b = float(shape_b)
        if (
            math.isnan(a)
            or math.isnan(b)
            or (math.isinf(a) and math.isinf(b))
            or a <= 0.0
            or b <= 0.0
        ):
            raise BadParamsError("shape parameters must be positive and not both infinite")
        self._a = a
        self._b = b

    def __repr__(self) -> str:
        return f"Beta(shape_a={self._a!r}, shape_b={self._b!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Beta):
            return NotImplemented
        return (self._a, self._b) == (other._a, other._b)

    def __hash__(self) -> int:
        return hash(("Beta", self._a, self._b))

    def shape_a(self) -> float:
        return self._a

    def shape_b(self) -> float:
        return self._b

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return 1.0

    def mean(self) -> float:
        if math.isinf(self._a):
            return 1.0
        return self._a / (self._a + self._b)

    def variance(self) -> float:
        a, b = self._a, self._b
        if math.isinf(a) or math.isinf(b):
            return 0.0
        return a * b / ((a + b) * (a + b) * (a + b + 1.0))

    def entropy(self) -> float | None:
        """Differential entropy, or None when a shape is infinite."""
        a, b = self._a, self._b
        if math.isinf(a) or math.isinf(b):
            return None
        return float(
            betaln(a, b)
            - (a - 1.0) * digamma(a)
            - (b - 1.0) * digamma(b)
            + (a + b - 2.0) * digamma(a + b)
        )

    def skewness(self) -> float:
        a, b = self._a, self._b
        if math.isinf(a):
            return -2.0
        if math.isinf(b):
            return 2.0
        return 2.0 * (b - a) * math.sqrt(a + b + 1.0) / ((a + b + 2.0) * math.sqrt(a * b))

    def mode(self) -> float | None:
        """Mode of the distribution; None unless both shapes exceed 1."""
        a, b = self._a, self._b
        if a <= 1.0 or b <= 1.0:
            return None
        if math.isinf(a):
            return 1.0
        return (a - 1.0) / (a + b - 2.0)

    def pdf(self, x: float) -> float:
        a, b = self._a, self._b
        if not 0.0 <= x <= 1.0:
            return 0.0
        if math.isinf(a):
            return math.inf if ulps_eq(x, 1.0) else 0.0
        if math.isinf(b):
            return math.inf if is_zero(x) else 0.0
        if ulps_eq(a, 1.0) and ulps_eq(b, 1.0):
            return 1.0
        if a > _LARGE_SHAPE or b > _LARGE_SHAPE:
            return math.exp(self.ln_pdf(x))
        norm = math.gamma(a + b) / (math.gamma(a) * math.gamma(b))
        return norm * _powf(x, a - 1.0) * _powf(1.0 - x, b - 1.0)

    def ln_pdf(self, x: float) -> float:
        a, b = self._a, self._b
        if not 0.0 <= x <= 1.0:
            return -math.inf
        if math.isinf(a):
            return math.inf if ulps_eq(x, 1.0) else -math.inf
        if math.isinf(b):
            return math.inf if is_zero(x) else -math.inf
        if ulps_eq(a, 1.0) and ulps_eq(b, 1.0):
            return 0.0
        norm = math.lgamma(a + b) - math.lgamma(a) - math.lgamma(b)
        if ulps_eq(a, 1.0) and is_zero(x):
            left = 0.0
        elif is_zero(x):
            left = -math.inf
        else:
            left = (a - 1.0) * math.log(x)
        if ulps_eq(b, 1.0) and ulps_eq(x, 1.0):
            right = 0.0
        elif ulps_eq(x, 1.0):
            right = -math.inf
        else:
            right = (b - 1.0) * math.log(1.0 - x)
        return norm + left + right

    def cdf(self, x: float) -> float:
        a, b = self._a, self._b
        if x < 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        if math.isinf(a):
            return 0.0 if x < 1.0 else 1.0
        if math.isinf(b):
            return 1.0
        if ulps_eq(a, 1.0) and ulps_eq(b, 1.0):
            return float(x)
        return float(betainc(a, b, x))

    def sample(self, rng: random.Random) -> float:
        """Draw by normalising two gamma variates."""
        x = rng.gammavariate(self._a, 1.0)
        y = rng.gammavariate(self._b, 1.0)
        return x / (x + y)