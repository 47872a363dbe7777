"""The chi distribution."""

from __future__ import annotations

import math
import random

from scipy.special import digamma, gammainc

from .core import BadParamsError, Distribution

_STIRLING_THRESHOLD = 300.0
_LOG_PDF_THRESHOLD = 160.0


def _powf(base: float, exponent: float) -> float:
    """Power that saturates to infinity instead of raising on overflow."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


class Chi(Distribution):
    """Chi distribution with `freedom` degrees of freedom."""

    __slots__ = ("_freedom",)

    def __init__(self, freedom: float) -> None:
        freedom = float(freedom)
        if math.isnan(freedom) or freedom <= 0.0:
            raise BadParamsError("freedom must be a positive number")
        self._freedom = freedom

    def __repr__(self) -> str:
        return f"Chi(freedom={self._freedom!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chi):
            return NotImplemented
        return self._freedom == other._freedom

    def __hash__(self) -> int:
        return hash(("Chi", self._freedom))

    def freedom(self) -> float:
        return self._freedom

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return math.inf

    def mean(self) -> float | None:
        """Mean of the distribution, or None when the freedom is infinite."""
        k = self._freedom
        if math.isinf(k):
            return None
        if k > _STIRLING_THRESHOLD:
            # Stirling series approximation, relative accuracy O(1/k^4).
            return math.sqrt(k) / (
                (1.0 + 0.25 / k)
                * (1.0 + 0.03125 / (k * k))
                * (1.0 - 0.046875 / (k * k * k))
            )
        return math.sqrt(2.0) * math.gamma((k + 1.0) / 2.0) / math.gamma(k / 2.0)

    def variance(self) -> float | None:
        mean = self.mean()
        if mean is None:
            return None
        return self._freedom - mean * mean

    def entropy(self) -> float | None:
        k = self._freedom
        if math.isinf(k):
            return None
        return math.lgamma(k / 2.0) + (
            k - math.log(2.0) - (k - 1.0) * float(digamma(k / 2.0))
        ) / 2.0

    def skewness(self) -> float | None:
        sigma = self.std_dev()
        if sigma is None:
            return None
        mean = self.mean()
        if mean is None:
            return None
        return mean * (1.0 - 2.0 * sigma * sigma) / (sigma * sigma * sigma)

    def mode(self) -> float | None:
        """sqrt(k - 1), or None when the freedom is below 1."""
        if self._freedom - 1.0 < 0.0:
            return None
        return math.sqrt(self._freedom - 1.0)

    def pdf(self, x: float) -> float:
        k = self._freedom
        if math.isinf(k) or x == math.inf or x <= 0.0:
            return 0.0
        if k > _LOG_PDF_THRESHOLD:
            return math.exp(self.ln_pdf(x))
        return (
            _powf(2.0, 1.0 - k / 2.0)
            * _powf(x, k - 1.0)
            * math.exp(-x * x / 2.0)
            / math.gamma(k / 2.0)
        )

    def ln_pdf(self, x: float) -> float:
        k = self._freedom
        if math.isinf(k) or x == math.inf or x <= 0.0:
            return -math.inf
        return (
            (1.0 - k / 2.0) * math.log(2.0)
            + (k - 1.0) * math.log(x)
            - x * x / 2.0
            - math.lgamma(k / 2.0)
        )

    def cdf(self, x: float) -> float:
        k = self._freedom
        if k == math.inf or x == math.inf:
            return 1.0
        if x <= 0.0:
            return 0.0
        return float(gammainc(k / 2.0, x * x / 2.0))

    def sample(self, rng: random.Random) -> float:
        """Square root of a sum of squared standard normal draws."""
        total = sum(rng.gauss(0.0, 1.0) ** 2 for _ in range(int(self._freedom)))
        return math.sqrt(total)