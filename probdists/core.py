"""Shared constants, error type, float comparison helpers and the distribution base class."""

from __future__ import annotations

import math
import struct
import sys

SQRT_2PI = 2.5066282746310005024157652848110452530069867406099
"""sqrt(2 * pi)"""

LN_PI = 1.1447298858494001741434273513530587116472948129153
"""ln(pi)"""

LN_SQRT_2PI = 0.91893853320467274178032973640561763986139747363778
"""ln(sqrt(2 * pi))"""

LN_SQRT_2PIE = 1.4189385332046727417803297364056176398613974736378
"""ln(sqrt(2 * pi * e))"""

LN_2_SQRT_E_OVER_PI = 0.6207822376352452223455184457816472122518527279025978
"""ln(2 * sqrt(e / pi))"""

TWO_SQRT_E_OVER_PI = 1.8603827342052657173362492472666631120594218414085755
"""2 * sqrt(e / pi)"""

EULER_MASCHERONI = 0.5772156649015328606065120900824024310421593359399235988057672348849
"""The Euler-Mascheroni constant."""

ACC = 10e-11
"""Targeted accuracy for double precision computations."""

_EPSILON = sys.float_info.epsilon
_MAX_ULPS = 4


class BadParamsError(ValueError):
    """Raised when a distribution is constructed with invalid parameters."""


class Distribution:
    """Base class for distributions; summary statistics default to undefined (None)."""

    def mean(self) -> float | None:
        return None

    def variance(self) -> float | None:
        return None

    def entropy(self) -> float | None:
        return None

    def skewness(self) -> float | None:
        return None

    def std_dev(self) -> float | None:
        """Square root of the variance, or None where the variance is undefined."""
        var = self.variance()
        return None if var is None else math.sqrt(var)


def almost_eq(a: float, b: float, acc: float) -> bool:
    """True if `a` and `b` differ by less than `acc`; equal infinities compare equal."""
    if math.isinf(a) and math.isinf(b):
        return a == b
    return abs(a - b) < acc


def _ordered_bits(x: float) -> int:
    return struct.unpack("<q", struct.pack("<d", x))[0]


def ulps_eq(a: float, b: float) -> bool:
    """True if `a` and `b` are within machine epsilon or four units in the last place."""
    if a == b:
        return True
    if math.isnan(a) or math.isnan(b):
        return False
    if abs(a - b) <= _EPSILON:
        return True
    if math.copysign(1.0, a) != math.copysign(1.0, b):
        return False
    return abs(_ordered_bits(a) - _ordered_bits(b)) <= _MAX_ULPS


def is_zero(x: float) -> bool:
    """True if `x` is zero in the sense of :func:`ulps_eq`."""
    return ulps_eq(x, 0.0)