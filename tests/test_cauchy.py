import math
import random

import pytest

from probdists.cauchy import Cauchy
from probdists.core import BadParamsError, almost_eq

INF = math.inf


def _check(actual, expected, acc=None):
    if acc is None:
        assert actual == pytest.approx(expected, rel=1e-15, abs=0.0)
    else:
        assert almost_eq(expected, actual, acc), (expected, actual)


@pytest.mark.parametrize(
    "location, scale",
    [(0.0, 0.1), (0.0, 1.0), (0.0, 10.0), (10.0, 11.0), (-5.0, 100.0), (0.0, INF)],
)
def test_create(location, scale):
    n = Cauchy(location, scale)
    assert n.location() == location
    assert n.scale() == scale


@pytest.mark.parametrize(
    "location, scale",
    [(math.nan, 1.0), (1.0, math.nan), (math.nan, math.nan), (1.0, 0.0), (1.0, -1.0)],
)
def test_bad_create(location, scale):
    with pytest.raises(BadParamsError):
        Cauchy(location, scale)


@pytest.mark.parametrize(
    "location, scale, expected",
    [
        (0.0, 2.0, 3.224171427529236102395),
        (0.1, 4.0, 3.917318608089181411812),
        (1.0, 10.0, 4.833609339963336476996),
        (10.0, 11.0, 4.92891951976766133704),
    ],
)
def test_entropy(location, scale, expected):
    _check(Cauchy(location, scale).entropy(), expected)


@pytest.mark.parametrize(
    "location, scale, expected",
    [(0.0, 2.0, 0.0), (0.1, 4.0, 0.1), (1.0, 10.0, 1.0), (10.0, 11.0, 10.0), (0.0, INF, 0.0)],
)
def test_mode_and_median(location, scale, expected):
    n = Cauchy(location, scale)
    assert n.mode() == expected
    assert n.median() == expected


def test_undefined_moments():
    n = Cauchy(0.0, 1.0)
    assert n.mean() is None
    assert n.variance() is None
    assert n.skewness() is None
    assert n.std_dev() is None


def test_min_max():
    n = Cauchy(0.0, 1.0)
    assert n.min() == -INF
    assert n.max() == INF


@pytest.mark.parametrize(
    "location, scale, x, expected, acc",
    [
        (0.0, 0.1, -5.0, 0.001272730452554141029739, None),
        (0.0, 0.1, -1.0, 0.03151583031522679916216, None),
        (0.0, 0.1, 0.0, 3.183098861837906715378, 1e-14),
        (0.0, 0.1, 1.0, 0.03151583031522679916216, None),
        (0.0, 0.1, 5.0, 0.001272730452554141029739, None),
        (0.0, 1.0, -5.0, 0.01224268793014579505914, 1e-17),
        (0.0, 1.0, -1.0, 0.1591549430918953357689, None),
        (0.0, 1.0, 0.0, 0.3183098861837906715378, None),
        (0.0, 1.0, 1.0, 0.1591549430918953357689, None),
        (0.0, 1.0, 5.0, 0.01224268793014579505914, 1e-17),
        (0.0, 10.0, -5.0, 0.02546479089470325372302, None),
        (0.0, 10.0, -1.0, 0.03151583031522679916216, None),
        (0.0, 10.0, 0.0, 0.03183098861837906715378, None),
        (0.0, 10.0, 1.0, 0.03151583031522679916216, None),
        (0.0, 10.0, 5.0, 0.02546479089470325372302, None),
        (-5.0, 100.0, -5.0, 0.003183098861837906715378, None),
        (-5.0, 100.0, -1.0, 0.003178014039374906864395, 1e-17),
        (-5.0, 100.0, 0.0, 0.003175160959439308444267, None),
        (-5.0, 100.0, 1.0, 0.003171680810918599756255, None),
        (-5.0, 100.0, 5.0, 0.003151583031522679916216, 1e-17),
        (0.0, INF, -5.0, 0.0, None),
        (0.0, INF, -1.0, 0.0, None),
        (0.0, INF, 0.0, 0.0, None),
        (0.0, INF, 1.0, 0.0, None),
        (0.0, INF, 5.0, 0.0, None),
        (INF, 1.0, -5.0, 0.0, None),
        (INF, 1.0, -1.0, 0.0, None),
        (INF, 1.0, 0.0, 0.0, None),
        (INF, 1.0, 1.0, 0.0, None),
        (INF, 1.0, 5.0, 0.0, None),
    ],
)
def test_pdf(location, scale, x, expected, acc):
    _check(Cauchy(location, scale).pdf(x), expected, acc)


@pytest.mark.parametrize(
    "location, scale, x, expected, acc",
    [
        (0.0, 0.1, -5.0, -6.666590723732973542744, None),
        (0.0, 0.1, -1.0, -3.457265309696613941009, 1e-14),
        (0.0, 0.1, 0.0, 1.157855207144645509875, None),
        (0.0, 0.1, 1.0, -3.457265309696613941009, 1e-14),
        (0.0, 0.1, 5.0, -6.666590723732973542744, None),
        (0.0, 1.0, -5.0, -4.402826423870882219615, None),
        (0.0, 1.0, -1.0, -1.837877066409345483561, 1e-15),
        (0.0, 1.0, 0.0, -1.144729885849400174143, None),
        (0.0, 1.0, 1.0, -1.837877066409345483561, 1e-15),
        (0.0, 1.0, 5.0, -4.402826423870882219615, None),
        (0.0, 10.0, -5.0, -3.670458530157655613928, None),
        (0.0, 10.0, -1.0, -3.457265309696613941009, 1e-14),
        (0.0, 10.0, 0.0, -3.447314978843445858161, None),
        (0.0, 10.0, 1.0, -3.457265309696613941009, 1e-14),
        (0.0, 10.0, 5.0, -3.670458530157655613928, None),
        (-5.0, 100.0, -5.0, -5.749900071837491542179, None),
        (-5.0, 100.0, -1.0, -5.751498793201188569872, None),
        (-5.0, 100.0, 0.0, -5.75239695203607874116, None),
        (-5.0, 100.0, 1.0, -5.75349360734762171285, None),
        (-5.0, 100.0, 5.0, -5.759850402690659625027, None),
        (0.0, INF, -5.0, -INF, None),
        (0.0, INF, -1.0, -INF, None),
        (0.0, INF, 0.0, -INF, None),
        (0.0, INF, 1.0, -INF, None),
        (0.0, INF, 5.0, -INF, None),
        (INF, 1.0, -5.0, -INF, None),
        (INF, 1.0, -1.0, -INF, None),
        (INF, 1.0, 0.0, -INF, None),
        (INF, 1.0, 1.0, -INF, None),
        (INF, 1.0, 5.0, -INF, None),
    ],
)
def test_ln_pdf(location, scale, x, expected, acc):
    _check(Cauchy(location, scale).ln_pdf(x), expected, acc)


@pytest.mark.parametrize(
    "location, scale, x, expected, acc",
    [
        (0.0, 0.1, -5.0, 0.006365349100972796679298, 1e-16),
        (0.0, 0.1, -1.0, 0.03172551743055356951498, 1e-16),
        (0.0, 0.1, 0.0, 0.5, None),
        (0.0, 0.1, 1.0, 0.968274482569446430485, None),
        (0.0, 0.1, 5.0, 0.9936346508990272033207, None),
        (0.0, 1.0, -5.0, 0.06283295818900118381375, 1e-16),
        (0.0, 1.0, -1.0, 0.25, None),
        (0.0, 1.0, 0.0, 0.5, None),
        (0.0, 1.0, 1.0, 0.75, None),
        (0.0, 1.0, 5.0, 0.9371670418109988161863, None),
        (0.0, 10.0, -5.0, 0.3524163823495667258246, None),
        (0.0, 10.0, -1.0, 0.468274482569446430485, None),
        (0.0, 10.0, 0.0, 0.5, None),
        (0.0, 10.0, 1.0, 0.531725517430553569515, None),
        (0.0, 10.0, 5.0, 0.6475836176504332741754, None),
        (-5.0, 100.0, -5.0, 0.5, None),
        (-5.0, 100.0, -1.0, 0.5127256113479918307809, None),
        (-5.0, 100.0, 0.0, 0.5159022512561763751816, None),
        (-5.0, 100.0, 1.0, 0.5190757242358362337495, None),
        (-5.0, 100.0, 5.0, 0.531725517430553569515, None),
        (0.0, INF, -5.0, 0.5, None),
        (0.0, INF, -1.0, 0.5, None),
        (0.0, INF, 0.0, 0.5, None),
        (0.0, INF, 1.0, 0.5, None),
        (0.0, INF, 5.0, 0.5, None),
        (INF, 1.0, -5.0, 0.0, None),
        (INF, 1.0, -1.0, 0.0, None),
        (INF, 1.0, 0.0, 0.0, None),
        (INF, 1.0, 1.0, 0.0, None),
        (INF, 1.0, 5.0, 0.0, None),
    ],
)
def test_cdf(location, scale, x, expected, acc):
    _check(Cauchy(location, scale).cdf(x), expected, acc)


@pytest.mark.parametrize("location, scale", [(-1.2, 3.4), (-4.5, 6.7)])
def test_cdf_monotone_and_consistent_with_pdf(location, scale):
    n = Cauchy(location, scale)
    xs = [location + scale * (k / 10.0) for k in range(-100, 101)]
    cdfs = [n.cdf(x) for x in xs]
    assert all(a <= b for a, b in zip(cdfs, cdfs[1:]))
    assert all(0.0 <= c <= 1.0 for c in cdfs)
    for x in xs:
        assert n.ln_pdf(x) == pytest.approx(math.log(n.pdf(x)), rel=1e-12)
    # Midpoint integration of the density between two points matches the cdf difference.
    a, b, steps = xs[50], xs[150], 20000
    width = (b - a) / steps
    integral = sum(n.pdf(a + (i + 0.5) * width) for i in range(steps)) * width
    assert integral == pytest.approx(n.cdf(b) - n.cdf(a), abs=1e-6)


def test_sample_median_near_location():
    n = Cauchy(3.0, 2.0)
    rng = random.Random(12345)
    draws = [n.sample(rng) for _ in range(20000)]
    below = sum(1 for d in draws if d < 3.0) / len(draws)
    assert below == pytest.approx(0.5, abs=0.02)
    quartile = sum(1 for d in draws if d < 1.0) / len(draws)
    assert quartile == pytest.approx(n.cdf(1.0), abs=0.02)


def test_equality():
    assert Cauchy(0.0, 1.0) == Cauchy(0.0, 1.0)
    assert Cauchy(0.0, 1.0) != Cauchy(0.0, 2.0)