# probdists

Probability distributions for Python. Each distribution reports its
support, and where they are defined its moments, entropy, median and mode.
Each one also evaluates its density or mass function and its cumulative
distribution function. Every distribution can draw a sample from a
`random.Random` instance that you pass in.

## Installation

```
pip install probdists
```

The package depends on `scipy`, which supplies the incomplete beta and
gamma functions and the digamma function.

## Distributions

| Module | Class | Kind |
| --- | --- | --- |
| `probdists.bernoulli` | `Bernoulli(p)` | discrete |
| `probdists.binomial` | `Binomial(p, n)` | discrete |
| `probdists.categorical` | `Categorical(prob_mass)` | discrete |
| `probdists.discrete_uniform` | `DiscreteUniform(low, high)` | discrete |
| `probdists.beta` | `Beta(shape_a, shape_b)` | continuous |
| `probdists.cauchy` | `Cauchy(location, scale)` | continuous |
| `probdists.chi` | `Chi(freedom)` | continuous |
| `probdists.dirac` | `Dirac(v)` | point mass |
| `probdists.exponential` | `Exp(rate)` | continuous |
| `probdists.empirical` | `Empirical(samples)` | built from data |

Discrete distributions provide `pmf`, `ln_pmf` and `cdf`. `Beta`, `Cauchy`,
`Chi` and `Exp` provide `pdf`, `ln_pdf` and `cdf`. `Dirac` and `Empirical`
provide `cdf` only. All of them provide `min()`, `max()` and
`sample(rng)`.

The constructors raise `probdists.core.BadParamsError`, a subclass of
`ValueError`, when their parameters are invalid. Examples of invalid
parameters are `p` outside `[0, 1]`, a rate or scale that is not positive,
and `NaN` anywhere.

Some statistics are undefined for certain parameters, and the method then
returns `None`. Examples are the mode of `Beta(1, 5)`, the mean of
`Chi(inf)`, and the mean and variance of a `Cauchy`.

`Categorical.inverse_cdf(x)` raises `ValueError` unless `0 < x < 1`.
`Empirical.min()` and `Empirical.max()` raise `ValueError` when no
samples have been added.

## Example

```python
import random

from probdists.binomial import Binomial
from probdists.exponential import Exp
from probdists.categorical import Categorical

b = Binomial(0.5, 5)
b.mean()      # 2.5
b.pmf(3)      # 0.3125
b.cdf(2)      # 0.5

e = Exp(1.0)
e.pdf(1.0)    # 0.36787944117144233
e.median()    # 0.6931471805599453

c = Categorical([4.0, 2.5, 2.5, 1.0])
c.inverse_cdf(0.5)   # 1

rng = random.Random(42)
draws = [e.sample(rng) for _ in range(1000)]
```

`Empirical` ignores `NaN` points. It keeps a running mean and sample
variance as points are added or removed:

```python
from probdists.empirical import Empirical

emp = Empirical([5.0, 10.0])
emp.add(2.0)
emp.cdf(5.0)            # 0.6666666666666666
emp.min(), emp.max()    # (2.0, 10.0)
emp.remove(2.0)
```

`Categorical` also has module-level helpers:

- `prob_mass_to_cdf(prob_mass)` returns the running sums of the masses.
- `binary_index(search, val)` gives the position of a value in a sorted
  sequence.
- `sample_unchecked(rng, cdf)` draws from an unnormalised cdf.

## Helpers

`probdists.core` holds the following:

- `Distribution`, the base class. Its `std_dev()` returns the square root
  of `variance()`, or `None` when the variance is undefined.
- The floating-point comparison helpers `almost_eq(a, b, acc)`,
  `ulps_eq(a, b)` and `is_zero(x)`.
- Constants such as `SQRT_2PI`, `LN_PI`, `EULER_MASCHERONI` and `ACC`.

## What it does not do

This is a library only. It has no command-line interface. Apart from
`Categorical.inverse_cdf`, no distribution offers an inverse cumulative
distribution function.

## Running the tests

```
pip install -e ".[test]"
pytest
```