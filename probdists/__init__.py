"""Probability distributions: densities, mass functions, CDFs, moments and sampling."""

__version__ = "0.1.0"

__all__ = [
    "bernoulli",
    "beta",
    "binomial",
    "categorical",
    "cauchy",
    "chi",
    "core",
    "dirac",
    "discrete_uniform",
    "empirical",
    "exponential",
]