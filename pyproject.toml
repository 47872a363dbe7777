[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "probdists"
version = "0.1.0"
description = "Probability distributions with densities, cumulative distribution functions, moments and sampling"
requires-python = ">=3.10"
dependencies = [
    "scipy",
]
keywords = ["statistics", "probability", "distributions", "pdf", "cdf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["probdists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
