[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hsseig"
version = "0.1.0"
description = "Building blocks for divide-and-conquer eigensolvers of symmetric hierarchically semiseparable (HSS) matrices"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "scipy",
]
keywords = ["hss", "eigenvalues", "divide-and-conquer", "banded matrix", "linear algebra", "cauchy matrix", "fmm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hsseig"]

[tool.pytest.ini_options]
addopts = "-ra"
