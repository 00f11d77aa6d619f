[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plusat"
version = "0.1.0"
description = "A small DPLL SAT solver for DIMACS CNF files with pluggable decision, propagation and conflict strategies"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "solver", "dpll", "cnf", "dimacs", "boolean satisfiability"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
plusat = "plusat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["plusat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
