[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linsolvers"
version = "0.1.0"
description = "Direct and iterative solvers for square linear systems, with a command that compares them on a batch of right-hand sides"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear systems",
    "gaussian elimination",
    "lu decomposition",
    "gauss-seidel",
    "jacobi",
    "numerical methods",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Portuguese (Brazilian)",
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
linsolvers = "linsolvers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linsolvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
