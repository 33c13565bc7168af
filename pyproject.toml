[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bubble-ist"
version = "0.1.0"
description = "Parent tables of the n-1 independent spanning trees of the bubble-sort network"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bubble-sort network",
    "independent spanning trees",
    "permutations",
    "interconnection networks",
    "graph theory",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
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
bubble-ist = "bubble_ist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bubble_ist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
