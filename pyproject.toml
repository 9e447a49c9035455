[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2022"
version = "0.1.0"
description = "Solvers for days 1 to 14 of the 2022 advent puzzle calendar"
requires-python = ">=3.10"
keywords = ["puzzles", "advent", "algorithms", "solutions"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aoc2022"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
