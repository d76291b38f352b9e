[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2022"
version = "0.1.0"
description = "Solvers for the 2022 Advent of Code puzzles, one command per day"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2022"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2022-ranges = "aoc2022.ranges:main"
aoc2022-crates = "aoc2022.crates:main"
aoc2022-marker = "aoc2022.marker:main"
aoc2022-filetree = "aoc2022.filetree:main"
aoc2022-forest = "aoc2022.forest_report:main"
aoc2022-rope = "aoc2022.rope:main"
aoc2022-crt = "aoc2022.crt:main"
aoc2022-monkeys = "aoc2022.monkey_business:main"
aoc2022-hill = "aoc2022.hill:main"
aoc2022-packets = "aoc2022.packets:main"
aoc2022-rocks = "aoc2022.rocks:main"
aoc2022-sand = "aoc2022.sand:main"
aoc2022-sensors = "aoc2022.sensors:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2022"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
