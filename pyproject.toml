[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzlebox"
version = "0.1.0"
description = "Solvers for a season of daily programming puzzles: grids, mazes, stones, robots and keypads."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["puzzles", "advent", "solver", "grid", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = [
    "pytest",
]

[project.scripts]
puzzlebox = "puzzlebox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzlebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
