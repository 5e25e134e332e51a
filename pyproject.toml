[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordtrap"
version = "0.1.0"
description = "Word-ladder trapping games on a graph of same-length words, with minimax, max-n and search-based bots"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "word game",
    "word ladder",
    "minimax",
    "alpha-beta",
    "max-n",
    "breadth-first search",
    "puzzle",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wordtrap"]

[tool.hatch.build.targets.sdist]
include = ["wordtrap", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
