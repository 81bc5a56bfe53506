[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bismuth-search"
version = "0.1.0"
description = "Search core for a chess engine: move ordering, transposition and repetition tables, Zobrist hashing and negamax search"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "engine", "negamax", "zobrist", "transposition-table", "alpha-beta"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bismuth_search"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
