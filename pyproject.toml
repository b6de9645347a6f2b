[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leetcrust"
version = "0.1.0"
description = "Solutions to algorithm puzzles on trees, graphs, intervals, grids, strings, bits and small data-structure designs."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "puzzles", "data-structures", "interview", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["leetcrust"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
