[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fzfind"
version = "0.23.1"
description = "Building blocks for fuzzy finders: Latin letter folding, ANSI colour extraction, chunked item storage, result caching and merging, and query history"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy", "finder", "ansi", "normalization", "history", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fzfind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
