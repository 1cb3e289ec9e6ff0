[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tradesort"
version = "0.1.0"
description = "Sorting, searching and hashing exercises over trade-effects CSV records"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "searching",
    "counting sort",
    "merge sort",
    "heap sort",
    "quick sort",
    "binary search",
    "interpolation search",
    "hash table",
    "csv",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tradesort-sort = "tradesort.sortapp:main"
tradesort-search = "tradesort.searchapp:main"
tradesort-hash = "tradesort.hashtable:main"

[tool.hatch.build.targets.wheel]
packages = ["tradesort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
