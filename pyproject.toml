[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oitools"
version = "0.1.0"
description = "Algorithms and data structures for competitive programming: string matching, heaps, graphs, big integers, sequences and classic puzzle solutions."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "bigint", "kmp", "heap", "graph", "roman-numerals"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oitools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
