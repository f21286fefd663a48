[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "recursia"
version = "0.1.0"
description = "Classic recursion and backtracking algorithms: partitions, permutations, sudoku, N-queens, mazes, stacks and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["recursion", "backtracking", "algorithms", "permutations", "sudoku", "n-queens", "hanoi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
recursia-tree = "recursia.tree:main"
recursia-hanoi = "recursia.hanoi:main"

[tool.setuptools.packages.find]
include = ["recursia*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
