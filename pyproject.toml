[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphwalk"
version = "0.1.0"
description = "Graph traversals, a callback depth-first search, filtering and reversing graph adaptors, adjacency matrices and a disjoint-set structure"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "traversal",
    "dfs",
    "bfs",
    "topological",
    "adjacency",
    "union-find",
    "disjoint-set",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["graphwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
