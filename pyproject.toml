[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coregraph"
version = "0.1.0"
description = "Undirected graph analysis: k-core decomposition, densest subgraphs, k-cliques and Graphviz export"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "k-core",
    "densest subgraph",
    "clique",
    "max flow",
    "dinic",
    "graphviz",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coregraph = "coregraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coregraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
