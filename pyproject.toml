[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplegraph"
version = "0.1.0"
description = "A simple graph with switchable list and matrix storage, cycle search and Bellman-Ford shortest paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "adjacency list", "adjacency matrix", "bellman-ford", "cycles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
simplegraph = "simplegraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["simplegraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
