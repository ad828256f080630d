[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphlabs"
version = "0.1.0"
description = "Shortest-path algorithms (Dijkstra, Floyd-Warshall) with small interactive commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "floyd-warshall", "shortest-path", "algorithms", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
graphlabs-dijkstra = "graphlabs.dijkstra_cli:main"
graphlabs-floyd = "graphlabs.floyd_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphlabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
