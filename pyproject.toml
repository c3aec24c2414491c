[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "navigate"
version = "0.1.0"
description = "Shortest-path planning over implicit graphs with Dijkstra's algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = ["dijkstra", "shortest-path", "graph", "navigation", "path-planning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["navigate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
