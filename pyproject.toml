[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pardemos"
version = "0.1.0"
description = "Small teaching demos: sorting, summary statistics, graph traversal and vector/matrix arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "sorting", "graph", "bfs", "dfs", "matrix", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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

[project.scripts]
pardemos-sort = "pardemos.sorting:main"
pardemos-stats = "pardemos.stats:main"
pardemos-graph = "pardemos.graph:main"
pardemos-linalg = "pardemos.linalg:main"

[tool.hatch.build.targets.wheel]
packages = ["pardemos"]

[tool.pytest.ini_options]
addopts = "-ra"
