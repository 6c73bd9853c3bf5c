[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small data-structure and algorithm toolkit: binary search tree, dictionary, queue, cost graphs and Dijkstra shortest paths."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary search tree",
    "dictionary",
    "queue",
    "graph",
    "dijkstra",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-graph = "labkit.graph:main"
labkit-dijkstra = "labkit.dijkstra:main"
labkit-strings = "labkit.strings:main"
labkit-tree = "labkit.bst:main"
labkit-filter = "labkit.textfuncs:main"
labkit-dict = "labkit.dict_cli:main"
labkit-queue = "labkit.intqueue:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
