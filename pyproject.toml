[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicalgo"
version = "0.1.0"
description = "Classic sorting, searching, string matching and graph traversal algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "searching",
    "kmp",
    "bfs",
    "dfs",
    "graph",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
classicalgo-search = "classicalgo.searching:main"
classicalgo-distance = "classicalgo.geometry:main"
classicalgo-kmp = "classicalgo.kmp:main"
classicalgo-graph = "classicalgo.graph:main"

[tool.hatch.build.targets.wheel]
packages = ["classicalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
