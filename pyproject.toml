[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslabs"
version = "1.0.0"
description = "Classic data-structure and algorithm exercises: arrays, trees, graphs, searching and hashing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "binary tree",
    "graph",
    "huffman",
    "kmp",
    "shortest path",
    "spanning tree",
    "binary search tree",
    "avl",
    "hashing",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslabs-family = "dslabs.family:main"

[tool.hatch.build.targets.wheel]
packages = ["dslabs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
