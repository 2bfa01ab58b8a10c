[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tda"
version = "0.1.0"
description = "Classic abstract data types: stacks, queues, singly and doubly linked lists, and binary search trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "stack", "queue", "linked list", "doubly linked list", "binary search tree", "ring buffer"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tda"]

[tool.pytest.ini_options]
addopts = "-ra"
