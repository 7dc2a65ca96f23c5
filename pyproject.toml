[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utilz"
version = "0.2.0"
description = "A lightweight collection of small helpers for conditions, optional values, strings, collections and in-memory logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["utility", "helpers", "option", "logging", "sugar"]
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
packages = ["utilz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
