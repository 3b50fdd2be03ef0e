[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "letters"
version = "0.1.0"
description = "Building blocks for the Letters language: symbol table, parse-tree nodes and a visitor"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "symbol-table", "parse-tree", "visitor", "letters"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
letters = "letters.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["letters"]

[tool.pytest.ini_options]
addopts = "-ra"
