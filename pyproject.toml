[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minimake"
version = "0.1.0"
description = "A small Makefile toolkit: preprocessing, grammar and dependency checks, running a rule's command and printing the dependency graph"
requires-python = ">=3.10"
dependencies = []
keywords = ["make", "makefile", "build", "dependency-graph", "lint"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minimake-options = "minimake.options:main"
minimake-preprocess = "minimake.preprocess:main"
minimake-grammar = "minimake.grammar:main"
minimake-check = "minimake.rules:main"
minimake-run = "minimake.runner:main"
minimake-graph = "minimake.graph:main"

[tool.hatch.build.targets.wheel]
packages = ["minimake"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
