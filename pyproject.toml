[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fcp-regex"
version = "0.1.2"
description = "Operation parsing, event log with undo/redo, verb registry and session routing for composing regexes from named fragments"
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "fragments", "parser", "tokenizer", "undo", "redo", "session"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fcp_regex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
