[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lipskit"
version = "3.4.0"
description = "Symbols, cons cells, a read syntax table and primitive functions for a small Interlisp-style Lisp"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "interlisp", "interpreter", "s-expression", "cons", "symbol", "property-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: Lisp",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lipskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
