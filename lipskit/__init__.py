"""Symbols, cons cells, a read syntax table and primitive functions for a small Interlisp-style Lisp."""

__version__ = "3.4.0"

__all__ = [
    "types",
    "lists",
    "predicate",
    "property",
    "syntax",
    "strings",
    "logic",
    "low",
    "mapping",
]