"""Read table mapping characters to syntax classes and read macros."""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any

from lipskit.types import LispError

_TABLE_SIZE = 256


class SyntaxType(enum.IntEnum):
    """Syntax class of a character."""

    OTHER = 0
    LEFT_PAREN = 1
    RIGHT_PAREN = 2
    LEFT_BRACKET = 3
    RIGHT_BRACKET = 4
    STRING_DELIM = 5
    ESCAPE = 6
    BREAKCHAR = 7
    SEPARATOR = 8
    QUOTE = 9
    EXPONENT = 10
    SIGN = 11
    DIGIT = 12
    DECIMAL_POINT = 13
    COMMENT = 14
    SHELL_COMMENT = 15
    NEWLINE = 16
    MACRO = 17
    SPLICE = 18
    INFIX = 19


_DEFAULTS = {
    "(": SyntaxType.LEFT_PAREN,
    ")": SyntaxType.RIGHT_PAREN,
    "[": SyntaxType.LEFT_BRACKET,
    "]": SyntaxType.RIGHT_BRACKET,
    '"': SyntaxType.STRING_DELIM,
    "\\": SyntaxType.ESCAPE,
    " ": SyntaxType.SEPARATOR,
    "\t": SyntaxType.SEPARATOR,
    "\n": SyntaxType.NEWLINE,
    **{digit: SyntaxType.DIGIT for digit in "0123456789"},
    "+": SyntaxType.SIGN,
    "-": SyntaxType.SIGN,
    ".": SyntaxType.DECIMAL_POINT,
    "e": SyntaxType.EXPONENT,
    "E": SyntaxType.EXPONENT,
    ";": SyntaxType.COMMENT,
    "#": SyntaxType.SHELL_COMMENT,
    "'": SyntaxType.QUOTE,
}


def _slot(index: int | str) -> int:
    slot = ord(index) if isinstance(index, str) else index
    if not 0 <= slot < _TABLE_SIZE:
        raise IndexError(f"syntax table index out of range: {index!r}")
    return slot


class SyntaxTable:
    """Syntax classes and read macro functions for the 256 byte values."""

    def __init__(self) -> None:
        self._table: list[SyntaxType] = []
        self._macros: list[Callable[[Any], Any] | None] = []
        self.reset()

    def get(self, index: int | str) -> SyntaxType:
        """Return the syntax class of a character."""
        return self._table[_slot(index)]

    def set(self, index: int | str, value: SyntaxType) -> None:
        """Set the syntax class of a character."""
        self._table[_slot(index)] = SyntaxType(value)

    def _install(self, index: int | str, kind: SyntaxType, fn: Any) -> None:
        slot = _slot(index)
        self._table[slot] = kind
        self._macros[slot] = fn

    def macro(self, index: int | str, fn: Any) -> None:
        """Make a character a read macro calling ``fn``."""
        self._install(index, SyntaxType.MACRO, fn)

    def splice(self, index: int | str, fn: Any) -> None:
        """Make a character a splice macro calling ``fn``."""
        self._install(index, SyntaxType.SPLICE, fn)

    def infix(self, index: int | str, fn: Any) -> None:
        """Make a character an infix macro calling ``fn``."""
        self._install(index, SyntaxType.INFIX, fn)

    def reset(self) -> None:
        """Restore the default read table."""
        self._table = [SyntaxType.OTHER] * _TABLE_SIZE
        self._macros = [None] * _TABLE_SIZE
        for char, kind in _DEFAULTS.items():
            self.set(char, kind)

    def read_macro(self, source: Any, index: int | str) -> Any:
        """Run the macro for a character on ``source``; nil if there is none."""
        fn = self._macros[_slot(index)]
        if fn is None:
            return None
        if not callable(fn):
            raise LispError(f"Read macro is not a function: {fn!r}")
        return fn(source)