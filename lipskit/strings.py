"""String primitives."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from lipskit.types import Cons, LispError, Symbol, T


def _is_int(obj: Any) -> bool:
    return isinstance(obj, int) and not isinstance(obj, bool)


def _require_string(obj: Any) -> str:
    if not isinstance(obj, str):
        raise LispError(f"Illegal argument, expected string: {obj!r}")
    return obj


def _require_integer(obj: Any) -> int:
    if not _is_int(obj):
        raise LispError(f"Illegal argument, expected integer: {obj!r}")
    return obj


def _elements(lst: Any) -> Iterator[Any]:
    while isinstance(lst, Cons):
        yield lst.car
        lst = lst.cdr


def concat(strings: Any) -> str:
    """Concatenate every string in the list ``strings``."""
    return "".join(_require_string(s) for s in _elements(strings))


def strcmp(s1: Any, s2: Any) -> int:
    """Negative, zero or positive as ``s1`` sorts before, with or after ``s2``."""
    left = _require_string(s1).encode()
    right = _require_string(s2).encode()
    return (left > right) - (left < right)


def strequal(s1: Any, s2: Any) -> Any:
    """t if the two strings are equal, otherwise nil."""
    return T if _require_string(s1) == _require_string(s2) else None


def stringp(s: Any) -> Any:
    """Return ``s`` if it is a string, otherwise nil."""
    return s if isinstance(s, str) else None


def strlen(s: Any) -> int:
    """The length of the string ``s``."""
    return len(_require_string(s))


def substring(s: Any, begin: Any, end: Any) -> Any:
    """Characters ``begin`` through ``end`` of ``s``, counting from one.

    Negative positions count from the end of the string. A nil ``end`` means
    the rest of the string. Out of range positions give nil.
    """
    text = _require_string(s)
    i = _require_integer(begin)
    if end is not None:
        _require_integer(end)
    if i == 0:
        return None
    start = len(text) + i if i < 0 else i - 1
    count: int | None = None
    if end is not None:
        j = end
        if j == 0 or i > j:
            return None
        count = j - start
        if count < 0:
            count = None
    if start < 0 or start > len(text):
        return None
    if count is None:
        return text[start:]
    return text[start:start + count]


def symstr(sym: Any) -> str:
    """The print name of ``sym`` as a string; "nil" for nil."""
    if sym is None:
        return "nil"
    if not isinstance(sym, Symbol):
        raise LispError(f"Illegal argument, expected symbol: {sym!r}")
    return sym.pname