"""Map functions: apply a function to each element or each tail of a list."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from lipskit.types import Cons, LispError


def _call(fn: Any, arg: Any) -> Any:
    if not callable(fn):
        raise LispError(f"Illegal function: {fn!r}")
    return fn(arg)


def _advance(tail: Cons, fn2: Any) -> Any:
    if fn2 is None:
        return tail.cdr
    return _call(fn2, tail)


def map_tails(lst: Any, fn1: Callable[[Any], Any], fn2: Any = None) -> None:
    """Apply ``fn1`` to each tail of ``lst``; return nil.

    ``fn2``, when given, is called on the current tail instead of taking its
    cdr to reach the next one.
    """
    tail = lst
    while isinstance(tail, Cons):
        _call(fn1, tail)
        tail = _advance(tail, fn2)
    return None


def mapc(lst: Any, fn1: Callable[[Any], Any], fn2: Any = None) -> None:
    """Apply ``fn1`` to each element of ``lst``; return nil."""
    tail = lst
    while isinstance(tail, Cons):
        _call(fn1, tail.car)
        tail = _advance(tail, fn2)
    return None


def _collect(lst: Any, fn1: Any, fn2: Any, pick: Callable[[Cons], Any]) -> Any:
    if not isinstance(lst, Cons):
        return None
    head = Cons(_call(fn1, pick(lst)), None)
    last = head
    # The first step always moves on by cdr; fn2 is used from then on.
    tail: Any = lst.cdr
    while isinstance(tail, Cons):
        last.cdr = Cons(_call(fn1, pick(tail)), None)
        last = last.cdr
        tail = _advance(tail, fn2)
    return head


def maplist(lst: Any, fn1: Callable[[Any], Any], fn2: Any = None) -> Any:
    """Return a list of the results of ``fn1`` applied to each tail of ``lst``."""
    return _collect(lst, fn1, fn2, lambda cell: cell)


def mapcar(lst: Any, fn1: Callable[[Any], Any], fn2: Any = None) -> Any:
    """Return a list of the results of ``fn1`` applied to each element."""
    return _collect(lst, fn1, fn2, lambda cell: cell.car)