"""List primitives: accessors, destructive updates and list building."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from lipskit.types import Cons, LispError, T, cons, type_of


def _require_cons(obj: Any) -> Cons:
    if not isinstance(obj, Cons):
        raise LispError(f"Illegal argument, expected cons: {obj!r}")
    return obj


def _items(lst: Any) -> Iterator[Any]:
    while isinstance(lst, Cons):
        yield lst.car
        lst = lst.cdr


def car(a: Any) -> Any:
    """The car of a cons cell, nil for anything else."""
    return a.car if isinstance(a, Cons) else None


def cdr(a: Any) -> Any:
    """The cdr of a cons cell, nil for anything else."""
    return a.cdr if isinstance(a, Cons) else None


def cadr(a: Any) -> Any:
    """Same as (car (cdr a))."""
    return car(cdr(a))


def cdar(a: Any) -> Any:
    """Same as (cdr (car a))."""
    return cdr(car(a))


def caar(a: Any) -> Any:
    """Same as (car (car a))."""
    return car(car(a))


def cddr(a: Any) -> Any:
    """Same as (cdr (cdr a))."""
    return cdr(cdr(a))


def cdddr(a: Any) -> Any:
    """Same as (cdr (cdr (cdr a)))."""
    return cdr(cdr(cdr(a)))


def caddr(a: Any) -> Any:
    """Same as (car (cdr (cdr a)))."""
    return car(cdr(cdr(a)))


def cdadr(a: Any) -> Any:
    """Same as (cdr (car (cdr a)))."""
    return cdr(car(cdr(a)))


def caadr(a: Any) -> Any:
    """Same as (car (car (cdr a)))."""
    return car(car(cdr(a)))


def cddar(a: Any) -> Any:
    """Same as (cdr (cdr (car a)))."""
    return cdr(cdr(car(a)))


def cadar(a: Any) -> Any:
    """Same as (car (cdr (car a)))."""
    return car(cdr(car(a)))


def cdaar(a: Any) -> Any:
    """Same as (cdr (car (car a)))."""
    return cdr(car(car(a)))


def caaar(a: Any) -> Any:
    """Same as (car (car (car a)))."""
    return car(car(car(a)))


def rplaca(x: Any, y: Any) -> Cons:
    """Replace the car of ``x`` with ``y`` destructively."""
    cell = _require_cons(x)
    cell.car = y
    return cell


def rplacd(x: Any, y: Any) -> Cons:
    """Replace the cdr of ``x`` with ``y`` destructively."""
    cell = _require_cons(x)
    cell.cdr = y
    return cell


def nconc(lists: Any) -> Any:
    """Destructively concatenate the lists held in ``lists``."""
    head: Any = None
    last: Cons | None = None
    for lst in _items(lists):
        if lst is None:
            continue
        cell = _require_cons(lst)
        if last is None:
            head = cell
        else:
            last.cdr = cell
        while cell.cdr is not None:
            cell = cell.cdr
        last = cell
    return head


def tconc(cell: Any, obj: Any) -> Cons:
    """Add ``obj`` to the end of the list kept in the car of ``cell``.

    The cdr of ``cell`` points at the last cell of that list. A nil ``cell``
    starts a new one.
    """
    if cell is None:
        cell = cons(cons(obj, None), None)
        return rplacd(cell, cell.car)
    cell = _require_cons(cell)
    if type_of(cell.car) is not type_of(cell) or not isinstance(cell.car, Cons):
        rplacd(cell, cons(obj, None))
        return rplaca(cell, cell.cdr)
    rplacd(cell.cdr, cons(obj, None))
    return rplacd(cell, cell.cdr.cdr)


def attach(obj: Any, lst: Any) -> Cons:
    """Prepend ``obj`` to ``lst`` in place, so every reference sees it."""
    if lst is None:
        return cons(obj, None)
    cell = _require_cons(lst)
    cell.cdr = cons(cell.car, cell.cdr)
    cell.car = obj
    return cell


def append(lists: Any) -> Any:
    """Return a fresh list holding the elements of every list in ``lists``."""
    head = cons(None, None)
    tail = head
    for lst in _items(lists):
        if lst is None:
            continue
        for item in _items(_require_cons(lst)):
            tail.cdr = cons(item, None)
            tail = tail.cdr
    return head.cdr


def null(a: Any) -> Any:
    """t if ``a`` is nil, otherwise nil."""
    return T if a is None else None


def length(x: Any) -> int:
    """The number of elements in the list ``x``."""
    return sum(1 for _ in _items(x))


def nth(x: Any, n: Any) -> Any:
    """The ``n``th tail of ``x``, counting from one; nil if too short."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise LispError(f"Illegal argument, expected integer: {n!r}")
    if x is None:
        return None
    tail: Any = _require_cons(x)
    while n > 1 and tail is not None:
        tail = cdr(tail)
        n -= 1
    return tail