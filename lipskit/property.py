"""Property lists stored on symbols."""

from __future__ import annotations

from typing import Any

from lipskit.lists import rplaca, rplacd
from lipskit.types import Cons, LispError, Symbol, cons


def _require_symbol(obj: Any) -> Symbol:
    if not isinstance(obj, Symbol):
        raise LispError(f"Illegal argument, expected symbol: {obj!r}")
    return obj


def setplist(x: Any, pl: Any) -> Any:
    """Set the property list of ``x`` to ``pl`` and return ``pl``."""
    _require_symbol(x).plist = pl
    return pl


def getplist(x: Any) -> Any:
    """Return the whole property list of ``x``."""
    return _require_symbol(x).plist


def putprop(x: Any, p: Any, v: Any) -> Any:
    """Set property ``p`` of ``x`` to ``v`` and return ``v``."""
    sym = _require_symbol(x)
    _require_symbol(p)
    pl = sym.plist
    while isinstance(pl, Cons):
        if pl.car is p:
            rplaca(pl.cdr, v)
            return v
        pl = pl.cdr.cdr
    sym.plist = cons(p, cons(v, sym.plist))
    return v


def getprop(x: Any, p: Any) -> Any:
    """Return the value of property ``p`` of ``x``, or nil."""
    sym = _require_symbol(x)
    _require_symbol(p)
    pl = sym.plist
    while isinstance(pl, Cons):
        if pl.car is p:
            return pl.cdr.car
        pl = pl.cdr.cdr
    return None


def remprop(x: Any, p: Any) -> Any:
    """Remove property ``p`` from ``x`` in place; return its value or nil."""
    sym = _require_symbol(x)
    _require_symbol(p)
    removed: Any = None
    pl = sym.plist
    previous: Any = None
    while isinstance(pl, Cons):
        if pl.car is p:
            removed = pl.cdr.car
            if previous is None:
                sym.plist = pl.cdr.cdr
            else:
                rplacd(previous, pl.cdr.cdr)
        previous = pl.cdr
        pl = pl.cdr.cdr
    return removed