"""Core object model: symbols, cons cells and the symbol table."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Any


class LispError(Exception):
    """Raised when a lisp primitive is given an argument it cannot handle."""


class ObjectType(enum.IntEnum):
    """The kinds of object the interpreter knows about."""

    NIL = 0
    SYMBOL = 1
    INTEGER = 2
    FLOAT = 3
    INDIRECT = 4
    CONS = 5
    STRING = 6
    SUBR = 7
    LAMBDA = 8
    CLOSURE = 9
    ENVIRON = 10
    FILE = 11
    CVARIABLE = 12


_MISSING: Any = object()


class Symbol:
    """A literal atom with a print name, a value cell and a property list."""

    __slots__ = ("pname", "_value", "plist", "constant")

    def __init__(self, pname: str, value: Any = _MISSING) -> None:
        self.pname = pname
        self._value = UNBOUND if value is _MISSING else value
        self.plist: Any = None
        self.constant = False

    @property
    def value(self) -> Any:
        """The value cell of the symbol."""
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self.constant:
            raise LispError(f"Cannot set constant {self.pname}")
        self._value = new_value

    def __repr__(self) -> str:
        return self.pname


UNBOUND = Symbol("unbound", value=None)
UNBOUND._value = UNBOUND


class Cons:
    """A cons cell holding a car and a cdr."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: Any = None, cdr: Any = None) -> None:
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[Any]:
        """Yield the car of each cell until the tail is no longer a cons."""
        cell: Any = self
        while isinstance(cell, Cons):
            yield cell.car
            cell = cell.cdr

    def __repr__(self) -> str:
        return _format(self)


def _format(obj: Any) -> str:
    if obj is None:
        return "nil"
    if isinstance(obj, Symbol):
        return obj.pname
    if isinstance(obj, str):
        escaped = obj.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(obj, Cons):
        parts = []
        cell: Any = obj
        while isinstance(cell, Cons):
            parts.append(_format(cell.car))
            cell = cell.cdr
        if cell is not None:
            parts.extend([".", _format(cell)])
        return "(" + " ".join(parts) + ")"
    return repr(obj)


_store: dict[str, Symbol] = {}


def intern(pname: str) -> Symbol:
    """Return the symbol named ``pname``, creating it if needed."""
    sym = _store.get(pname)
    if sym is None:
        sym = Symbol(pname)
        _store[pname] = sym
    return sym


def unintern(pname: str) -> None:
    """Remove the symbol named ``pname`` from the symbol table."""
    del _store[pname]


def exists(pname: str) -> bool:
    """True if a symbol named ``pname`` is in the symbol table."""
    return pname in _store


T = intern("t")
T.value = T
T.constant = True


def type_of(obj: Any) -> ObjectType:
    """Classify a lisp object."""
    if obj is None:
        return ObjectType.NIL
    declared = getattr(obj, "lisp_type", None)
    if isinstance(declared, ObjectType):
        return declared
    if isinstance(obj, Symbol):
        return ObjectType.SYMBOL
    if isinstance(obj, Cons):
        return ObjectType.CONS
    if isinstance(obj, bool):
        raise TypeError(f"not a lisp object: {obj!r}")
    if isinstance(obj, int):
        return ObjectType.INTEGER
    if isinstance(obj, float):
        return ObjectType.FLOAT
    if isinstance(obj, str):
        return ObjectType.STRING
    if callable(obj):
        return ObjectType.SUBR
    raise TypeError(f"not a lisp object: {obj!r}")


def is_nil(obj: Any) -> bool:
    """True if ``obj`` is nil."""
    return obj is None


def cons(car: Any, cdr: Any) -> Cons:
    """Create a new cons cell."""
    return Cons(car, cdr)


def mklist(*args: Any) -> Cons | None:
    """Build a proper list of the arguments."""
    result: Cons | None = None
    for item in reversed(args):
        result = Cons(item, result)
    return result