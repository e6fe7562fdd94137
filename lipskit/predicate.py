"""Predicates: identity, equality and type tests on lisp objects."""

from __future__ import annotations

from typing import Any

from lipskit.types import UNBOUND, Cons, ObjectType, Symbol, T, intern, type_of

_TYPE_NAMES = {
    ObjectType.SYMBOL: "symbol",
    ObjectType.INTEGER: "integer",
    ObjectType.FLOAT: "float",
    ObjectType.INDIRECT: "indirect",
    ObjectType.CONS: "cons",
    ObjectType.STRING: "string",
    ObjectType.CLOSURE: "closure",
    ObjectType.ENVIRON: "environ",
    ObjectType.FILE: "file",
    ObjectType.CVARIABLE: "cvariable",
}


def _is_int(obj: Any) -> bool:
    return isinstance(obj, int) and not isinstance(obj, bool)


def _evaluates(obj: Any) -> bool:
    return bool(getattr(obj, "evaluates", True))


def eq(a: Any, b: Any) -> Any:
    """t if ``a`` and ``b`` are the same object or integers of equal value."""
    if a is b:
        return T
    if _is_int(a) and _is_int(b) and a == b:
        return T
    return None


def atom(a: Any) -> Any:
    """t if ``a`` is nil, t, a symbol, an integer or a float."""
    if a is None or a is T:
        return T
    if type_of(a) in (ObjectType.SYMBOL, ObjectType.INTEGER, ObjectType.FLOAT):
        return T
    return None


def numberp(a: Any) -> Any:
    """Return ``a`` if it is an integer or a float, otherwise nil."""
    if type_of(a) in (ObjectType.INTEGER, ObjectType.FLOAT):
        return a
    return None


def listp(a: Any) -> Any:
    """Return ``a`` if it is a cons cell, otherwise nil."""
    return a if isinstance(a, Cons) else None


def memb(x: Any, ls: Any) -> Any:
    """Return the tail of ``ls`` whose car is ``eq`` to ``x``, or nil."""
    tail = ls
    while isinstance(tail, Cons):
        if eq(x, tail.car) is not None:
            return tail
        tail = tail.cdr
    return None


def equal(a: Any, b: Any) -> Any:
    """t if ``a`` and ``b`` have equal structure and contents."""
    while True:
        kind = type_of(a)
        if kind is not type_of(b):
            return None
        if a is b:
            return T
        if kind is ObjectType.CONS:
            if equal(a.car, b.car) is None:
                return None
            a, b = a.cdr, b.cdr
            continue
        if kind is ObjectType.STRING:
            return T if a == b else None
        if kind is ObjectType.LAMBDA:
            return T if a == b else None
        if kind is ObjectType.INTEGER:
            return T if a == b else None
        return None


def nlistp(a: Any) -> Any:
    """t for nil, ``a`` itself for any other non-cons, nil for a cons."""
    if a is None:
        return T
    if not isinstance(a, Cons):
        return a
    return None


def neq(a: Any, b: Any) -> Any:
    """t if ``a`` and ``b`` are not the same object."""
    return T if a is not b else None


def boundp(a: Any) -> Any:
    """t if ``a`` is a symbol with a value."""
    if not isinstance(a, Symbol):
        return None
    return T if a.value is not UNBOUND else None


def litatom(a: Any) -> Any:
    """t if ``a`` is a symbol or nil."""
    if a is None or isinstance(a, Symbol):
        return T
    return None


def xtypeof(a: Any) -> Any:
    """Return the type of ``a`` as a symbol, nil for nil."""
    kind = type_of(a)
    if kind is ObjectType.NIL:
        return None
    if kind is ObjectType.SUBR:
        return intern("subr" if _evaluates(a) else "fsubr")
    if kind is ObjectType.LAMBDA:
        return intern("lambda" if _evaluates(a) else "nlambda")
    return intern(_TYPE_NAMES[kind])