"""Low level special forms: conditionals, sequencing, assignment and loops."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from lipskit.types import Cons, LispError, Symbol

Evaluator = Callable[[Any], Any]


def _elements(lst: Any) -> Iterator[Any]:
    while isinstance(lst, Cons):
        yield lst.car
        lst = lst.cdr


def cond(clauses: Any, evaluate: Evaluator) -> Any:
    """Evaluate the first clause whose test is non-nil.

    Returns the value of its last consequent, or of the test when there are
    no consequents; nil when no clause applies.
    """
    for clause in _elements(clauses):
        if not isinstance(clause, Cons):
            raise LispError(f"Illegal argument, expected cons: {clause!r}")
        result = evaluate(clause.car)
        if result is not None:
            if clause.cdr is None:
                return result
            return progn(clause.cdr, evaluate)
    return None


def prog1(first: Any, rest: Any) -> Any:
    """Return the first of already evaluated arguments."""
    return first


def progn(exprs: Any, evaluate: Evaluator) -> Any:
    """Evaluate each expression in turn and return the last value."""
    value: Any = None
    for expr in _elements(exprs):
        value = evaluate(expr)
    return value


def set(var: Any, val: Any) -> Any:  # noqa: A001
    """Set the value of the symbol ``var`` to ``val`` and return ``val``."""
    if not isinstance(var, Symbol):
        raise LispError(f"Illegal argument, expected symbol: {var!r}")
    var.value = val
    return val


def setq(var: Any, expr: Any, evaluate: Evaluator) -> Any:
    """Set ``var`` to the value of ``expr``."""
    return set(var, evaluate(expr))


def setqq(var: Any, val: Any) -> Any:
    """Set ``var`` to ``val`` without evaluating anything."""
    return set(var, val)


def xwhile(pred: Any, body: Any, evaluate: Evaluator) -> None:
    """Evaluate ``body`` as long as ``pred`` evaluates to non-nil."""
    while evaluate(pred) is not None:
        progn(body, evaluate)
    return None