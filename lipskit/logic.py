"""Logic special forms and functions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from lipskit.low import progn
from lipskit.types import Cons, T

Evaluator = Callable[[Any], Any]


def _elements(lst: Any) -> Iterator[Any]:
    while isinstance(lst, Cons):
        yield lst.car
        lst = lst.cdr


def p_and(args: Any, evaluate: Evaluator) -> Any:
    """nil if any expression evaluates to nil, else the last value."""
    value: Any = None
    for expr in _elements(args):
        value = evaluate(expr)
        if value is None:
            return None
    return value


def p_or(args: Any, evaluate: Evaluator) -> Any:
    """The first non-nil value among the expressions, or nil."""
    for expr in _elements(args):
        value = evaluate(expr)
        if value is not None:
            return value
    return None


def p_not(x: Any) -> Any:
    """t if ``x`` is nil, otherwise nil."""
    return T if x is None else None


def xif(pred: Any, true_expr: Any, false_expr: Any, evaluate: Evaluator) -> Any:
    """Evaluate ``true_expr`` if ``pred`` holds, else the ``false_expr`` list."""
    if evaluate(pred) is None:
        return progn(false_expr, evaluate)
    return evaluate(true_expr)