from lipskit.logic import p_and, p_not, p_or, xif
from lipskit.types import Symbol, T, cons, mklist


def evaluate(expr):
    if isinstance(expr, Symbol):
        return expr.value
    return expr


def test_and():
    assert p_and(cons(T, cons(T, None)), evaluate) is T
    assert p_and(cons(None, cons(T, None)), evaluate) is None
    assert p_and(cons(T, cons(None, None)), evaluate) is None
    assert p_and(cons(None, cons(None, None)), evaluate) is None


def test_and_returns_last_value():
    assert p_and(mklist(T, "last"), evaluate) == "last"


def test_and_stops_at_first_nil():
    seen = []

    def tracking(expr):
        seen.append(expr)
        return evaluate(expr)

    result = p_and(mklist(1, None, 2), tracking)
    assert result is None
    assert seen == [1, None]


def test_or():
    assert p_or(cons(T, cons(T, None)), evaluate) is T
    assert p_or(cons(None, cons(T, None)), evaluate) is T
    assert p_or(cons(T, cons(None, None)), evaluate) is T
    assert p_or(cons(None, cons(None, None)), evaluate) is None


def test_or_returns_first_non_nil():
    assert p_or(mklist(None, "first", "second"), evaluate) == "first"


def test_not():
    assert p_not(T) is None
    assert p_not(None) is T


def test_if():
    assert xif(T, 0, mklist(1), evaluate) == 0
    assert xif(None, 0, mklist(1), evaluate) == 1


def test_if_without_else_is_nil():
    assert xif(None, 0, None, evaluate) is None