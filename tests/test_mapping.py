import pytest

from lipskit.lists import car, cddr, cdr, length
from lipskit.mapping import map_tails, mapc, mapcar, maplist
from lipskit.types import LispError, intern, mklist


def test_map_tails_visits_each_tail():
    seen = []
    result = map_tails(mklist(1, 2, 3), lambda tail: seen.insert(0, car(tail)))
    assert result is None
    assert seen == [3, 2, 1]


def test_map_tails_sums_each_tail():
    total = []
    map_tails(mklist(1, 1, 1), lambda tail: total.append(sum(tail)), None)
    assert sum(total) == 6


def test_map_tails_with_next_function():
    seen = []
    map_tails(mklist(1, 2, 3), lambda tail: seen.insert(0, car(tail)), cdr)
    assert seen == [3, 2, 1]


def test_map_tails_passes_tail_objects():
    lst = mklist(1, 2, 3)
    tails = []
    map_tails(lst, tails.append)
    assert tails[0] is lst
    assert tails[1] is lst.cdr
    assert tails[2] is lst.cdr.cdr


def test_mapc_visits_each_element():
    seen = []
    assert mapc(mklist(1, 2, 3), lambda a: seen.insert(0, a)) is None
    assert seen == [3, 2, 1]


def test_mapc_sum():
    total = []
    mapc(mklist(1, 1, 1), total.append, None)
    assert sum(total) == 3


def test_mapc_with_next_function():
    total = []
    mapc(mklist(1, 2, 3), total.append, cdr)
    assert sum(total) == 6


def test_mapc_next_function_can_skip():
    seen = []
    mapc(mklist(1, 2, 3, 4), seen.append, cddr)
    assert seen == [1, 3]


def test_maplist_car_of_tails():
    ls = mklist(1, 2, 3)
    r0 = maplist(ls, car, None)
    assert list(r0) == [1, 2, 3]
    r1 = maplist(ls, car, None)
    assert list(r1) == [1, 2, 3]
    r2 = maplist(ls, car, cdr)
    assert list(r2) == [1, 2, 3]


def test_maplist_length_example():
    assert list(maplist(mklist(intern("a"), intern("b"), intern("c")), length)) == [3, 2, 1]


def test_maplist_first_step_uses_cdr():
    result = maplist(mklist(1, 2, 3, 4), car, cddr)
    assert list(result) == [1, 2, 4]


def test_mapcar_plus_one():
    ls = mklist(1, 2, 3)
    r0 = mapcar(ls, lambda a: a + 1, None)
    assert list(r0) == [2, 3, 4]
    r1 = mapcar(ls, lambda a: a + 1)
    assert list(r1) == [2, 3, 4]
    r2 = mapcar(ls, lambda a: a + 1, cdr)
    assert list(r2) == [2, 3, 4]


def test_mapcar_leaves_input_unchanged():
    ls = mklist(1, 2, 3)
    result = mapcar(ls, lambda a: a * 10)
    assert list(ls) == [1, 2, 3]
    assert result is not ls
    assert length(result) == length(ls)


@pytest.mark.parametrize("fn", [map_tails, mapc, maplist, mapcar])
def test_non_list_gives_nil_without_calls(fn):
    calls = []
    assert fn(intern("a"), calls.append, None) is None
    assert fn(None, calls.append, None) is None
    assert calls == []


@pytest.mark.parametrize("fn", [map_tails, mapc, maplist, mapcar])
def test_non_callable_raises(fn):
    with pytest.raises(LispError):
        fn(mklist(1, 2), 42, None)