import pytest

from lipskit.strings import (
    concat,
    strcmp,
    strequal,
    stringp,
    strlen,
    substring,
    symstr,
)
from lipskit.types import LispError, T, intern, mklist


def test_concat():
    assert concat(mklist("hello ", "world")) == "hello world"
    assert concat(None) == ""


def test_concat_rejects_non_strings():
    with pytest.raises(LispError):
        concat(mklist("a", 1))


def test_strcmp_ordering():
    assert strcmp("alpha", "zeta") < 0
    assert strcmp("zeta", "alpha") > 0
    assert strcmp("alpha", "alpha") == 0


def test_strequal():
    assert strequal("lorem", "lorem") is T
    assert strequal("lorem", "ipsem") is None
    with pytest.raises(LispError):
        strequal(None, None)


def test_stringp():
    assert stringp("hello") == "hello"
    assert stringp(100) is None


def test_strlen():
    assert strlen("lorem") == 5
    with pytest.raises(LispError):
        strlen(5)


@pytest.mark.parametrize(
    "begin,end,expected",
    [
        (1, 5, "hello"),
        (7, 11, "world"),
        (-1, 5, "d"),
        (0, 15, None),
        (0, -1, None),
        (7, None, "world"),
        (7, 6, None),
        (20, None, None),
    ],
)
def test_substring(begin, end, expected):
    assert substring("hello world", begin, end) == expected


def test_substring_negative_range():
    assert substring("hello", -3, -1) == "llo"
    assert substring("hello", -1, -3) is None


def test_substring_type_errors():
    with pytest.raises(LispError):
        substring(1, 1, 2)
    with pytest.raises(LispError):
        substring("abc", "1", 2)
    with pytest.raises(LispError):
        substring("abc", 1, "2")


def test_symstr():
    sym = intern("symbol")
    assert symstr(sym) == sym.pname
    assert symstr(None) == "nil"
    with pytest.raises(LispError):
        symstr("symbol")