from linqgarden.maybe import Maybe
from linqgarden.strings import join_strings, none_if_empty


def test_none_if_empty():
    assert none_if_empty("") == Maybe.none()
    assert none_if_empty(None) == Maybe.none()
    assert none_if_empty("abc") == Maybe.some("abc")


def test_join_strings():
    assert join_strings(["a", "b", "c"], ", ") == "a, b, c"
    assert join_strings([], ", ") == ""
