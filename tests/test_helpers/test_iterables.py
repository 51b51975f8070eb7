from collections.abc import Iterator

from linqgarden.iterables import choose, consume, first_or_none, start_with, tap
from linqgarden.maybe import Maybe


def parse_int(text: str) -> Maybe[int]:
    if text.isdigit():
        return Maybe.some(int(text))
    return Maybe.none()


def test_first_or_none():
    assert first_or_none([1, 2, 3]) == Maybe.some(1)
    assert first_or_none([]) == Maybe.none()


def test_first_or_none_consumes_one_element():
    iterator = iter([1, 2, 3])

    first_or_none(iterator)

    assert list(iterator) == [2, 3]


def test_choose():
    assert list(choose(["1", "a", "3"], parse_int)) == [1, 3]


def test_choose_with_combine():
    result = choose(["1", "a", "3"], parse_int, lambda text, value: (text, value))

    assert list(result) == [("1", 1), ("3", 3)]


def test_choose_is_lazy():
    calls = []

    def selector(text):
        calls.append(text)
        return parse_int(text)

    result = choose(["1", "2"], selector)

    assert isinstance(result, Iterator)
    assert calls == []
    assert next(result) == 1
    assert calls == ["1"]


def test_start_with():
    assert list(start_with([2, 3], 1)) == [1, 2, 3]


def test_tap():
    seen = []

    result = tap([1, 2], seen.append)

    assert seen == []
    assert list(result) == [1, 2]
    assert seen == [1, 2]


def test_consume():
    seen = []

    consume(tap([1, 2], seen.append))

    assert seen == [1, 2]


def test_first_or_none_with_none_first_element():
    assert first_or_none([None, 1]) == Maybe.none()
