import pytest

from linqgarden import NoneValueError
from linqgarden.either import Either
from linqgarden.maybe import Maybe


def test_fold_left():
    either = Either.left("error")

    assert either.fold(lambda left: f"left {left}", lambda right: f"right {right}") == (
        "left error"
    )


def test_fold_right():
    either = Either.right(42)

    assert either.fold(lambda left: f"left {left}", lambda right: f"right {right}") == (
        "right 42"
    )


def test_get_left():
    assert Either.left("error").get_left() == Maybe.some("error")
    assert Either.left("error").get_right() == Maybe.none()


def test_get_right():
    assert Either.right(42).get_right() == Maybe.some(42)
    assert Either.right(42).get_left() == Maybe.none()


def test_discriminant():
    assert Either.left(1).is_left()
    assert not Either.left(1).is_right()
    assert Either.right(1).is_right()
    assert not Either.right(1).is_left()


def test_equality():
    assert Either.left(1) == Either.left(1)
    assert Either.right(1) == Either.right(1)
    assert Either.left(1) != Either.right(1)
    assert hash(Either.left(1)) == hash(Either.left(1))


@pytest.mark.parametrize("constructor", [Either.left, Either.right])
def test_none_payload_rejected(constructor):
    with pytest.raises(NoneValueError):
        constructor(None)


def test_repr():
    assert repr(Either.left("a")) == "Either.left('a')"
    assert repr(Either.right(1)) == "Either.right(1)"


def test_values_of_different_types_are_not_equal():
    assert Either.right(1) != Either.right(True)
    assert Either.left(1) != Either.left(1.0)
