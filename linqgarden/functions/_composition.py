from collections.abc import Callable
from typing import Any

from .._exceptions import NoneValueError
from .._unit import UNIT, Unit


def _check_callable(func, name: str) -> None:
    if func is None:
        raise NoneValueError(f"{name} can't be None")
    if not callable(func):
        raise TypeError(f"{name} must be callable, got {func!r}")


def pipe[T, R](value: T, func: Callable[[T], R]) -> R:
    """Apply a function to a value.

    Raises:
        NoneValueError: If func is None.
        TypeError: If func is not callable.
    """

    _check_callable(func, "func")
    return func(value)


def then[T, M, R](first: Callable[[T], M], second: Callable[[M], R]) -> Callable[[T], R]:
    """Compose two functions, the result of the first one being passed to the second.

    Raises:
        NoneValueError: If one of the functions is None.
        TypeError: If one of the functions is not callable.
    """

    _check_callable(first, "first")
    _check_callable(second, "second")

    def composed(value: T) -> R:
        return second(first(value))

    return composed


def tee[T](value: T, action: Callable[[T], Any]) -> T:
    """Call action with the value, then return the value unchanged."""

    action(value)
    return value


def thunk[T](func: Callable[[], T]) -> Callable[[Unit], T]:
    """Convert a function without argument into a function taking UNIT."""

    _check_callable(func, "func")

    def wrapped(_: Unit) -> T:
        return func()

    return wrapped


def action(func: Callable[[], Any]) -> Callable[[Unit], Unit]:
    """Convert a function called for its side effects into a function UNIT -> UNIT.

    Whatever func returns is discarded.
    """

    _check_callable(func, "func")

    def wrapped(_: Unit) -> Unit:
        func()
        return UNIT

    return wrapped


def procedure[T](func: Callable[[T], Any]) -> Callable[[T], Unit]:
    """Convert a one-argument function called for its side effects into T -> UNIT.

    Whatever func returns is discarded, so a function returning None can be used
    where a value is required.
    """

    _check_callable(func, "func")

    def wrapped(value: T) -> Unit:
        func(value)
        return UNIT

    return wrapped


def invoke[T](func: Callable[[Unit], T]) -> T:
    return func(UNIT)
