"""Helpers to use Maybe values together with iterables."""

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from .maybe import Maybe


def first_or_none[T](iterable: Iterable[T]) -> Maybe[T]:
    """Return the first element of an iterable, if any.

    At most one element is consumed from the iterable.
    A first element that is None gives an absent value.
    """

    for element in iterable:
        return Maybe.from_nullable(element)
    return Maybe.none()


def choose[T, M, R](
    iterable: Iterable[T],
    selector: Callable[[T], Maybe[M]],
    combine: Optional[Callable[[T, M], R]] = None,
) -> Iterator[R]:
    """Lazily map elements through a selector, dropping the absent results.

    If combine is given, it is called with each element and the payload the selector
    returned for it, and its result is yielded instead of the payload.

    Example:
        >>> list(choose(["1", "a", "3"], lambda s: Maybe.some(int(s)) if s.isdigit() else Maybe.none()))
        [1, 3]
    """

    for element in iterable:
        selected = selector(element)
        if combine is None:
            yield from selected
        else:
            for value in selected:
                yield combine(element, value)


def start_with[T](iterable: Iterable[T], first: T) -> Iterator[T]:
    yield first
    yield from iterable


def tap[T](iterable: Iterable[T], action: Callable[[T], Any]) -> Iterator[T]:
    """Lazily call action on each element as it is yielded."""

    for element in iterable:
        action(element)
        yield element


def consume(iterable: Iterable[Any]) -> None:
    """Iterate over an iterable, discarding its elements."""

    for _ in iterable:
        pass
