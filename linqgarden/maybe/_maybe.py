from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Optional

import attrs

from .._exceptions import NoneValueError

if TYPE_CHECKING:
    from ..fallible import Fallible


@attrs.frozen(repr=False, eq=False)
class Maybe[T]:
    """Zero or one value.

    An instance is either absent (it holds no value) or present (it holds a value
    that is not None).

    Instances should be created with :meth:`some`, :meth:`none` or
    :meth:`from_nullable`.
    Calling ``Maybe()`` without arguments gives an absent value.

    The payload of a present value can only be read through :meth:`fold` or one of
    the methods built on top of it, which forces the caller to deal with the absent
    case.

    Two instances are equal if they are both absent, or if they are both present
    with payloads of the same type that compare equal.
    """

    _has_value: bool = False
    _value: Optional[T] = attrs.field(default=None)

    @_value.validator  # type: ignore
    def _value_validator(self, attribute, value):
        if self._has_value and value is None:
            raise NoneValueError("A present Maybe can't hold None")
        if not self._has_value and value is not None:
            raise ValueError(f"An absent Maybe can't hold a value, got {value!r}")

    @classmethod
    def some(cls, value: T) -> Maybe[T]:
        """Return a present value.

        Raises:
            NoneValueError: If value is None.
        """

        if value is None:
            raise NoneValueError("Can't construct a present Maybe from None")
        return cls(True, value)

    @classmethod
    def none(cls) -> Maybe[T]:
        """Return an absent value."""

        return cls()

    @classmethod
    def from_nullable(cls, value: Optional[T]) -> Maybe[T]:
        """Return an absent value if value is None, a present value otherwise."""

        if value is None:
            return cls.none()
        return cls.some(value)

    def fold[R](self, if_none: Callable[[], R], if_some: Callable[[T], R]) -> R:
        """Consume the value by calling exactly one of the two handlers.

        Args:
            if_none: Called without arguments if the value is absent.
            if_some: Called with the payload if the value is present.

        Returns:
            The result of the handler that was called.
        """

        if self._has_value:
            return if_some(self._value)  # type: ignore[reportArgumentType]
        else:
            return if_none()

    def is_some(self) -> bool:
        return self._has_value

    def is_none(self) -> bool:
        return not self._has_value

    def map[U](self, transform: Callable[[T], U]) -> Maybe[U]:
        """Apply a transformation to the payload, if any.

        The transformation is only called when the value is present.
        """

        return self.fold(Maybe.none, lambda value: Maybe.some(transform(value)))

    def bind[U, V](
        self,
        transform: Callable[[T], Maybe[U]],
        combine: Optional[Callable[[T, U], V]] = None,
    ) -> Maybe[V]:
        """Chain a computation that can itself give an absent value.

        If this value is absent, the result is absent and neither transform nor
        combine are called.
        If transform returns an absent value, the result is absent and combine is
        not called.
        Otherwise, combine is called with the payload of this value and the payload
        returned by transform, and its result is wrapped into a present value.

        If combine is not given, the value returned by transform is the result.
        """

        if combine is None:
            return self.fold(Maybe.none, transform)  # type: ignore[reportReturnType]

        def bind_value(value: T) -> Maybe[V]:
            return transform(value).fold(
                Maybe.none, lambda middle: Maybe.some(combine(value, middle))
            )

        return self.fold(Maybe.none, bind_value)

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Return an absent value if the payload doesn't satisfy the predicate."""

        return self.bind(lambda value: self if predicate(value) else Maybe.none())

    def value_or[D](self, default: D) -> T | D:
        return self.fold(lambda: default, lambda value: value)

    def value_or_none(self) -> Optional[T]:
        return self.value_or(None)

    def value_or_type_default(self, type_: Callable[[], T]) -> T:
        """Return the payload, or the zero value of a type if absent.

        The zero value is obtained by calling the type without argument, for example
        ``0`` for ``int`` or ``""`` for ``str``.
        """

        return self.fold(type_, lambda value: value)

    def to_sequence(self) -> Iterable[T]:
        """Return an iterable that yields the payload, if any.

        The iterable can be iterated over multiple times.
        """

        return self

    def __iter__(self) -> Iterator[T]:
        if self._has_value:
            yield self._value  # type: ignore[reportReturnType]

    def on_some(self, action: Callable[[T], Any]) -> Maybe[T]:
        """Call action with the payload if the value is present, then return self."""

        if self._has_value:
            action(self._value)  # type: ignore[reportArgumentType]
        return self

    def on_none(self, action: Callable[[], Any]) -> Maybe[T]:
        """Call action if the value is absent, then return self."""

        if not self._has_value:
            action()
        return self

    def if_none_fail[F](self, failure_value: F) -> Fallible[F, T]:
        """Convert to a success if present, or to the given failure if absent."""

        from ..fallible import if_none_fail

        return if_none_fail(self, failure_value)

    def _comparison_tuple(self) -> tuple[bool, type, Optional[T]]:
        return self._has_value, type(self._value), self._value

    def __eq__(self, other):
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._comparison_tuple() == other._comparison_tuple()

    def __hash__(self):
        return hash(self._comparison_tuple())

    def __repr__(self) -> str:
        return self.fold(
            lambda: f"{type(self).__name__}.none()",
            lambda value: f"{type(self).__name__}.some({value!r})",
        )


def some[T](value: T) -> Maybe[T]:
    """Return a present value.

    Raises:
        NoneValueError: If value is None.
    """

    return Maybe.some(value)


def none() -> Maybe[Any]:
    """Return an absent value."""

    return Maybe.none()


def to_maybe[T](value: Optional[T]) -> Maybe[T]:
    """Convert a value that might be None into a Maybe."""

    return Maybe.from_nullable(value)
