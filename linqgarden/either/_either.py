from __future__ import annotations

from collections.abc import Callable
from typing import Any

import attrs

from .._exceptions import NoneValueError
from ..maybe import Maybe


@attrs.frozen(repr=False, eq=False)
class Either[L, R]:
    """Exactly one of two values, either a left value or a right value.

    Instances must be created with :meth:`left` or :meth:`right`.
    Two instances are equal if they are on the same side and hold values of the
    same type that compare equal.
    The value can only be consumed with :meth:`fold`, which requires a handler for
    each side.
    """

    _is_right: bool
    _value: Any = attrs.field()

    @_value.validator  # type: ignore
    def _value_validator(self, attribute, value):
        if value is None:
            side = "right" if self._is_right else "left"
            raise NoneValueError(f"The {side} value of an Either can't be None")

    @classmethod
    def left(cls, value: L) -> Either[L, R]:
        return cls(False, value)

    @classmethod
    def right(cls, value: R) -> Either[L, R]:
        return cls(True, value)

    def fold[T](self, if_left: Callable[[L], T], if_right: Callable[[R], T]) -> T:
        """Consume the value by calling the handler of the side that is set."""

        if self._is_right:
            return if_right(self._value)
        else:
            return if_left(self._value)

    def is_left(self) -> bool:
        return not self._is_right

    def is_right(self) -> bool:
        return self._is_right

    def get_left(self) -> Maybe[L]:
        return self.fold(Maybe.some, lambda _: Maybe.none())

    def get_right(self) -> Maybe[R]:
        return self.fold(lambda _: Maybe.none(), Maybe.some)

    def _comparison_tuple(self) -> tuple[bool, type, Any]:
        return self._is_right, type(self._value), self._value

    def __eq__(self, other):
        if not isinstance(other, Either):
            return NotImplemented
        return self._comparison_tuple() == other._comparison_tuple()

    def __hash__(self):
        return hash(self._comparison_tuple())

    def __repr__(self) -> str:
        return self.fold(
            lambda value: f"{type(self).__name__}.left({value!r})",
            lambda value: f"{type(self).__name__}.right({value!r})",
        )
