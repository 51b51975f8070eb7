from __future__ import annotations

from collections.abc import Callable
from typing import Any, Never, Optional

import attrs
from typing_extensions import TypeIs

from .._exceptions import with_note
from .._unit import UNIT, Unit
from ..either import Either
from ..maybe import Maybe


@attrs.frozen(repr=False)
class Fallible[F, S]:
    """The outcome of an operation that can either fail or succeed.

    A fallible holds either a failure value of type F or a success value of type S.
    Failures are plain values: they are carried along :meth:`map` and :meth:`bind`
    chains and never raised.

    Instances must be created with :meth:`failure` or :meth:`success`.
    """

    _data: Either[F, S] = attrs.field(
        validator=attrs.validators.instance_of(Either)
    )

    @classmethod
    def failure(cls, value: F) -> Fallible[F, S]:
        return cls(Either.left(value))

    @classmethod
    def success(cls, value: S) -> Fallible[F, S]:
        return cls(Either.right(value))

    def fold[T](
        self, if_failure: Callable[[F], T], if_success: Callable[[S], T]
    ) -> T:
        return self._data.fold(if_failure, if_success)

    def is_failure(self) -> bool:
        return self._data.is_left()

    def is_success(self) -> bool:
        return self._data.is_right()

    def get_failure(self) -> Maybe[F]:
        return self._data.get_left()

    def get_success(self) -> Maybe[S]:
        return self._data.get_right()

    def map[T](self, transform: Callable[[S], T]) -> Fallible[F, T]:
        """Apply a transformation to the success value.

        A failure is returned unchanged and the transformation is not called.
        """

        return self.fold(
            Fallible.failure, lambda value: Fallible.success(transform(value))
        )

    def bind[M, T](
        self,
        transform: Callable[[S], Fallible[F, M]],
        combine: Optional[Callable[[S, M], T]] = None,
    ) -> Fallible[F, T]:
        """Chain an operation that can itself fail.

        If this is a failure, it is propagated and neither transform nor combine are
        called.
        If transform returns a failure, this failure is propagated and combine is not
        called.
        Otherwise, combine is called with this success value and the success value
        returned by transform, and its result is wrapped into a success.

        If combine is not given, the fallible returned by transform is the result.

        Example:
            >>> Fallible.success(42).bind(
            ...     lambda x: Fallible.success(x + 1), lambda x, y: x + y
            ... )
            Fallible.success(85)
        """

        if combine is None:
            return self.fold(Fallible.failure, transform)  # type: ignore[reportReturnType]

        def bind_value(value: S) -> Fallible[F, T]:
            return transform(value).fold(
                Fallible.failure,
                lambda middle: Fallible.success(combine(value, middle)),
            )

        return self.fold(Fallible.failure, bind_value)

    def map_failure[G](self, transform: Callable[[F], G]) -> Fallible[G, S]:
        """Apply a transformation to the failure value.

        A success is returned unchanged and the transformation is not called.
        """

        return self.fold(
            lambda failure: Fallible.failure(transform(failure)), Fallible.success
        )

    def on_failure(self, action: Callable[[F], Any]) -> Fallible[F, S]:
        self.fold(action, lambda _: None)
        return self

    def on_success(self, action: Callable[[S], Any]) -> Fallible[F, S]:
        self.fold(lambda _: None, action)
        return self

    def success_or[D](self, default: D) -> S | D:
        return self.fold(lambda _: default, lambda value: value)

    def unwrap_or_raise(self, on_failure: Callable[[F], BaseException]) -> S:
        """Return the success value, or raise the exception built from the failure.

        This is meant for the places where the caller has decided that a failure is
        fatal.
        The failure value is added as a note to the raised exception.
        """

        def raise_failure(failure: F) -> Never:
            raise with_note(on_failure(failure), f"Failure value: {failure!r}")

        return self.fold(raise_failure, lambda value: value)

    def unwrap(self) -> S:
        """Return the success value, or raise the failure.

        Raises:
            The failure value itself if it is an exception.
            ValueError: If the failure value is not an exception.
        """

        def raise_failure(failure: F) -> Never:
            if not isinstance(failure, BaseException):
                raise ValueError(
                    f"Only exceptions can be unwrapped, got failure {failure!r}"
                )
            raise failure

        return self.fold(raise_failure, lambda value: value)

    def __repr__(self) -> str:
        return self.fold(
            lambda value: f"{type(self).__name__}.failure({value!r})",
            lambda value: f"{type(self).__name__}.success({value!r})",
        )


def if_none_fail[F, S](maybe: Maybe[S], failure_value: F) -> Fallible[F, S]:
    """Convert a present value to a success and an absent value to a failure."""

    return maybe.fold(
        lambda: Fallible.failure(failure_value), lambda value: Fallible.success(value)
    )


def validate[F](condition: bool, failure_value: F) -> Fallible[F, Unit]:
    """Return a success holding UNIT if condition is true, a failure otherwise.

    This is meant to be used as a guard inside a chain of :meth:`Fallible.bind`
    calls.

    Example:
        >>> Fallible.success(-1).bind(lambda x: validate(x >= 0, "negative"))
        Fallible.failure('negative')
    """

    if condition:
        return Fallible.success(UNIT)
    else:
        return Fallible.failure(failure_value)


def is_failure_type[E](
    fallible: Fallible[Any, Any], error_type: type[E]
) -> TypeIs[Fallible[E, Any]]:
    """Check if a fallible is a failure holding a value of the given type."""

    return fallible.fold(
        lambda failure: isinstance(failure, error_type), lambda _: False
    )
