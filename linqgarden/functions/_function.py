from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Optional

import attrs

from .._exceptions import NoneValueError, with_note
from .._unit import UNIT, Unit
from ..fallible import Fallible
from ._composition import action, procedure, then, thunk

logger = logging.getLogger(__name__)


def _identity(value):
    return value


def _check_exception_type(exception_type) -> None:
    if exception_type is None:
        raise NoneValueError("exception_type can't be None")
    if not (isinstance(exception_type, type) and issubclass(exception_type, Exception)):
        raise TypeError(
            f"exception_type must be a subclass of Exception, got {exception_type!r}"
        )


@attrs.frozen
class _ExceptionHandler:
    exception_type: type[Exception]
    convert: Callable[[Any], Any]

    def matches(self, exception: Exception) -> bool:
        return isinstance(exception, self.exception_type)

    def map_failure(self, transform: Callable[[Any], Any]) -> _ExceptionHandler:
        return _ExceptionHandler(self.exception_type, then(self.convert, transform))


@attrs.frozen
class Function[In, Out]:
    """Wraps a function of one argument so that it can be composed.

    The main use is to turn a function that raises exceptions into a function that
    returns a :class:`linqgarden.fallible.Fallible`, with :meth:`catch`.

    Example:
        .. code-block:: python

            read = Function(Path.read_text).catch(FileNotFoundError)
            content = read.invoke(Path("config.toml"))  # Fallible[FileNotFoundError, str]
    """

    _func: Callable[[In], Out] = attrs.field()

    @_func.validator  # type: ignore
    def _func_validator(self, attribute, value):
        if value is None:
            raise NoneValueError("The wrapped function can't be None")
        if not callable(value):
            raise TypeError(f"The wrapped function must be callable, got {value!r}")

    @classmethod
    def from_thunk[T](cls, func: Callable[[], T]) -> Function[Unit, T]:
        """Wrap a function that takes no argument."""

        return Function(thunk(func))

    @classmethod
    def from_action(cls, func: Callable[[], Any]) -> Function[Unit, Unit]:
        """Wrap a function that is only called for its side effects.

        The wrapped function returns UNIT.
        """

        return Function(action(func))

    @classmethod
    def from_procedure[T](cls, func: Callable[[T], Any]) -> Function[T, Unit]:
        """Wrap a one-argument function that is only called for its side effects.

        The wrapped function returns UNIT instead of the result of func.
        Functions returning None must be wrapped this way before :meth:`catch`,
        since None can't be held by a success.

        Example:
            .. code-block:: python

                remove = Function.from_procedure(os.remove).catch(FileNotFoundError)
                remove.invoke(path)  # Fallible[FileNotFoundError, Unit]
        """

        return Function(procedure(func))

    def invoke(self, arg: In = UNIT) -> Out:  # type: ignore[reportArgumentType]
        return self._func(arg)

    def __call__(self, arg: In = UNIT) -> Out:  # type: ignore[reportArgumentType]
        return self.invoke(arg)

    def then[R](self, next_func: Callable[[Out], R]) -> Function[In, R]:
        return Function(then(self._func, next_func))

    def catch[E: Exception, F](
        self,
        exception_type: type[E],
        convert: Optional[Callable[[E], F]] = None,
    ) -> FallibleFunction[In, E | F, Out]:
        """Return a function that turns exceptions of a given type into failures.

        Args:
            exception_type: When an exception that is an instance of this type is
                raised by the wrapped function, it is caught and returned as a
                failure.
                Other exceptions are propagated.
            convert: If given, it is called with the caught exception and its result
                is used as the failure value instead of the exception itself.

        Raises:
            TypeError: If exception_type is not a subclass of Exception.
        """

        return FallibleFunction(self._func).catch(exception_type, convert)


@attrs.frozen
class FallibleFunction[In, F, S]:
    """A function that returns a Fallible instead of raising some exceptions.

    It is created by :meth:`Function.catch`.
    More exception types can be caught by calling :meth:`catch` again, each call
    widening the set of exceptions converted into failures.
    When an exception matches several of the caught types, the type that was
    registered first is used.

    Exceptions that are not instances of any caught type are propagated when the
    function is invoked.
    """

    _func: Callable[[In], S]
    _handlers: tuple[_ExceptionHandler, ...] = ()
    _success_transform: Callable[[Any], S] = _identity

    @property
    def caught_types(self) -> tuple[type[Exception], ...]:
        """The exception types converted into failures, in registration order."""

        return tuple(handler.exception_type for handler in self._handlers)

    def catch[E: Exception, G](
        self,
        exception_type: type[E],
        convert: Optional[Callable[[E], G]] = None,
    ) -> FallibleFunction[In, F | E | G, S]:
        """Return a new function that additionally catches the given exception type.

        Exception types caught previously keep their behaviour.
        """

        _check_exception_type(exception_type)
        handler = _ExceptionHandler(
            exception_type, convert if convert is not None else _identity
        )
        return attrs.evolve(self, handlers=(*self._handlers, handler))

    def map_failure[G](self, transform: Callable[[F], G]) -> FallibleFunction[In, G, S]:
        """Transform the failures produced by the exception types caught so far.

        Exception types caught afterwards are not affected.
        """

        return attrs.evolve(
            self,
            handlers=tuple(handler.map_failure(transform) for handler in self._handlers),
        )

    def map[T](self, transform: Callable[[S], T]) -> FallibleFunction[In, F, T]:
        """Transform the success value.

        Exceptions raised by transform are not caught.
        """

        return attrs.evolve(
            self, success_transform=then(self._success_transform, transform)
        )

    def invoke(self, arg: In = UNIT) -> Fallible[F, S]:  # type: ignore[reportArgumentType]
        """Call the wrapped function.

        Returns:
            A success holding the result of the wrapped function, or a failure if it
            raised an exception of a caught type.

        Raises:
            Any exception raised by the wrapped function that is not of a caught type.
            NoneValueError: If the wrapped function returns None.
        """

        try:
            result = self._func(arg)
        except self.caught_types as exception:
            handler = next(h for h in self._handlers if h.matches(exception))
            logger.debug(
                "Caught %s raised by %r, returning it as a failure",
                type(exception).__name__,
                self._func,
                exc_info=exception,
            )
            return Fallible.failure(handler.convert(exception))
        value = self._success_transform(result)
        if value is None:
            raise with_note(
                NoneValueError(f"{self._func!r} returned None, which can't be a success"),
                "Wrap functions called for their side effects with "
                "Function.from_procedure or Function.from_action",
            )
        return Fallible.success(value)

    def __call__(self, arg: In = UNIT) -> Fallible[F, S]:  # type: ignore[reportArgumentType]
        return self.invoke(arg)
