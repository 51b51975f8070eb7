import tblib.pickling_support


@tblib.pickling_support.install
class NoneValueError(ValueError):
    """Raised when None is passed where an actual value is required.

    None is never silently converted to an absent value.
    Use :meth:`linqgarden.maybe.Maybe.from_nullable` to explicitly turn a value
    that might be None into a :class:`linqgarden.maybe.Maybe`.
    """

    pass


def with_note[E: BaseException](exc: E, note: str) -> E:
    """Add a note to an exception."""

    exc.add_note(note)
    return exc
