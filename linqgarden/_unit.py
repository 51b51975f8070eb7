import attrs


@attrs.frozen(repr=False)
class Unit:
    """A value that carries no information.

    It is used where a value is required but none is meaningful, for example as
    the input of a function that takes no argument, or as the success value of a
    computation only performed for its side effects.

    All instances compare equal and share the same hash.
    """

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit()
