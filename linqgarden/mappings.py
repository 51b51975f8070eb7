from collections.abc import Mapping

from .maybe import Maybe


def try_get_value[K, V](mapping: Mapping[K, V], key: K) -> Maybe[V]:
    """Return the value associated with a key, or an absent value if there is none.

    Raises:
        NoneValueError: If the key is associated with None.
    """

    try:
        value = mapping[key]
    except KeyError:
        return Maybe.none()
    return Maybe.some(value)
