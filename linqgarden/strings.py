from collections.abc import Iterable
from typing import Optional

from .maybe import Maybe


def none_if_empty(text: Optional[str]) -> Maybe[str]:
    """Return an absent value if text is None or empty."""

    if not text:
        return Maybe.none()
    return Maybe.some(text)


def join_strings(strings: Iterable[str], separator: str) -> str:
    return separator.join(strings)
