"""Defines the Maybe type, representing zero or one value.

A Maybe is used in place of None to indicate that a value might be missing, in a
way that forces the calling code to deal with the missing case.

Example:
    .. code-block:: python

        from linqgarden.maybe import Maybe

        def find_user(name: str) -> Maybe[User]:
            return Maybe.from_nullable(users.get(name))

        greeting = find_user("alice").map(lambda user: user.nickname).fold(
            if_none=lambda: "Hello, stranger",
            if_some=lambda nickname: f"Hello, {nickname}",
        )
"""

from ._maybe import Maybe, none, some, to_maybe

__all__ = [
    "Maybe",
    "none",
    "some",
    "to_maybe",
]
