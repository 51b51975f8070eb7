"""Defines the Fallible type and its variants: success and failure.

A Fallible is returned by functions that can fail in a way the caller is expected
to handle.
Instead of raising an exception, such a function returns a failure value, and the
caller must deal with both cases to get a result out of it.

Example:
    .. code-block:: python

        from linqgarden.fallible import Fallible, validate

        def parse_age(text: str) -> Fallible[str, int]:
            if not text.isdigit():
                return Fallible.failure(f"not a number: {text!r}")
            return Fallible.success(int(text))

        message = (
            parse_age(user_input)
            .bind(lambda age: validate(age < 150, "too old"), lambda age, _: age)
            .fold(
                if_failure=lambda error: f"Invalid age: {error}",
                if_success=lambda age: f"Age is {age}",
            )
        )
"""

from ._fallible import Fallible, if_none_fail, is_failure_type, validate

__all__ = [
    "Fallible",
    "if_none_fail",
    "is_failure_type",
    "validate",
]
