"""Utilities to compose functions and to turn exceptions into failures."""

from ._composition import action, invoke, pipe, procedure, tee, then, thunk
from ._function import FallibleFunction, Function

__all__ = [
    "pipe",
    "then",
    "tee",
    "thunk",
    "action",
    "procedure",
    "invoke",
    "Function",
    "FallibleFunction",
]
