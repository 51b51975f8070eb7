"""Functional programming primitives: optional values, disjoint unions, fallible
results and composable functions.
"""

from ._exceptions import NoneValueError
from ._unit import UNIT, Unit
from .either import Either
from .fallible import Fallible, if_none_fail, is_failure_type, validate
from .functions import (
    FallibleFunction,
    Function,
    action,
    invoke,
    pipe,
    procedure,
    tee,
    then,
    thunk,
)
from .maybe import Maybe, none, some, to_maybe

__all__ = [
    "NoneValueError",
    "UNIT",
    "Unit",
    "Maybe",
    "some",
    "none",
    "to_maybe",
    "Either",
    "Fallible",
    "if_none_fail",
    "validate",
    "is_failure_type",
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
