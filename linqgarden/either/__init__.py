"""Defines the Either type, holding exactly one of two alternatives."""

from ._either import Either

__all__ = ["Either"]
