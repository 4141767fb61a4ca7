# conway_int/errors.py
"""
Failure kinds raised by the surreal value engine.

All of them derive from :class:`SurrealError`, and each one also derives
from the closest builtin so callers can catch either.
"""

from __future__ import annotations


class SurrealError(Exception):
    """Base class for every error raised by conway_int."""
    pass


class DivideByZeroError(SurrealError, ZeroDivisionError):
    """The divisor of ``divide`` is zero."""
    pass


class NotExactDivisionError(SurrealError, ArithmeticError):
    """The quotient is not a whole number; there is no fractional form."""
    pass


class UnhandledComparisonError(SurrealError, AssertionError):
    """
    ``less_or_equal`` fell through its sign case analysis.

    Unreachable for well-formed values. Seeing it means a form that is
    not a chain got past validation.
    """
    pass


class MalformedSurrealError(SurrealError, ValueError):
    """A raw structural literal is not a well-formed single-branch chain."""
    pass
