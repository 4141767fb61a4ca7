# conway_int/core/numbers.py
"""
Function-style helpers over Surreal.

These are separated from conway_int.__init__ so that other modules
(tests, examples) can import them without circular imports.
"""

from __future__ import annotations

from .surreal import Surreal


def num(k: int) -> Surreal:
    """Build integer k as a one-sided chain."""
    return Surreal.from_int(k)


def zero() -> Surreal:
    """Canonical zero alias used in tests and examples."""
    return Surreal.zero()


def succ(s: Surreal) -> Surreal:
    return s.successor()


def pred(s: Surreal) -> Surreal:
    return s.predecessor()


def neg(s: Surreal) -> Surreal:
    return s.negate()


def add(a: Surreal, b: Surreal) -> Surreal:
    return a.add(b)


def sub(a: Surreal, b: Surreal) -> Surreal:
    return a.subtract(b)


def mul(a: Surreal, b: Surreal) -> Surreal:
    return a.multiply(b)


def div(a: Surreal, b: Surreal) -> Surreal:
    """Exact division; raises on a zero divisor or a remainder."""
    return a.divide(b)


def surreal_to_int(s: Surreal) -> int | None:
    """
    Interpret a value as a host integer.

    Returns:
        int   if *s* is a Surreal
        None  otherwise
    """
    if not isinstance(s, Surreal):
        return None
    return s.to_int()
