"""
Surreal integers over Node chains.

The engine never does arithmetic with host integers. Sign comes from
comparing spine depths, order comes from racing two values toward zero,
and every operation above that is a bounded number of successor /
predecessor steps:

    successor(v)   = Pair(v, Empty)   if v >= 0   else right(v)
    predecessor(v) = Pair(Empty, v)   if v <= 0   else left(v)

Costs are deliberate and follow from the unary encoding:

    from_int(k)        O(|k|) steps
    a <= b             O(min(|a|, |b|)) steps
    a + b              O(|b|) steps
    a * b              O(|a| * |b|) steps
    a / b              O(|a|) additions of |b|

Values are immutable from the outside. ``increment`` / ``decrement``
rebind one instance to a new form and never touch shared structure, so
aliases made with ``Surreal(other)`` stay independent.
"""

from __future__ import annotations

import logging

from .. import steps as _steps
from ..config import display_max_depth
from ..errors import (
    DivideByZeroError,
    NotExactDivisionError,
    UnhandledComparisonError,
)
from ..literal import node_from_literal
from ..pretty import to_display_string
from .node import (
    EMPTY,
    ZERO_NODE,
    Node,
    check_chain,
    deeper,
    flip,
    pair,
)

logger = logging.getLogger(__name__)


class Surreal:
    """
    A signed integer encoded as a one-sided surreal chain.

    ``Surreal()`` is zero. ``Surreal(k)`` for an int builds k by unit
    steps. ``Surreal(other)`` aliases another value. A ``Node`` or a raw
    list / dict literal is accepted after validation as a chain.
    """

    __slots__ = ("_node",)

    def __init__(self, value=None):
        if value is None:
            self._node = ZERO_NODE
        elif isinstance(value, Surreal):
            self._node = value._node
        elif isinstance(value, bool):
            raise TypeError("Surreal() does not accept bool")
        elif isinstance(value, int):
            self._node = Surreal.from_int(value)._node
        elif isinstance(value, Node):
            self._node = check_chain(value)
        elif isinstance(value, (list, tuple, dict)):
            self._node = check_chain(node_from_literal(value))
        else:
            raise TypeError(
                f"cannot build Surreal from {type(value).__name__}")

    @classmethod
    def _wrap(cls, node: Node) -> "Surreal":
        # trusted path for forms the engine built itself
        s = cls.__new__(cls)
        s._node = node
        return s

    # ---------- construction ----------

    @classmethod
    def zero(cls) -> "Surreal":
        """On the first day, zero: both sides Empty."""
        return cls._wrap(ZERO_NODE)

    @classmethod
    def from_int(cls, k: int) -> "Surreal":
        """Build k from zero by |k| successor or predecessor steps."""
        if isinstance(k, bool) or not isinstance(k, int):
            raise TypeError(f"from_int expects int, got {type(k).__name__}")
        s = cls.zero()
        if k > 0:
            for _ in range(k):
                s.increment()
        elif k < 0:
            for _ in range(-k):
                s.decrement()
        return s

    @property
    def node(self) -> Node:
        return self._node

    def copy(self) -> "Surreal":
        return Surreal._wrap(self._node)

    # ---------- sign ----------

    def is_zero(self) -> bool:
        return self._node.left.is_empty() and self._node.right.is_empty()

    def is_positive(self) -> bool:
        return deeper(self._node.left, self._node.right)

    def is_negative(self) -> bool:
        return not self.is_positive() and not self.is_zero()

    # ---------- successor / predecessor ----------

    def successor(self) -> "Surreal":
        _steps.record(_steps.SUCCESSOR)
        if self.is_zero() or self.is_positive():
            return Surreal._wrap(pair(self._node, EMPTY))
        return Surreal._wrap(self._node.right)

    def predecessor(self) -> "Surreal":
        _steps.record(_steps.PREDECESSOR)
        if self.is_zero() or self.is_negative():
            return Surreal._wrap(pair(EMPTY, self._node))
        return Surreal._wrap(self._node.left)

    def increment(self) -> None:
        self._node = self.successor()._node

    def decrement(self) -> None:
        self._node = self.predecessor()._node

    def _step_toward_zero(self) -> None:
        if self.is_positive():
            self.decrement()
        else:
            self.increment()

    # ---------- comparisons ----------

    def less_or_equal(self, other: "Surreal") -> bool:
        first = Surreal(self)
        second = Surreal(other)
        if (first.is_negative() or first.is_zero()) and (second.is_positive() or second.is_zero()):
            return True
        elif (first.is_positive() or first.is_zero()) and (second.is_negative() or second.is_zero()):
            return False
        elif first.is_positive() and second.is_positive():
            # Race to the bottom.
            while not first.is_zero() and not second.is_zero():
                first.decrement()
                second.decrement()
            return first.is_zero()
        elif first.is_negative() and second.is_negative():
            # Race to the top.
            while not first.is_zero() and not second.is_zero():
                first.increment()
                second.increment()
            return second.is_zero()
        logger.debug("unhandled comparison: %r <= %r", self._node, other._node)
        raise UnhandledComparisonError("unhandled surreal comparison")

    def greater_or_equal(self, other: "Surreal") -> bool:
        return other.less_or_equal(self)

    def less_than(self, other: "Surreal") -> bool:
        return not self.greater_or_equal(other)

    def greater_than(self, other: "Surreal") -> bool:
        return not self.less_or_equal(other)

    def equal_to(self, other: "Surreal") -> bool:
        return self.less_or_equal(other) and self.greater_or_equal(other)

    # ---------- operations (all return new values) ----------

    def negate(self) -> "Surreal":
        return Surreal._wrap(flip(self._node))

    def absolute(self) -> "Surreal":
        return self.negate() if self.is_negative() else Surreal(self)

    def add(self, other: "Surreal") -> "Surreal":
        first = Surreal(self)
        second = Surreal(other)
        if second.is_positive():
            while not second.is_zero():
                first.increment()
                second.decrement()
        else:
            while not second.is_zero():
                first.decrement()
                second.increment()
        return first

    def subtract(self, other: "Surreal") -> "Surreal":
        return self.add(other.negate())

    def multiply(self, other: "Surreal") -> "Surreal":
        if self.is_zero() or other.is_zero():
            return Surreal.zero()
        second = Surreal(other)
        positive = second.is_positive()
        result = Surreal(self)
        second._step_toward_zero()
        while not second.is_zero():
            result = result.add(self)
            second._step_toward_zero()
        # result already carries our sign; only a negative multiplier flips it
        return result if positive else result.negate()

    def divide(self, other: "Surreal") -> "Surreal":
        """
        Exact quotient ``self / other``.

        Counts how many copies of |other| it takes to reach |self|. Raises
        DivideByZeroError for a zero divisor and NotExactDivisionError if
        the count overshoots. A zero dividend gives zero, even over zero.
        """
        count = Surreal.zero()
        if self.is_zero():
            return count
        if other.is_zero():
            logger.debug("divide by zero: %r / 0", self)
            raise DivideByZeroError("divide by zero")
        negate_result = self.is_positive() != other.is_positive()
        first = self.absolute()
        second = other.absolute()
        total = Surreal.zero()
        while first.greater_than(total):
            total = total.add(second)
            count.increment()
        if first.equal_to(total):
            return count.negate() if negate_result else count
        logger.debug("inexact division: %r / %r", self, other)
        raise NotExactDivisionError(f"{self!r} is not divisible by {other!r}")

    # ---------- conversions ----------

    def to_int(self) -> int:
        n = Surreal(self)
        i = 0
        if n.is_negative():
            while not n.is_zero():
                n.increment()
                i -= 1
        else:
            while not n.is_zero():
                n.decrement()
                i += 1
        return i

    def to_display_string(self, max_depth: int | None = None) -> str:
        if max_depth is None:
            max_depth = display_max_depth()
        return to_display_string(self._node, max_depth=max_depth)

    # ---------- Python protocol ----------

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.absolute()

    def __add__(self, other):
        if not isinstance(other, Surreal):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Surreal):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, Surreal):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, Surreal):
            return NotImplemented
        return self.divide(other)

    def __le__(self, other):
        if not isinstance(other, Surreal):
            return NotImplemented
        return self.less_or_equal(other)

    def __lt__(self, other):
        if not isinstance(other, Surreal):
            return NotImplemented
        return self.less_than(other)

    def __ge__(self, other):
        if not isinstance(other, Surreal):
            return NotImplemented
        return self.greater_or_equal(other)

    def __gt__(self, other):
        if not isinstance(other, Surreal):
            return NotImplemented
        return self.greater_than(other)

    def __eq__(self, other):
        if not isinstance(other, Surreal):
            return NotImplemented
        return self.equal_to(other)

    def __hash__(self):
        # chains are canonical, so equal values share one form
        return hash(self._node)

    def __bool__(self):
        return not self.is_zero()

    def __int__(self):
        return self.to_int()

    def __str__(self):
        return self.to_display_string()

    def __repr__(self):
        return f"Surreal({self.to_int()})"
