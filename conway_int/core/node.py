"""
CONWAY-INT NODE CORE
====================
No numbers, only structure.
Empty        = Node()
Pair(l, r)   = Node(l, r)
Zero         = Node(Empty, Empty)
n + 1        = Node(n, Empty)     for n >= 0
n - 1        = Node(Empty, n)     for n <= 0

A well-formed value is a one-sided chain: positive integers grow down the
left side, negative integers down the right side, and the depth of the
chain is the magnitude.

Every walk here is iterative. Chains are as deep as the numbers they
encode, far past the interpreter recursion limit.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from ..errors import MalformedSurrealError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Node:
    """A form is either Empty (no children) or a Pair (left, right)."""

    __slots__ = ("structure", "_hash")

    def __init__(self, *structure):
        if len(structure) not in (0, 2):
            raise MalformedSurrealError(
                f"a form has 0 or 2 children, got {len(structure)}")
        for child in structure:
            if not isinstance(child, Node):
                raise TypeError(
                    f"form children must be Node, got {type(child).__name__}")
        self.structure = tuple(structure)
        # children are immutable, so the hash can be fixed now
        if structure:
            self._hash = hash((structure[0]._hash, structure[1]._hash))
        else:
            self._hash = hash(())

    # ---------- structural identity ----------

    def structurally_equal(self, other):
        if not isinstance(other, Node):
            return False
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b:
                continue
            if a._hash != b._hash or len(a.structure) != len(b.structure):
                return False
            stack.extend(zip(a.structure, b.structure))
        return True

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.structurally_equal(other)

    def __hash__(self):
        return self._hash

    def __repr__(self):
        return fold(self, lambda: "EMPTY", lambda l, r: f"Pair({l}, {r})")

    # ---------- primitive queries ----------

    def is_empty(self):
        return len(self.structure) == 0

    def is_pair(self):
        return len(self.structure) == 2

    @property
    def left(self):
        return self.structure[0] if self.structure else None

    @property
    def right(self):
        return self.structure[1] if self.structure else None


# ---------- constructor and primitives ----------


def pair(left: Node, right: Node) -> Node:
    """Build Pair(left, right)."""
    return Node(left, right)


EMPTY = Node()
ZERO_NODE = pair(EMPTY, EMPTY)


def depth(side: Node) -> int:
    """Number of left links from *side* down to Empty."""
    n = 0
    cur = side
    while cur.is_pair():
        n += 1
        cur = cur.left
    return n


def deeper(a: Node, b: Node) -> bool:
    """
    True iff ``depth(a) > depth(b)``.

    Both left spines are walked in lockstep and the walk stops as soon as
    the shorter one runs out, so comparing a long chain against Empty is
    a single step.
    """
    while a.is_pair() and b.is_pair():
        a = a.left
        b = b.left
    return a.is_pair()


def is_zero_node(node: Node) -> bool:
    return node.is_pair() and node.left.is_empty() and node.right.is_empty()


def chain_problem(node: Node) -> str | None:
    """
    Describe why *node* is not a well-formed value, or return None.

    Well-formed means: a Pair that is zero, or a pure left chain ending at
    zero, or a pure right chain ending at zero.
    """
    if not isinstance(node, Node):
        return f"expected Node, got {type(node).__name__}"
    if node.is_empty():
        return "Empty is a marker, not a value"
    direction = None
    cur = node
    level = 0
    while not is_zero_node(cur):
        left, right = cur.structure
        if left.is_pair() and right.is_empty():
            side = "left"
            nxt = left
        elif right.is_pair() and left.is_empty():
            side = "right"
            nxt = right
        else:
            return f"level {level} branches on both sides"
        if direction is None:
            direction = side
        elif side != direction:
            return f"level {level} turns from {direction} to {side}"
        cur = nxt
        level += 1
    return None


def is_chain(node: Node) -> bool:
    """True iff *node* is a well-formed single-branch chain."""
    return chain_problem(node) is None


def check_chain(node: Node) -> Node:
    """Return *node* unchanged, or raise MalformedSurrealError."""
    problem = chain_problem(node)
    if problem is not None:
        logger.debug("rejected malformed form: %s", problem)
        raise MalformedSurrealError(f"not a surreal integer chain: {problem}")
    return node


# ---------- structural folds ----------


def fold(
    node: Node,
    on_empty: Callable[[], T],
    on_pair: Callable[[T, T], T],
) -> T:
    """
    Bottom-up fold over a form, without recursion.

    ``on_empty()`` is called afresh for every Empty leaf; ``on_pair`` gets
    the folded left and right children. Shared sub-forms are folded once.
    """
    if node.is_empty():
        return on_empty()
    done: dict[int, T] = {}

    def result(child: Node) -> T:
        return on_empty() if child.is_empty() else done[id(child)]

    stack = [node]
    while stack:
        cur = stack[-1]
        if id(cur) in done:
            stack.pop()
            continue
        pending = [c for c in cur.structure if c.is_pair() and id(c) not in done]
        if pending:
            stack.extend(pending)
            continue
        stack.pop()
        done[id(cur)] = on_pair(result(cur.left), result(cur.right))
    return done[id(node)]


def flip(node: Node) -> Node:
    """Swap left and right at every level: the sign flip behind negation."""
    return fold(node, lambda: EMPTY, lambda l, r: Node(r, l))
