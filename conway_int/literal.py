# conway_int/literal.py
"""
Raw structural literals for surreal forms.

Two JSON-compatible encodings of the same form are accepted:

* list form:     []            -> Empty
                 [l, r]        -> Pair(l, r)
                 [[], []]      -> zero
                 [[[], []], []] -> one

* object form:   {}                        -> Empty
                 {"left": l, "right": r}   -> Pair(l, r)

Tuples are read like lists. Decoding only builds the form; whether it
is a well-formed chain is checked by ``Surreal``.
"""

from __future__ import annotations

import logging
from typing import Any

from conway_int.core.node import EMPTY, Node
from conway_int.errors import MalformedSurrealError

logger = logging.getLogger(__name__)

LIST_FORM = "list"
OBJECT_FORM = "object"

LITERAL_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$ref": "#/$defs/form",
    "$defs": {
        "form": {
            "type": "object",
            "oneOf": [
                {"maxProperties": 0},
                {
                    "required": ["left", "right"],
                    "additionalProperties": False,
                    "properties": {
                        "left": {"$ref": "#/$defs/form"},
                        "right": {"$ref": "#/$defs/form"},
                    },
                },
            ],
        },
    },
}


def _children(obj: Any) -> tuple[Any, ...]:
    """Children of one literal node: () for Empty, (l, r) for Pair."""
    if isinstance(obj, (list, tuple)):
        if len(obj) not in (0, 2):
            raise MalformedSurrealError(
                f"list literal must have 0 or 2 items, got {len(obj)}")
        return tuple(obj)
    if isinstance(obj, dict):
        if not obj:
            return ()
        if set(obj) != {"left", "right"}:
            raise MalformedSurrealError(
                f"object literal keys must be left/right, got {sorted(map(str, obj))}")
        return (obj["left"], obj["right"])
    raise MalformedSurrealError(f"not a form literal: {type(obj).__name__}")


def node_from_literal(obj: Any) -> Node:
    """Decode a list / object literal into a Node, without recursion."""
    if not _children(obj):
        return EMPTY
    built: dict[int, Node] = {}
    # expanded but not yet built: exactly the literals on the current path
    open_ids: set[int] = set()
    stack = [obj]
    while stack:
        cur = stack[-1]
        if id(cur) in built:
            stack.pop()
            continue
        kids = _children(cur)
        if not kids:
            built[id(cur)] = EMPTY
            stack.pop()
            continue
        pending = [k for k in kids if id(k) not in built]
        if pending:
            if any(id(k) in open_ids for k in pending):
                logger.debug("rejected cyclic literal")
                raise MalformedSurrealError("literal contains a cycle")
            open_ids.add(id(cur))
            stack.extend(pending)
            continue
        open_ids.discard(id(cur))
        stack.pop()
        built[id(cur)] = Node(built[id(kids[0])], built[id(kids[1])])
    return built[id(obj)]


def node_to_literal(node: Node, form: str = LIST_FORM) -> Any:
    """
    Encode a Node as a fresh list or object literal.

    Every occurrence of a sub-form gets its own container, even where the
    Node shares structure, so editing one branch never shows up in another.
    """
    if form == LIST_FORM:
        make_empty = list
        make_pair = lambda: [None, None]
        slots = (0, 1)
    elif form == OBJECT_FORM:
        make_empty = dict
        make_pair = lambda: {"left": None, "right": None}
        slots = ("left", "right")
    else:
        raise ValueError(f"unknown literal form: {form!r}")

    if node.is_empty():
        return make_empty()
    root = make_pair()
    # top-down, one container per visit; pairs are never memoised
    stack = [(node, root)]
    while stack:
        cur, out = stack.pop()
        for slot, child in zip(slots, cur.structure):
            if child.is_empty():
                out[slot] = make_empty()
            else:
                out[slot] = make_pair()
                stack.append((child, out[slot]))
    return root
