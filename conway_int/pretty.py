# conway_int/pretty.py
"""
Display helpers for surreal forms.

This does NOT feed back into any arithmetic. It only renders forms for
humans, in the set-builder style of the original construction:

    Empty        ->  {}
    Pair(l, r)   ->  {<l>, <r>}

so zero is ``{{}, {}}`` and one is ``{{{}, {}}, {}}``.

Usage:

    from conway_int import Surreal
    from conway_int.pretty import pretty_surreal, to_display_string

    print(to_display_string(Surreal(2).node))      # {{{{}, {}}, {}}, {}}
    print(pretty_surreal(Surreal(-1)))             # S:-1 {{}, {{}, {}}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .core.node import Node, fold

if TYPE_CHECKING:  # pragma: no cover
    from .core.surreal import Surreal

EMPTY_TOKEN = "{}"
ELLIPSIS = "…"


def to_display_string(node: Node, *, max_depth: Optional[int] = None) -> str:
    """
    Render a form in bracket notation.

    Parameters
    ----------
    node:
        Form to render.
    max_depth:
        If given, pairs nested deeper than this many levels render as
        ``…``. ``None`` renders the whole form.
    """
    if max_depth is None:
        return fold(node, lambda: EMPTY_TOKEN, lambda l, r: "{" + l + ", " + r + "}")

    # Depth-limited: walk top-down, emitting tokens in order.
    out: list[str] = []
    stack: list[tuple[object, int]] = [(node, 0)]
    while stack:
        item, level = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue
        if item.is_empty():
            out.append(EMPTY_TOKEN)
        elif level >= max_depth:
            out.append(ELLIPSIS)
        else:
            stack.append(("}", level))
            stack.append((item.right, level + 1))
            stack.append((", ", level))
            stack.append((item.left, level + 1))
            stack.append(("{", level))
    return "".join(out)


def pretty_surreal(value: "Surreal", *, max_depth: Optional[int] = 6) -> str:
    """Render ``S:<int> <form>``, with the form cut off at *max_depth*."""
    return f"S:{value.to_int()} {to_display_string(value.node, max_depth=max_depth)}"
