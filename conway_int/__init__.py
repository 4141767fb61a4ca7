# conway_int/__init__.py
"""
conway-int public API surface — minimal, test-proof, docs-aligned.

This module exposes a small, coherent core:

    - Forms: Node, EMPTY, ZERO_NODE, pair, depth, is_chain
    - Values: Surreal (construction, sign, racing comparison, arithmetic)
    - Numbers: num, zero, succ, pred, neg, add, sub, mul, div, surreal_to_int
    - Literals: node_from_literal, node_to_literal, LITERAL_SCHEMA
    - Display: to_display_string, pretty_surreal
    - Errors: SurrealError and its four failure kinds
    - Tooling: benchmark_operation (step accounting lives in conway_int.steps)
"""

from __future__ import annotations

from .core.node import Node, EMPTY, ZERO_NODE, pair, depth, is_chain

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

from .errors import (
    SurrealError,
    DivideByZeroError,
    NotExactDivisionError,
    UnhandledComparisonError,
    MalformedSurrealError,
)

# ---------------------------------------------------------------------------
# Values and number helpers
# ---------------------------------------------------------------------------

from .core.surreal import Surreal
from .core.numbers import (
    num,
    zero,
    succ,
    pred,
    neg,
    add,
    sub,
    mul,
    div,
    surreal_to_int,
)

# ---------------------------------------------------------------------------
# Literals / display / tooling
# ---------------------------------------------------------------------------

from .literal import node_from_literal, node_to_literal, LITERAL_SCHEMA
from .pretty import to_display_string, pretty_surreal
from .bench import benchmark_operation

__version__ = "0.1.0"

__all__ = [
    # forms
    "Node",
    "EMPTY",
    "ZERO_NODE",
    "pair",
    "depth",
    "is_chain",

    # errors
    "SurrealError",
    "DivideByZeroError",
    "NotExactDivisionError",
    "UnhandledComparisonError",
    "MalformedSurrealError",

    # values
    "Surreal",

    # numbers
    "num",
    "zero",
    "succ",
    "pred",
    "neg",
    "add",
    "sub",
    "mul",
    "div",
    "surreal_to_int",

    # literals
    "node_from_literal",
    "node_to_literal",
    "LITERAL_SCHEMA",

    # display
    "to_display_string",
    "pretty_surreal",

    # tooling
    "benchmark_operation",
]
