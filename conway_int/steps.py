"""
Primitive Step Accounting for conway_int

Counts how many successor / predecessor steps the engine takes. Every
arithmetic operation is a bounded number of these two primitives, so the
counts make the cost of an operation observable.

Usage:
    from conway_int.steps import steps

    steps.enable()
    steps.reset()

    Surreal(3) + Surreal(4)

    assert steps.total() == 3 + 4 + 2 * 4
    print(steps.report())

Set CONWAY_INT_STEP_COUNT=1 to enable accounting at import time.
"""

from __future__ import annotations

from collections import Counter

from .config import STEP_COUNT_ENABLED

SUCCESSOR = "successor"
PREDECESSOR = "predecessor"

# Global accounting state
_enabled = STEP_COUNT_ENABLED
_counts: Counter[str] = Counter()


def enable():
    """Enable step accounting."""
    global _enabled
    _enabled = True


def disable():
    """Disable step accounting."""
    global _enabled
    _enabled = False


def reset():
    """Reset all counts."""
    global _counts
    _counts = Counter()


def is_enabled() -> bool:
    """Check if step accounting is enabled."""
    return _enabled


def record(kind: str):
    """Record one primitive step of the given kind."""
    if _enabled:
        _counts[kind] += 1


def count(kind: str) -> int:
    """Number of steps of one kind since the last reset."""
    return _counts[kind]


def total() -> int:
    """Number of primitive steps of any kind since the last reset."""
    return sum(_counts.values())


def report() -> str:
    """Generate a human-readable step report."""
    lines = [
        "=" * 40,
        "       Primitive Step Report",
        "=" * 40,
        "",
        f"Successor steps:    {count(SUCCESSOR)}",
        f"Predecessor steps:  {count(PREDECESSOR)}",
        f"Total steps:        {total()}",
        "",
        "=" * 40,
    ]
    return "\n".join(lines)


def report_json() -> dict:
    """Generate a JSON-serializable step report."""
    return {
        "enabled": _enabled,
        "successor": count(SUCCESSOR),
        "predecessor": count(PREDECESSOR),
        "total": total(),
    }


# Convenience object for import
class _Steps:
    enable = staticmethod(enable)
    disable = staticmethod(disable)
    reset = staticmethod(reset)
    is_enabled = staticmethod(is_enabled)
    record = staticmethod(record)
    count = staticmethod(count)
    total = staticmethod(total)
    report = staticmethod(report)
    report_json = staticmethod(report_json)


steps = _Steps()
