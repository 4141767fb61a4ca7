"""
Pytest configuration for conway-int tests.

Provides:
- Hypothesis configuration for deterministic fuzzing
- Step accounting fixture
"""

import os
import pytest

from hypothesis import settings

from conway_int.steps import steps

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - print_blob=True makes failures easy to reproduce
# - deadline=None: unary arithmetic is slow by construction
# - "ci" profile trades breadth for wall-clock time

settings.register_profile(
    "default",
    print_blob=True,
    derandomize=False,
    deadline=None,
)

settings.register_profile(
    "ci",
    print_blob=True,
    derandomize=True,
    deadline=None,
    max_examples=50,
)

# Load profile from HYPOTHESIS_PROFILE env var, default to "default"
profile = os.environ.get("HYPOTHESIS_PROFILE", "default")
settings.load_profile(profile)


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def step_counter():
    """
    Fresh, enabled step accounting for one test.

    Restores the previous enabled/disabled state afterwards so tests do
    not leak accounting into each other.
    """
    was_enabled = steps.is_enabled()
    steps.enable()
    steps.reset()
    yield steps
    steps.reset()
    if not was_enabled:
        steps.disable()

