"""Walk generation and coverage measurement."""

from statewalk.engine.coverage import (
    CoverageCalculator,
    state_coverage,
    transition_coverage,
    valid_transitions,
    walk_states,
)
from statewalk.engine.walker import MIN_STEP_LIMIT, WalkEngine

__all__ = [
    "CoverageCalculator",
    "state_coverage",
    "transition_coverage",
    "valid_transitions",
    "walk_states",
    "MIN_STEP_LIMIT",
    "WalkEngine",
]
