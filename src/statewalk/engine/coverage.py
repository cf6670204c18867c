"""Coverage metrics for a walk against its model.

Both metrics are plain ratios scaled to 0-100:

- state coverage: unique states touched by the walk (as the start or end of
  any step) over the number of states in the states store.
- transition coverage: unique (start, action, end) triples in the walk over
  the number of transitions leaving states that have any.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from statewalk.core.model import AdjacencyModel
from statewalk.core.transition import State, TransitionRecord
from statewalk.core.walk import Walk
from statewalk.errors import NoValidTransitionsError

logger = logging.getLogger(__name__)


def valid_transitions(model: AdjacencyModel) -> list[TransitionRecord]:
    """All transitions of the model; dead-end states contribute nothing."""
    transitions: list[TransitionRecord] = []
    for state in model.iter_states():
        outgoing = model.outgoing(state)
        if not outgoing:
            continue
        transitions.extend(outgoing)
    return transitions


def walk_states(walk: Walk) -> list[State]:
    """Unique states touched by any step of the walk."""
    states: dict[State, None] = {}
    for transition in walk.transitions:
        states.setdefault(transition.start)
        states.setdefault(transition.end)
    return list(states)


def state_coverage(walk: Walk, states_store: Sequence[State]) -> float:
    """Percentage of the states store touched by the walk. 0 for an empty walk."""
    if len(walk) == 0:
        return 0.0
    touched = walk_states(walk)
    logger.debug("Walk states uniq: %s", touched)
    logger.debug("States store:     %s", list(states_store))
    return len(touched) / len(states_store) * 100


def transition_coverage(walk: Walk, model: AdjacencyModel) -> float:
    """Percentage of the model's valid transitions taken by the walk.

    Raises:
        NoValidTransitionsError: If the model has no transitions at all.
    """
    universe = valid_transitions(model)
    if not universe:
        raise NoValidTransitionsError(
            "Cannot compute transition coverage: model has no valid transitions",
        )
    taken = len(walk.transitions_uniq())
    logger.debug("Unique transitions in walk: %d of %d in model", taken, len(universe))
    return taken / len(universe) * 100


class CoverageCalculator:
    """Binds the coverage metrics to one model and its states store."""

    def __init__(self, model: AdjacencyModel, states_store: Sequence[State]) -> None:
        self.model = model
        self.states_store = states_store

    def valid_transitions(self) -> list[TransitionRecord]:
        return valid_transitions(self.model)

    def state_coverage(self, walk: Walk) -> float:
        return state_coverage(walk, self.states_store)

    def transition_coverage(self, walk: Walk) -> float:
        return transition_coverage(walk, self.model)

    def measure(self, walk: Walk) -> tuple[float, float]:
        """(state coverage, transition coverage) for a walk."""
        return self.state_coverage(walk), self.transition_coverage(walk)


__all__ = [
    "CoverageCalculator",
    "valid_transitions",
    "walk_states",
    "state_coverage",
    "transition_coverage",
]
