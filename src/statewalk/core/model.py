"""AdjacencyModel - state to outgoing transitions mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from statewalk.core.transition import ActionName, State, TransitionRecord

logger = logging.getLogger(__name__)


class AdjacencyModel:
    """Maps each known state to its ordered list of outgoing transitions.

    The model keeps two invariants:
    - Every state that appears as the start or end of a transition is a key.
      States with no outgoing transitions map to an empty list (dead ends).
    - Outgoing transitions keep insertion order. That order is the tie-break
      order for action dispatch and the index space for random choice.

    Example::

        model = AdjacencyModel.from_transitions([
            TransitionRecord("STATEA", "action1", "STATEB"),
            TransitionRecord("STATEB", "action2", "STATEA"),
        ])
        model.actions_for_state("STATEA")  # ["action1"]
    """

    def __init__(self) -> None:
        self._adjacency: dict[State, list[TransitionRecord]] = {}

    @classmethod
    def from_transitions(cls, transitions: Iterable[TransitionRecord]) -> AdjacencyModel:
        """Build a model from a raw transition list, collapsing duplicates.

        Duplicate records (same start, action and end) are common in
        hand-authored tables, so they are only noted at debug level.
        """
        raw = list(transitions)
        unique = list(dict.fromkeys(raw))
        if len(unique) < len(raw):
            logger.debug(
                "Probable duplicate entries in transition list: %d dropped",
                len(raw) - len(unique),
            )

        model = cls()
        for transition in unique:
            model.add_state(transition.start)
            model.add_state(transition.end)
        for transition in unique:
            model._adjacency[transition.start].append(transition)
        return model

    def add_state(self, state: State) -> None:
        """Register a state with no outgoing transitions (if not already known)."""
        self._adjacency.setdefault(state, [])

    def add_transition(self, transition: TransitionRecord) -> bool:
        """Append a transition, registering both endpoints.

        Returns:
            True if the transition was added, False if it was a duplicate.
        """
        self.add_state(transition.start)
        self.add_state(transition.end)
        outgoing = self._adjacency[transition.start]
        if transition in outgoing:
            return False
        outgoing.append(transition)
        return True

    def outgoing(self, state: State) -> list[TransitionRecord]:
        """Outgoing transitions of a state, in insertion order.

        Unknown states have no outgoing transitions.
        """
        return list(self._adjacency.get(state, ()))

    def actions_for_state(self, state: State) -> list[ActionName]:
        """Action names offered from a state, in insertion order."""
        return [t.action for t in self._adjacency.get(state, ())]

    def first_transition(self, state: State, action: ActionName) -> TransitionRecord | None:
        """First outgoing transition of ``state`` labelled ``action``."""
        for transition in self._adjacency.get(state, ()):
            if transition.action == action:
                return transition
        return None

    def iter_states(self) -> Iterator[State]:
        """Iterate over all states."""
        return iter(self._adjacency)

    def iter_transitions(self) -> Iterator[TransitionRecord]:
        """Iterate over all transitions, state by state."""
        for outgoing in self._adjacency.values():
            yield from outgoing

    @property
    def states(self) -> list[State]:
        """All states, in the order they were first seen."""
        return list(self._adjacency)

    @property
    def transitions(self) -> list[TransitionRecord]:
        return list(self.iter_transitions())

    @property
    def action_names(self) -> list[ActionName]:
        """Unique action names used by any transition, first-seen order."""
        return list(dict.fromkeys(t.action for t in self.iter_transitions()))

    @property
    def dead_ends(self) -> list[State]:
        """States without outgoing transitions."""
        return [s for s, outgoing in self._adjacency.items() if not outgoing]

    @property
    def state_count(self) -> int:
        return len(self._adjacency)

    @property
    def transition_count(self) -> int:
        return sum(len(outgoing) for outgoing in self._adjacency.values())

    def transition_set(self) -> set[tuple[State, ActionName, State]]:
        """All transitions as (start, action, end) triples."""
        return {t.key for t in self.iter_transitions()}

    def to_dict(self) -> dict[State, list[TransitionRecord]]:
        """Copy of the underlying mapping."""
        return {state: list(outgoing) for state, outgoing in self._adjacency.items()}

    def __contains__(self, state: object) -> bool:
        return state in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[State]:
        return iter(self._adjacency)

    def __getitem__(self, state: State) -> list[TransitionRecord]:
        return list(self._adjacency[state])

    def __repr__(self) -> str:
        return f"AdjacencyModel(states={self.state_count}, transitions={self.transition_count})"


def extract_states(transitions: Iterable[TransitionRecord]) -> list[State]:
    """De-duplicated list of every state named by a transition list."""
    states: dict[State, None] = {}
    for transition in transitions:
        states.setdefault(transition.start)
        states.setdefault(transition.end)
    return list(states)


__all__ = ["AdjacencyModel", "extract_states"]
