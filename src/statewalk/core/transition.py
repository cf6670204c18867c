"""TransitionRecord - one (start state, action, end state) edge."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

State = Hashable
"""Opaque state identifier. Strings in tables, any hashable token in the DSL."""

ActionName = Hashable


@dataclass(frozen=True)
class TransitionRecord:
    """Records a model edge: start -> action -> end.

    Transitions are immutable (frozen) and compare structurally, so two
    records with the same triple are the same transition wherever they
    came from.

    Attributes:
        start: The state the transition leaves.
        action: Name of the action that moves the model.
        end: The state the transition arrives at.
    """

    start: State
    action: ActionName
    end: State

    @property
    def key(self) -> tuple[State, ActionName, State]:
        """The (start, action, end) triple used for de-duplication."""
        return (self.start, self.action, self.end)

    def __str__(self) -> str:
        return f"{self.start},{self.action} => {self.end}"


__all__ = ["State", "ActionName", "TransitionRecord"]
