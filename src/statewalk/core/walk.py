"""Walk - one generated traversal of a model."""

from __future__ import annotations

import logging
from typing import Any

from statewalk.core.transition import State, TransitionRecord
from statewalk.errors import ErrorContext, InvalidDriverError, WalkError

logger = logging.getLogger(__name__)

# Objects that are plainly data, never a SUT driver.
_NOT_DRIVERS = (str, bytes, list, tuple)


class Walk:
    """Ordered transition sequence plus the coverage it achieved.

    A Walk is created empty when traversal starts, grows one step at a time,
    and is finalized exactly once when traversal terminates. After that it
    is read-only evidence of one traversal run.

    Attributes:
        start_state: State the walk started from.
        end_state: State the walk finished in (set on finalize).
        state_coverage: Percentage of model states touched (set on finalize).
        transition_coverage: Percentage of model transitions taken (set on finalize).
    """

    def __init__(self, start_state: State) -> None:
        self.start_state = start_state
        self._end_state: State | None = None
        self._steps: list[TransitionRecord] = []
        self._state_coverage: float | None = None
        self._transition_coverage: float | None = None
        self._finalized = False

    # -- building ---------------------------------------------------------

    def append(self, transition: TransitionRecord) -> None:
        """Append a step. Only allowed before the walk is finalized."""
        if self._finalized:
            raise WalkError(
                "Walk is already finalized",
                context=ErrorContext(state=str(self.start_state), action=str(transition.action)),
            )
        self._steps.append(transition)

    def finalize(
        self,
        end_state: State,
        state_coverage: float,
        transition_coverage: float,
    ) -> None:
        """Set the end state and both coverage figures, once."""
        if self._finalized:
            raise WalkError(
                "Walk is already finalized",
                context=ErrorContext(state=str(self.start_state)),
            )
        self._end_state = end_state
        self._state_coverage = state_coverage
        self._transition_coverage = transition_coverage
        self._finalized = True

    # -- reading ----------------------------------------------------------

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def end_state(self) -> State | None:
        return self._end_state

    @property
    def state_coverage(self) -> float | None:
        return self._state_coverage

    @property
    def transition_coverage(self) -> float | None:
        return self._transition_coverage

    @property
    def transitions(self) -> list[TransitionRecord]:
        return list(self._steps)

    steps = transitions

    @property
    def last_added(self) -> TransitionRecord | None:
        """Most recently appended step, or None for an empty walk."""
        return self._steps[-1] if self._steps else None

    @property
    def current_state(self) -> State:
        """End of the last step, or the start state before any step."""
        last = self.last_added
        return last.end if last is not None else self.start_state

    @property
    def actions(self) -> list[Any]:
        """Action names in step order."""
        return [t.action for t in self._steps]

    @property
    def visited_states(self) -> list[State]:
        """States in visiting order: start state, then each step's end state."""
        if not self._steps:
            return []
        return [self._steps[0].start] + [t.end for t in self._steps]

    def transitions_uniq(self) -> list[TransitionRecord]:
        """Unique transitions of the walk, first-taken order."""
        return list(dict.fromkeys(self._steps))

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self):
        return iter(self._steps)

    def __str__(self) -> str:
        out = f"{self.start_state},"
        for transition in self._steps:
            out += f"{transition.action} => {transition.end},"
        out += f"{self._end_state}\n"
        return out

    def __repr__(self) -> str:
        return (
            f"Walk(start_state={self.start_state!r}, end_state={self._end_state!r}, "
            f"steps={len(self._steps)})"
        )

    def summary(self) -> dict[str, Any]:
        """Get a summary of the walk."""
        return {
            "start_state": self.start_state,
            "end_state": self._end_state,
            "steps": len(self._steps),
            "unique_transitions": len(self.transitions_uniq()),
            "state_coverage": self._state_coverage,
            "transition_coverage": self._transition_coverage,
        }

    # -- driving ----------------------------------------------------------

    def drive_using(self, sut_driver: Any) -> None:
        """Direct a SUT driver through this walk.

        The driver exposes one zero-argument method per state, named
        ``test_<STATE>``, that verifies the system is in that state, and one
        zero-argument method per action, named after the action, that moves
        the system. The start state is verified first; then for each step the
        action method runs, followed by the verification of the step's end
        state.

        e.g. for states LOGGED_OUT, LOGGED_IN and the action
        ``enter_login_details`` between them, the driver has
        ``test_LOGGED_OUT``, ``test_LOGGED_IN`` and ``enter_login_details``.

        Raises:
            InvalidDriverError: If the driver is a string or sequence.
            AttributeError: If the driver lacks a method the walk needs.
        """
        if isinstance(sut_driver, _NOT_DRIVERS):
            raise InvalidDriverError(
                f"{type(sut_driver).__name__} - not a SUT driver",
                context=ErrorContext(state=str(self.start_state)),
            )

        logger.debug("Driving %s through %d steps", type(sut_driver).__name__, len(self))
        getattr(sut_driver, f"test_{self.start_state}")()

        for transition in self._steps:
            getattr(sut_driver, str(transition.action))()
            getattr(sut_driver, f"test_{transition.end}")()


__all__ = ["Walk"]
