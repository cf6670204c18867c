"""Guarded random walk generation."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from statewalk.config import DEFAULT_STEP_LIMIT
from statewalk.core.transition import State, TransitionRecord
from statewalk.core.walk import Walk
from statewalk.engine.coverage import CoverageCalculator
from statewalk.errors import (
    DuplicateStartStateError,
    ErrorContext,
    MissingStartStateError,
    StepLimitTooLowError,
)

if TYPE_CHECKING:
    from statewalk.core.machine import StateMachine

logger = logging.getLogger(__name__)

MIN_STEP_LIMIT = 3


class WalkEngine:
    """Generates random walks over a StateMachine.

    At each step the engine looks at the outgoing transitions of the current
    state, keeps those whose action is unguarded or whose guard currently
    holds, and picks one of them uniformly at random. The walk ends at the
    step limit, at a dead end (no outgoing transitions), or at a soft dead
    end (transitions exist but every guard fails).

    The random source is the only non-deterministic input. Pass a seeded
    ``random.Random`` (or ``seed=``) for reproducible walks::

        engine = WalkEngine(machine, seed=42)
        walk = engine.random_walk("HOME", step_limit=10)
    """

    def __init__(
        self,
        machine: StateMachine,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self.machine = machine
        self._rng = rng if rng is not None else random.Random(seed)

    def random_walk(self, start_state: State, step_limit: int = DEFAULT_STEP_LIMIT) -> Walk:
        """Create a random walk over the model, starting at ``start_state``.

        Raises:
            MissingStartStateError: start state is not in the states store.
            DuplicateStartStateError: start state is listed more than once.
            StepLimitTooLowError: step limit is not greater than 2.
        """
        self._check_start_state(start_state)
        if step_limit < MIN_STEP_LIMIT:
            raise StepLimitTooLowError(
                f"Step limit is too low at {step_limit}",
                context=ErrorContext(state=str(start_state)),
                step_limit=step_limit,
            )

        machine = self.machine
        walk = Walk(start_state)
        machine.state = start_state
        end_state = self._take_steps(walk, step_limit)
        machine.state = end_state

        calculator = CoverageCalculator(machine.adjacency_model, machine.states_store)
        state_cov, transition_cov = calculator.measure(walk)
        walk.finalize(end_state, state_cov, transition_cov)

        logger.debug(
            "This walk has coverage metrics of: state %.1f%%, transition %.1f%%",
            state_cov,
            transition_cov,
        )
        return walk

    def usable_transitions(self, state: State) -> list[TransitionRecord]:
        """Outgoing transitions of ``state`` whose guards currently pass.

        Guards are evaluated afresh on every call, against the machine's
        context as the most recent action left it.
        """
        machine = self.machine
        return [
            t
            for t in machine.adjacency_model.outgoing(state)
            if machine.guard_registry.passes(t.action, machine.context)
        ]

    def _check_start_state(self, start_state: State) -> None:
        matches = sum(1 for s in self.machine.states_store if s == start_state)
        if matches == 0:
            raise MissingStartStateError(
                f"Missing start state: {start_state}",
                context=ErrorContext(state=str(start_state)),
            )
        if matches > 1:
            raise DuplicateStartStateError(
                f"Duplicate start state in states store: {start_state} ({matches} entries)",
                context=ErrorContext(state=str(start_state)),
            )

    def _take_steps(self, walk: Walk, step_limit: int) -> State:
        """Append steps to ``walk`` until it ends; return the end state."""
        machine = self.machine

        while len(walk) < step_limit:
            current = walk.current_state
            candidates = machine.adjacency_model.outgoing(current)
            if not candidates:
                logger.debug("Dead end reached at %s", current)
                return current

            usable = self.usable_transitions(current)
            if not usable:
                logger.debug("No passing guards at %s, walk is over", current)
                return current

            chosen = usable[self._rng.randrange(len(usable))]
            logger.debug("Execute action: %s", chosen.action)
            machine.action_registry.invoke(chosen.action, machine.context)
            machine.state = chosen.end
            walk.append(TransitionRecord(current, chosen.action, chosen.end))

        return walk.current_state


__all__ = ["WalkEngine", "MIN_STEP_LIMIT"]
