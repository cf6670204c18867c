"""StateMachine - the runnable model.

A StateMachine binds together the adjacency model, the states store, the
action and guard registries and the shared Context. It is what both the
tabular loader and the ModelBuilder produce.

Actions are callable on the machine, by name::

    machine.state = "STATEA"
    machine.fire("action1")     # -> "STATEB"
    machine.action1()           # same, attribute form for identifier-like names

Direct calls never consult guards; guards only gate the choices a random
walk makes. ``guard_on(name)`` evaluates a guard on its own.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from functools import partial
from typing import Any

from statewalk.config import DEFAULT_STEP_LIMIT
from statewalk.core.context import Context
from statewalk.core.model import AdjacencyModel
from statewalk.core.registry import ActionRegistry, GuardRegistry
from statewalk.core.transition import ActionName, State, TransitionRecord
from statewalk.core.walk import Walk
from statewalk.engine.coverage import CoverageCalculator
from statewalk.engine.walker import WalkEngine
from statewalk.errors import ActionNotAvailableError, ErrorContext, UnknownActionError
from statewalk.export.graph import (
    DEFAULT_GRAPH_NAME,
    DEFAULT_GRAPH_TYPE,
    DEFAULT_GUARD_PREFIX,
    DEFAULT_NODE_SHAPE,
    Graph,
    build_graph,
)
from statewalk.log import set_debug

logger = logging.getLogger(__name__)

MAX_STEPS = DEFAULT_STEP_LIMIT


class StateMachine:
    """Runnable state model: adjacency, registries, context and current state.

    The model and registries are read-only once a walk starts. The machine
    holds exactly one current state; do not run two walks against the same
    machine concurrently.

    Attributes:
        adjacency_model: State -> ordered outgoing transitions.
        states_store: Every state discovered while building the model.
        action_registry: Declared actions and their callbacks.
        guard_registry: Guarded actions and their predicates.
        context: Caller-owned data shared by callbacks and guards.
        state: Current state used by direct action dispatch.
    """

    def __init__(
        self,
        adjacency_model: AdjacencyModel | None = None,
        states_store: Iterable[State] | None = None,
        action_registry: ActionRegistry | None = None,
        guard_registry: GuardRegistry | None = None,
        context: Context | None = None,
        debug: bool = False,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self.adjacency_model = adjacency_model if adjacency_model is not None else AdjacencyModel()
        self.states_store: list[State] = (
            list(states_store) if states_store is not None else self.adjacency_model.states
        )
        self.action_registry = action_registry if action_registry is not None else ActionRegistry()
        self.guard_registry = guard_registry if guard_registry is not None else GuardRegistry()
        self.context = context if context is not None else Context()
        self.state: State | None = None
        self._rng = rng if rng is not None else random.Random(seed)
        self.debug = debug

    @property
    def debug(self) -> bool:
        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        self._debug = value
        if value:
            set_debug(True)

    # ------------------------------------------------------------------
    # Model inspection
    # ------------------------------------------------------------------

    @property
    def actions(self) -> list[ActionName]:
        """Declared action names."""
        return self.action_registry.names

    @property
    def guarded_actions(self) -> list[ActionName]:
        return self.guard_registry.guarded_actions

    def actions_for_state(self, state: State) -> list[ActionName]:
        """Action names offered from ``state``, in adjacency order."""
        return self.adjacency_model.actions_for_state(state)

    def describe(self) -> str:
        """List each state and the actions associated with it."""
        out = "States, and their Actions:"
        for state in self.adjacency_model.iter_states():
            out += f"\nState: {state}\n"
            out += "Actions:\n"
            actions = self.actions_for_state(state)
            if not actions:
                out += "\t<No Actions>\n"
            for action in actions:
                out += f"\t{action}\n"
        return out

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"StateMachine(states={self.adjacency_model.state_count}, "
            f"transitions={self.adjacency_model.transition_count}, "
            f"actions={len(self.action_registry)}, state={self.state!r})"
        )

    # ------------------------------------------------------------------
    # Action dispatch
    # ------------------------------------------------------------------

    def fire(self, action: ActionName) -> State:
        """Run ``action`` from the current state and return the new state.

        The action's callback (if any) runs first, then the machine moves to
        the end state of the first transition from the current state that
        carries this action. Guards are not consulted.

        Raises:
            ActionNotAvailableError: If the current state does not offer the action.
        """
        current = self.state
        transition = self.adjacency_model.first_transition(current, action)
        if transition is None:
            raise ActionNotAvailableError(
                f"Action {action} is not available from state {current}",
                context=ErrorContext(state=str(current), action=str(action)),
                available=[str(a) for a in self.actions_for_state(current)],
            )

        logger.debug("Action: %s", action)
        self.action_registry.invoke(action, self.context)

        self.state = transition.end
        return self.state

    def guard_on(self, action: ActionName) -> bool:
        """Evaluate the guard of ``action`` without touching state.

        An action without a guard is always executable, so this returns True.

        Raises:
            UnknownActionError: If the action was never declared.
        """
        if action not in self.action_registry and action not in self.guard_registry:
            raise UnknownActionError(
                f"Action not found: {action}",
                context=ErrorContext(action=str(action)),
            )
        return self.guard_registry.passes(action, self.context)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails; expose declared actions.
        if name.startswith("_"):
            raise AttributeError(name)
        registry = self.__dict__.get("action_registry")
        if registry is not None and name in registry:
            return partial(self.fire, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    # ------------------------------------------------------------------
    # Walks and coverage
    # ------------------------------------------------------------------

    def random_walk(
        self,
        start_state: State,
        step_limit: int = MAX_STEPS,
        rng: random.Random | None = None,
    ) -> Walk:
        """Create a random walk over the model, starting at ``start_state``.

        By default the walk has ``MAX_STEPS`` steps unless a dead end, or a
        state whose guards all fail, is reached first. Pass ``rng`` to use a
        specific random source for this walk only.
        """
        engine = WalkEngine(self, rng=rng if rng is not None else self._rng)
        walk = engine.random_walk(start_state, step_limit)
        logger.debug("Walk: %s", str(walk).strip())
        return walk

    def valid_transitions(self) -> list[TransitionRecord]:
        """All transitions leaving states that have any."""
        return CoverageCalculator(self.adjacency_model, self.states_store).valid_transitions()

    def state_coverage(self, walk: Walk) -> float:
        return CoverageCalculator(self.adjacency_model, self.states_store).state_coverage(walk)

    def transition_coverage(self, walk: Walk) -> float:
        return CoverageCalculator(self.adjacency_model, self.states_store).transition_coverage(walk)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def create_graph(
        self,
        name: str = DEFAULT_GRAPH_NAME,
        node_shape: str = DEFAULT_NODE_SHAPE,
        graph_type: str = DEFAULT_GRAPH_TYPE,
        guard_prefix: str = DEFAULT_GUARD_PREFIX,
    ) -> Graph:
        """Graph with one edge per transition; guarded actions are annotated."""
        return build_graph(
            self.adjacency_model,
            guarded_actions=set(self.guarded_actions),
            name=name,
            node_shape=node_shape,
            graph_type=graph_type,
            guard_prefix=guard_prefix,
        )


__all__ = ["StateMachine", "MAX_STEPS"]
