"""ModelBuilder - fluent construction of a StateMachine.

Example::

    builder = ModelBuilder()

    @builder.action()
    def click_log_in(context):
        context.set("logged_in", True)

    builder.define_action("view_content")
    builder.define_action("click_home")
    builder.define_guard("view_content", lambda context: context.get("logged_in", False))
    builder.define_guard("click_log_in", lambda context: not context.get("logged_in", False))

    builder.attach_transition("HOME", "view_content", "SHOWING_CONTENT")
    builder.attach_transition("HOME", "click_log_in", "LOG_IN_COMPLETE")
    builder.attach_transition("LOG_IN_COMPLETE", "click_home", "HOME")

    machine = builder.build_model()
    walk = machine.random_walk("HOME")

The one ordering rule: an action must be defined before a guard or a
transition refers to it.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable
from typing import Any

from statewalk.core.context import Context
from statewalk.core.machine import StateMachine
from statewalk.core.model import AdjacencyModel
from statewalk.core.registry import (
    ActionCallback,
    ActionRegistry,
    ActionSpec,
    GuardPredicate,
    GuardRegistry,
    GuardSpec,
)
from statewalk.core.transition import ActionName, State, TransitionRecord
from statewalk.errors import ErrorContext, UnknownActionError
from statewalk.log import set_debug

logger = logging.getLogger(__name__)


class ModelBuilder:
    """Collects actions, guards and transitions, then builds a StateMachine.

    Args:
        debug: Turn on debug logging for the statewalk logger.
        context: Context handed to callbacks and guards of the built machine.
            A fresh one is created if omitted.
    """

    def __init__(self, debug: bool = False, context: Context | None = None) -> None:
        self.debug = debug
        if debug:
            set_debug(True)
        self.context = context if context is not None else Context()
        self._actions = ActionRegistry()
        self._guards = GuardRegistry()
        self._transitions: list[TransitionRecord] = []
        self._states: dict[State, None] = {}

    @property
    def actions(self) -> list[ActionName]:
        """Defined action names, in definition order."""
        return self._actions.names

    @property
    def states(self) -> list[State]:
        """States referenced by attached transitions, first-seen order."""
        return list(self._states)

    @property
    def transitions(self) -> list[TransitionRecord]:
        return list(self._transitions)

    def define_action(
        self,
        name: ActionName,
        callback: ActionCallback | None = None,
        description: str = "",
    ) -> ActionSpec:
        """Define an action, optionally with a side-effecting callback."""
        return self._actions.define(name, callback, description)

    def define_guard(self, action: ActionName, predicate: GuardPredicate) -> GuardSpec:
        """Guard an already defined action with a boolean predicate.

        Raises:
            UnknownActionError: If the action has not been defined.
        """
        self._require_action(action, "guard")
        return self._guards.define(action, predicate)

    def attach_transition(self, start: State, action: ActionName, end: State) -> TransitionRecord:
        """Record that ``action`` moves the model from ``start`` to ``end``.

        Raises:
            UnknownActionError: If the action has not been defined.
        """
        self._require_action(action, "transition")
        transition = TransitionRecord(start, action, end)
        logger.debug("Attach transition: %s", transition)
        self._transitions.append(transition)
        self._states.setdefault(start)
        self._states.setdefault(end)
        return transition

    def action(
        self,
        name: ActionName | None = None,
        description: str = "",
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator form of define_action. Defaults to the function's name.

        Example:
            @builder.action()
            def action1(context):
                context.set("done1", True)
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.define_action(name or func.__name__, func, description)
            return func

        return decorator

    def guard(self, action: ActionName) -> Callable[[Callable[..., bool]], Callable[..., bool]]:
        """Decorator form of define_guard.

        Example:
            @builder.guard("action2")
            def action2_allowed(context):
                return context.get("done1") and not context.get("done2")
        """

        def decorator(func: Callable[..., bool]) -> Callable[..., bool]:
            self.define_guard(action, func)
            return func

        return decorator

    def add_transitions(self, transitions: Iterable[TransitionRecord]) -> None:
        """Attach parsed transitions, defining any action not seen yet.

        Actions defined this way have no callback; a later define_action
        call for the same name can still give them one.
        """
        for transition in transitions:
            if transition.action not in self._actions:
                self.define_action(transition.action)
            self.attach_transition(transition.start, transition.action, transition.end)

    def build_model(
        self,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> StateMachine:
        """Build the runnable StateMachine from everything collected so far.

        Duplicate transitions are collapsed. The builder can keep being used
        afterwards; the machine holds its own copies of the registries.
        """
        model = AdjacencyModel.from_transitions(self._transitions)
        machine = StateMachine(
            adjacency_model=model,
            states_store=model.states,
            action_registry=self._actions.copy(),
            guard_registry=self._guards.copy(),
            context=self.context,
            debug=self.debug,
            rng=rng,
            seed=seed,
        )
        logger.debug("Built model: %r", machine)
        return machine

    def _require_action(self, action: ActionName, what: str) -> None:
        if action not in self._actions:
            raise UnknownActionError(
                f"Action not found: {action} ({what} refers to an undefined action)",
                context=ErrorContext(action=str(action)),
                suggestions=[f"Call define_action({action!r}) first"],
            )


def build_from_transitions(
    transitions: Iterable[TransitionRecord],
    debug: bool = False,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> StateMachine:
    """Build a StateMachine with callback-less actions from parsed transitions."""
    builder = ModelBuilder(debug=debug)
    builder.add_transitions(transitions)
    return builder.build_model(rng=rng, seed=seed)


__all__ = ["ModelBuilder", "build_from_transitions"]
