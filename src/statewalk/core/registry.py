"""Action and guard registries.

Actions are explicit entries in a per-machine registry (name -> optional
callback) rather than methods synthesized onto an object, so two machines
built from different builders can never see each other's actions.

Callbacks and guard predicates may take the machine's Context as their
single argument or take no arguments at all:

    registry.define("click_log_in", lambda context: context.set("logged_in", True))
    registry.define("click_home")                      # label only, no-op
    guards.define("view_content", lambda context: context.get("logged_in", False))
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from statewalk.core.context import Context
from statewalk.core.transition import ActionName

logger = logging.getLogger(__name__)

ActionCallback = Callable[..., Any]
GuardPredicate = Callable[..., bool]


def _accepts_context(func: Callable[..., Any]) -> bool:
    """Detect whether a callable takes the Context argument."""
    try:
        sig = inspect.signature(func)
    except (ValueError, TypeError):
        # Can't inspect (e.g., built-in), assume it takes the context
        return True
    params = [
        p
        for p in sig.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD, p.VAR_POSITIONAL)
    ]
    return len(params) >= 1


def _call(func: Callable[..., Any], accepts_context: bool, context: Context) -> Any:
    if accepts_context:
        return func(context)
    return func()


@dataclass
class ActionSpec:
    """A declared action: a name plus an optional side-effecting callback."""

    name: ActionName
    callback: ActionCallback | None = None
    description: str = ""
    _accepts_context: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        if self.callback is not None:
            self._accepts_context = _accepts_context(self.callback)
            if not self.description:
                self.description = inspect.getdoc(self.callback) or ""

    def invoke(self, context: Context) -> Any:
        """Run the callback, if any. An action without one is a no-op."""
        if self.callback is None:
            return None
        return _call(self.callback, self._accepts_context, context)


@dataclass
class GuardSpec:
    """A boolean predicate gating whether a walk may choose an action."""

    action: ActionName
    predicate: GuardPredicate
    _accepts_context: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        self._accepts_context = _accepts_context(self.predicate)

    def evaluate(self, context: Context) -> bool:
        return bool(_call(self.predicate, self._accepts_context, context))


class ActionRegistry:
    """Ordered mapping of action name -> ActionSpec."""

    def __init__(self) -> None:
        self._actions: dict[ActionName, ActionSpec] = {}

    def define(
        self,
        name: ActionName,
        callback: ActionCallback | None = None,
        description: str = "",
    ) -> ActionSpec:
        """Declare an action. Redefining a name replaces its callback."""
        spec = ActionSpec(name=name, callback=callback, description=description)
        if name in self._actions:
            logger.debug("Redefining action: %s", name)
        else:
            logger.debug("Define action: %s", name)
        self._actions[name] = spec
        return spec

    def get(self, name: ActionName) -> ActionSpec | None:
        return self._actions.get(name)

    def invoke(self, name: ActionName, context: Context) -> Any:
        """Run the callback of ``name``, if any.

        An action that appears only in the adjacency model, with no entry
        here, is a no-op just like a declared action without a callback.
        """
        spec = self._actions.get(name)
        if spec is None:
            return None
        return spec.invoke(context)

    @property
    def names(self) -> list[ActionName]:
        """Declared action names, in declaration order."""
        return list(self._actions)

    def copy(self) -> ActionRegistry:
        clone = ActionRegistry()
        clone._actions = dict(self._actions)
        return clone

    def __contains__(self, name: object) -> bool:
        return name in self._actions

    def __iter__(self) -> Iterator[ActionName]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)


class GuardRegistry:
    """Set of guarded action names plus their predicates."""

    def __init__(self) -> None:
        self._guards: dict[ActionName, GuardSpec] = {}

    def define(self, action: ActionName, predicate: GuardPredicate) -> GuardSpec:
        """Attach a guard predicate to an action, replacing any earlier one."""
        spec = GuardSpec(action=action, predicate=predicate)
        logger.debug("Guard on: %s", action)
        self._guards[action] = spec
        return spec

    def is_guarded(self, action: ActionName) -> bool:
        return action in self._guards

    def evaluate(self, action: ActionName, context: Context) -> bool:
        """Evaluate an action's guard. Raises KeyError for unguarded actions."""
        return self._guards[action].evaluate(context)

    def passes(self, action: ActionName, context: Context) -> bool:
        """True if the action is unguarded or its guard currently holds."""
        spec = self._guards.get(action)
        if spec is None:
            return True
        return spec.evaluate(context)

    @property
    def guarded_actions(self) -> list[ActionName]:
        """Guarded action names, in the order guards were defined."""
        return list(self._guards)

    def copy(self) -> GuardRegistry:
        clone = GuardRegistry()
        clone._guards = dict(self._guards)
        return clone

    def __contains__(self, action: object) -> bool:
        return action in self._guards

    def __iter__(self) -> Iterator[ActionName]:
        return iter(self._guards)

    def __len__(self) -> int:
        return len(self._guards)


__all__ = [
    "ActionCallback",
    "GuardPredicate",
    "ActionSpec",
    "GuardSpec",
    "ActionRegistry",
    "GuardRegistry",
]
