"""Core data objects for statewalk.

This module contains the fundamental data structures:
- TransitionRecord: One (start, action, end) edge
- AdjacencyModel: State -> outgoing transitions
- Context: Data shared by action callbacks and guards
- ActionRegistry, GuardRegistry: Declared actions and guards
- Walk: One generated traversal
- StateMachine: The runnable model
"""

from statewalk.core.transition import ActionName, State, TransitionRecord
from statewalk.core.model import AdjacencyModel, extract_states
from statewalk.core.context import Context
from statewalk.core.registry import ActionRegistry, ActionSpec, GuardRegistry, GuardSpec
from statewalk.core.walk import Walk
from statewalk.core.machine import MAX_STEPS, StateMachine

__all__ = [
    "ActionName",
    "State",
    "TransitionRecord",
    "AdjacencyModel",
    "extract_states",
    "Context",
    "ActionRegistry",
    "ActionSpec",
    "GuardRegistry",
    "GuardSpec",
    "Walk",
    "MAX_STEPS",
    "StateMachine",
]
