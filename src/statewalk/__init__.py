"""statewalk - Finite-state models and random walks for model-based testing.

Describe the expected behaviour of a system as states and the actions that
move between them, either as a CSV state table or in code, then generate
random walks over the model to drive the system under test and measure how
much of the model each walk exercised.

Example::

    from statewalk import ModelBuilder

    builder = ModelBuilder()
    builder.define_action("action1", lambda context: context.set("done1", True))
    builder.define_action("action2")
    builder.define_guard("action2", lambda context: context.get("done1", False))
    builder.attach_transition("STATEA", "action1", "STATEB")
    builder.attach_transition("STATEB", "action2", "STATEA")

    machine = builder.build_model(seed=1)
    walk = machine.random_walk("STATEA", step_limit=4)
    walk.actions  # ['action1', 'action2', 'action1', 'action2']

Loading a table::

    from statewalk import load_table
    machine = load_table("tests/fixtures/test1.csv")
    machine.create_graph().output("model.dot")

Core Models:
    TransitionRecord: One (start, action, end) edge
    AdjacencyModel: Each state's ordered outgoing transitions
    StateMachine: The runnable model
    Walk: One generated traversal plus its coverage
"""

from statewalk.builder import (
    Layout,
    ModelBuilder,
    detect_layout,
    detect_table_layout,
    load_table,
    parse_linear,
    parse_matrix,
    parse_table,
    read_grid,
)
from statewalk.config import WalkConfig, load_config
from statewalk.core import (
    ActionRegistry,
    AdjacencyModel,
    Context,
    GuardRegistry,
    StateMachine,
    TransitionRecord,
    Walk,
)
from statewalk.engine import CoverageCalculator, WalkEngine
from statewalk.errors import StateWalkError
from statewalk.export import Graph, build_graph

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Layout",
    "ModelBuilder",
    "detect_layout",
    "detect_table_layout",
    "load_table",
    "parse_linear",
    "parse_matrix",
    "parse_table",
    "read_grid",
    "WalkConfig",
    "load_config",
    "ActionRegistry",
    "AdjacencyModel",
    "Context",
    "GuardRegistry",
    "StateMachine",
    "TransitionRecord",
    "Walk",
    "CoverageCalculator",
    "WalkEngine",
    "StateWalkError",
    "Graph",
    "build_graph",
]
