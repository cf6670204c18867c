"""Graphviz DOT export of a state model.

The Graph here is a thin structural mirror of the adjacency model: one
edge per transition, labelled with the action name. It does not
deduplicate parallel edges and does not validate node names against
Graphviz identifier rules. Edges use ``->`` in a digraph and ``--`` in an
undirected graph.

Example output::

    digraph State_Model {
      node [shape = ellipse];
      STATEA -> STATEB [ label = " action1 " ];
      STATEB -> STATEA [ label = " Guard/action2 " ];
    }
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from statewalk.core.model import AdjacencyModel
from statewalk.errors import ErrorContext, IncompleteGraphError, MalformedEdgeError

logger = logging.getLogger(__name__)

DEFAULT_GRAPH_NAME = "State_Model"
DEFAULT_GRAPH_TYPE = "digraph"
DEFAULT_NODE_SHAPE = "ellipse"
DEFAULT_GUARD_PREFIX = "Guard/"

EDGE_OPS = {"digraph": "->", "graph": "--"}


@dataclass(frozen=True)
class Edge:
    """One rendered edge."""

    source: Any
    target: Any
    label: str
    guarded: bool = False


class Graph:
    """Graph description that renders to the DOT language.

    ``name`` and ``graph_type`` must both be set before rendering.
    """

    def __init__(
        self,
        name: str | None = None,
        graph_type: str | None = None,
        node_style: str = DEFAULT_NODE_SHAPE,
        guard_prefix: str = DEFAULT_GUARD_PREFIX,
    ) -> None:
        self.name = name
        self.graph_type = graph_type
        self.node_style = node_style
        self.guard_prefix = guard_prefix
        self._edges: list[Edge] = []

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    def add_edge(self, *edge_details: Any) -> Edge:
        """Add an edge from ``(from, to, label)`` or ``(from, to, label, guarded)``.

        Raises:
            MalformedEdgeError: For any other number of values.
        """
        if not 3 <= len(edge_details) <= 4:
            raise MalformedEdgeError(
                f"Incorrect number of arguments in add_edge: {len(edge_details)}",
                context=ErrorContext(extra={"edge_details": repr(edge_details)}),
            )
        source, target, label = edge_details[:3]
        guarded = bool(edge_details[3]) if len(edge_details) == 4 else False
        edge = Edge(source=source, target=target, label=str(label), guarded=guarded)
        self._edges.append(edge)
        return edge

    def edge_label(self, edge: Edge) -> str:
        """Rendered label text; guarded edges carry the guard prefix."""
        if edge.guarded:
            return f" {self.guard_prefix}{edge.label.strip()} "
        return edge.label

    @property
    def edge_op(self) -> str:
        """Edge operator for the graph type: ``--`` for ``graph``, else ``->``."""
        return EDGE_OPS.get(self.graph_type, "->")

    def to_dot(self) -> str:
        """Render the graph in Graphviz DOT format.

        Raises:
            IncompleteGraphError: If the graph name or type is not set.
        """
        if self.name is None or self.graph_type is None:
            raise IncompleteGraphError(
                f"Graph name or type not set. Name: {self.name}, Type: {self.graph_type}",
            )

        lines = [
            f"{self.graph_type} {self.name} {{",
            f"  node [shape = {self.node_style}];",
        ]
        for edge in self._edges:
            lines.append(
                f'  {edge.source} {self.edge_op} {edge.target} [ label = "{self.edge_label(edge)}" ];'
            )
        lines.append("}")
        return "\n".join(lines) + "\n"

    def output(self, filename: str | Path) -> Path:
        """Write the DOT text to a file and return its path."""
        output_file = Path(filename)
        output_file.write_text(self.to_dot())
        logger.debug("Graph written to %s", output_file)
        return output_file

    def __str__(self) -> str:
        return self.to_dot()

    def __len__(self) -> int:
        return len(self._edges)


def build_graph(
    model: AdjacencyModel,
    guarded_actions: Collection[Any] = (),
    name: str = DEFAULT_GRAPH_NAME,
    node_shape: str = DEFAULT_NODE_SHAPE,
    graph_type: str = DEFAULT_GRAPH_TYPE,
    guard_prefix: str = DEFAULT_GUARD_PREFIX,
) -> Graph:
    """Build a Graph with one edge per transition of the model."""
    graph = Graph(
        name=name,
        graph_type=graph_type,
        node_style=node_shape,
        guard_prefix=guard_prefix,
    )
    for transition in model.iter_transitions():
        graph.add_edge(
            transition.start,
            transition.end,
            f" {transition.action} ",
            transition.action in guarded_actions,
        )
    logger.debug("Built graph %s with %d edges", name, len(graph))
    return graph


__all__ = [
    "Edge",
    "Graph",
    "build_graph",
    "DEFAULT_GRAPH_NAME",
    "DEFAULT_GRAPH_TYPE",
    "DEFAULT_NODE_SHAPE",
    "DEFAULT_GUARD_PREFIX",
]
