"""Graph export of state models."""

from statewalk.export.graph import Edge, Graph, build_graph

__all__ = ["Edge", "Graph", "build_graph"]
