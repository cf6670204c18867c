"""Tests for DOT graph export."""

from __future__ import annotations

from pathlib import Path

import pytest

from statewalk.core.model import AdjacencyModel
from statewalk.errors import IncompleteGraphError, MalformedEdgeError
from statewalk.export.graph import Edge, Graph, build_graph
from tests.conftest import make_transitions


class TestGraph:
    def test_to_dot(self):
        graph = Graph(name="State_Model", graph_type="digraph")
        graph.add_edge("STATEA", "STATEB", " action1 ")
        assert graph.to_dot() == (
            "digraph State_Model {\n"
            "  node [shape = ellipse];\n"
            '  STATEA -> STATEB [ label = " action1 " ];\n'
            "}\n"
        )

    def test_guarded_edge(self):
        graph = Graph(name="G", graph_type="digraph")
        graph.add_edge("HOME", "SHOWING_CONTENT", " view_content ", True)
        assert '[ label = " Guard/view_content " ]' in graph.to_dot()

    def test_custom_guard_prefix_and_style(self):
        graph = Graph(name="G", graph_type="graph", node_style="box", guard_prefix="[g] ")
        graph.add_edge("A", "B", "go", True)
        dot = graph.to_dot()
        assert dot.startswith("graph G {\n  node [shape = box];\n")
        assert '[ label = " [g] go " ]' in dot

    def test_undirected_graph_uses_double_dash(self):
        graph = Graph(name="M", graph_type="graph")
        graph.add_edge("A", "B", " go ")
        assert graph.edge_op == "--"
        assert graph.to_dot() == (
            "graph M {\n"
            "  node [shape = ellipse];\n"
            '  A -- B [ label = " go " ];\n'
            "}\n"
        )

    @pytest.mark.parametrize("details", [(), ("A",), ("A", "B"), ("A", "B", "go", True, "extra")])
    def test_malformed_edge(self, details):
        with pytest.raises(MalformedEdgeError):
            Graph(name="G", graph_type="digraph").add_edge(*details)

    def test_add_edge_returns_edge(self):
        graph = Graph()
        edge = graph.add_edge("A", "B", "go")
        assert edge == Edge("A", "B", "go", False)
        assert graph.edges == [edge]
        assert len(graph) == 1

    @pytest.mark.parametrize("name,graph_type", [(None, "digraph"), ("G", None), (None, None)])
    def test_incomplete_graph(self, name, graph_type):
        graph = Graph(name=name, graph_type=graph_type)
        with pytest.raises(IncompleteGraphError):
            graph.to_dot()

    def test_empty_graph(self):
        graph = Graph(name="Empty", graph_type="digraph")
        assert graph.to_dot() == "digraph Empty {\n  node [shape = ellipse];\n}\n"
        assert str(graph) == graph.to_dot()

    def test_output(self, tmp_path: Path):
        graph = Graph(name="G", graph_type="digraph")
        graph.add_edge("A", "B", " go ")
        target = graph.output(tmp_path / "model.dot")
        assert target.read_text() == graph.to_dot()


class TestBuildGraph:
    def test_one_edge_per_transition(self):
        model = AdjacencyModel.from_transitions(
            make_transitions(("STATEA", "action1", "STATEB"), ("STATEB", "action2", "STATEA"))
        )
        graph = build_graph(model)
        assert graph.to_dot() == (
            "digraph State_Model {\n"
            "  node [shape = ellipse];\n"
            '  STATEA -> STATEB [ label = " action1 " ];\n'
            '  STATEB -> STATEA [ label = " action2 " ];\n'
            "}\n"
        )

    def test_parallel_edges_kept(self):
        model = AdjacencyModel.from_transitions(make_transitions(("A", "x", "B"), ("A", "y", "B")))
        assert len(build_graph(model)) == 2

    def test_create_graph_marks_guarded_actions(self, login_builder):
        machine = login_builder.build_model()
        dot = machine.create_graph(name="Login").to_dot()
        assert dot.startswith("digraph Login {\n")
        assert '  HOME -> SHOWING_CONTENT [ label = " Guard/view_content " ];' in dot
        assert '  HOME -> LOG_IN_COMPLETE [ label = " Guard/click_log_in " ];' in dot
        assert '  LOG_IN_COMPLETE -> HOME [ label = " click_home " ];' in dot

    def test_create_graph_node_shape(self, two_state_machine):
        dot = two_state_machine.create_graph(node_shape="box").to_dot()
        assert "  node [shape = box];" in dot
