"""Tests for the statewalk command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from statewalk.cli import cli
from tests.conftest import FIXTURES


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> CliRunner:
    for key in ("STATEWALK_STEP_LIMIT", "STATEWALK_SEED", "STATEWALK_GRAPH_NAME", "STATEWALK_GRAPH_TYPE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def _table(name: str) -> str:
    return str(FIXTURES / name)


class TestDetect:
    def test_linear(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["detect", _table("test1.csv")])
        assert result.exit_code == 0
        assert result.output.strip() == "linear"

    def test_matrix(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["detect", _table("test9_2d.csv")])
        assert result.exit_code == 0
        assert result.output.strip() == "matrix"

    def test_unknown(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["detect", _table("unknown_layout.csv")])
        assert result.exit_code == 1
        assert "Error: Unable to detect" in result.output

    def test_missing(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["detect", "nope.csv"])
        assert result.exit_code == 1
        assert "Error: State table file not found" in result.output


class TestDescribe:
    def test_describe(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["describe", _table("test4.csv")])
        assert result.exit_code == 0
        assert "STATEC" in result.output
        assert "<No Actions>" in result.output

    def test_empty_table(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["describe", _table("test3.csv")])
        assert result.exit_code == 1
        assert "Error: State table file is empty" in result.output


class TestWalk:
    def test_walk(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", _table("test5.csv"), "--start", "STATEA", "--steps", "3"])
        assert result.exit_code == 0
        assert "Ended in STATED after 3 step(s)" in result.output

    def test_seeded_walks_repeat(self, runner: CliRunner) -> None:
        args = ["walk", _table("test9.csv"), "-s", "STATEA", "--seed", "21"]
        first = runner.invoke(cli, args)
        second = runner.invoke(cli, args)
        assert first.exit_code == 0
        assert first.output == second.output

    def test_step_limit_too_low(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", _table("test1.csv"), "--start", "STATEA", "--steps", "2"])
        assert result.exit_code == 1
        assert "Error: Step limit is too low at 2" in result.output

    def test_missing_start_state(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", _table("test1.csv"), "--start", "STATEZ"])
        assert result.exit_code == 1
        assert "Error: Missing start state: STATEZ" in result.output

    def test_start_required(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["walk", _table("test1.csv")])
        assert result.exit_code == 2

    def test_step_limit_from_config(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "statewalk.yaml"
        config.write_text("step_limit: 4\n")
        result = runner.invoke(cli, ["-c", str(config), "walk", _table("test9.csv"), "-s", "STATEA"])
        assert result.exit_code == 0
        assert "after 4 step(s)" in result.output


class TestDot:
    def test_stdout(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["dot", _table("test1.csv")])
        assert result.exit_code == 0
        assert result.output == (
            "digraph State_Model {\n"
            "  node [shape = ellipse];\n"
            '  STATEA -> STATEB [ label = " action1 " ];\n'
            '  STATEB -> STATEA [ label = " action2 " ];\n'
            "}\n"
        )

    def test_name_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["dot", _table("test1_2d.csv"), "--name", "Toggle"])
        assert result.output.startswith("digraph Toggle {")

    def test_output_file(self, runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "model.dot"
        result = runner.invoke(cli, ["dot", _table("test4.csv"), "-o", str(target)])
        assert result.exit_code == 0
        assert "Graph written to" in result.output
        assert "STATEC -> STATEE" in target.read_text()

    def test_graph_settings_from_config(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "statewalk.yaml"
        config.write_text("graph_name: Configured\nnode_shape: box\n")
        result = runner.invoke(cli, ["--config", str(config), "dot", _table("test1.csv")])
        assert result.output.startswith("digraph Configured {\n  node [shape = box];")

    def test_undirected_graph_from_config(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "statewalk.yaml"
        config.write_text("graph_type: graph\n")
        result = runner.invoke(cli, ["--config", str(config), "dot", _table("test1.csv")])
        assert result.exit_code == 0
        assert result.output.startswith("graph State_Model {")
        assert "STATEA -- STATEB" in result.output
        assert "->" not in result.output


class TestGroup:
    def test_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "statewalk.yaml"
        config.write_text("step_limit: 1\n")
        result = runner.invoke(cli, ["-c", str(config), "detect", _table("test1.csv")])
        assert result.exit_code == 1
        assert "Error: step_limit must be greater than 2" in result.output

    def test_verbose(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["-v", "detect", _table("test1.csv")])
        assert result.exit_code == 0
        assert "linear" in result.output

    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("detect", "describe", "walk", "dot"):
            assert command in result.output
