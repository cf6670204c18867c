"""Tests for the Walk value object and driving a SUT with it."""

from __future__ import annotations

import pytest

from statewalk.core.transition import TransitionRecord
from statewalk.core.walk import Walk
from statewalk.errors import InvalidDriverError, WalkError
from tests.conftest import RecordingDriver


def _walk(*triples: tuple[str, str, str], start: str = "STATEA") -> Walk:
    walk = Walk(start)
    for triple in triples:
        walk.append(TransitionRecord(*triple))
    return walk


class TestWalk:
    def test_empty(self):
        walk = Walk("STATEA")
        assert len(walk) == 0
        assert walk.last_added is None
        assert walk.current_state == "STATEA"
        assert walk.visited_states == []
        assert walk.finalized is False
        assert walk.end_state is None
        assert walk.state_coverage is None

    def test_append(self):
        walk = _walk(("STATEA", "action1", "STATEB"), ("STATEB", "action2", "STATEA"))
        assert len(walk) == 2
        assert walk.last_added == TransitionRecord("STATEB", "action2", "STATEA")
        assert walk.current_state == "STATEA"
        assert walk.actions == ["action1", "action2"]
        assert walk.visited_states == ["STATEA", "STATEB", "STATEA"]
        assert list(walk) == walk.transitions == walk.steps

    def test_transitions_is_copy(self):
        walk = _walk(("STATEA", "action1", "STATEB"))
        walk.transitions.clear()
        assert len(walk) == 1

    def test_transitions_uniq(self):
        walk = _walk(
            ("STATEA", "action1", "STATEB"),
            ("STATEB", "action2", "STATEA"),
            ("STATEA", "action1", "STATEB"),
        )
        assert walk.transitions_uniq() == [
            TransitionRecord("STATEA", "action1", "STATEB"),
            TransitionRecord("STATEB", "action2", "STATEA"),
        ]

    def test_finalize_once(self):
        walk = _walk(("STATEA", "action1", "STATEB"))
        walk.finalize("STATEB", 100.0, 50.0)
        assert walk.finalized
        assert walk.end_state == "STATEB"
        assert walk.state_coverage == 100.0
        assert walk.transition_coverage == 50.0
        with pytest.raises(WalkError):
            walk.finalize("STATEB", 100.0, 50.0)

    def test_append_after_finalize(self):
        walk = Walk("STATEA")
        walk.finalize("STATEA", 0.0, 0.0)
        with pytest.raises(WalkError):
            walk.append(TransitionRecord("STATEA", "action1", "STATEB"))

    def test_str(self):
        walk = _walk(("STATEA", "action1", "STATEB"), ("STATEB", "action2", "STATEA"))
        walk.finalize("STATEA", 100.0, 100.0)
        assert str(walk) == "STATEA,action1 => STATEB,action2 => STATEA,STATEA\n"

    def test_summary(self):
        walk = _walk(("STATEA", "action1", "STATEB"), ("STATEB", "action2", "STATEA"))
        walk.finalize("STATEA", 100.0, 100.0)
        summary = walk.summary()
        assert summary["steps"] == 2
        assert summary["unique_transitions"] == 2
        assert summary["end_state"] == "STATEA"


class TestDriveUsing:
    def test_call_order(self):
        walk = _walk(
            ("STATEA", "action1", "STATEB"),
            ("STATEB", "action2", "STATEC"),
            ("STATEC", "action4", "STATEE"),
        )
        walk.finalize("STATEE", 80.0, 75.0)
        driver = RecordingDriver()
        walk.drive_using(driver)
        assert driver.calls == [
            "test_STATEA",
            "action1",
            "test_STATEB",
            "action2",
            "test_STATEC",
            "action4",
            "test_STATEE",
        ]
        assert driver.states_tested == ["STATEA", "STATEB", "STATEC", "STATEE"]
        assert driver.actions_called == ["action1", "action2", "action4"]

    def test_empty_walk_verifies_start_only(self):
        driver = RecordingDriver()
        Walk("STATEA").drive_using(driver)
        assert driver.calls == ["test_STATEA"]

    @pytest.mark.parametrize("bad_driver", ["a string", b"bytes", ["a", "list"], ("a", "tuple")])
    def test_rejects_plain_data(self, bad_driver):
        walk = _walk(("STATEA", "action1", "STATEB"))
        with pytest.raises(InvalidDriverError):
            walk.drive_using(bad_driver)

    def test_missing_method_propagates(self):
        class HalfDriver:
            def test_STATEA(self):
                pass

        walk = _walk(("STATEA", "action1", "STATEB"))
        with pytest.raises(AttributeError):
            walk.drive_using(HalfDriver())
