"""Pytest fixtures for statewalk tests."""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from statewalk.builder import ModelBuilder, load_table
from statewalk.core.machine import StateMachine
from statewalk.core.transition import TransitionRecord

FIXTURES = Path(__file__).parent / "fixtures"

# (file, states, transitions) for every valid table.
VALID_LINEAR = [("test1.csv", 2, 2), ("test4.csv", 5, 4), ("test10.csv", 5, 4), ("test9.csv", 5, 8)]
VALID_MATRIX = [
    ("test1_2d.csv", 2, 2),
    ("test4_2d.csv", 5, 4),
    ("test10_2d.csv", 5, 4),
    ("test9_2d.csv", 5, 8),
]
VALID_TABLES = VALID_LINEAR + VALID_MATRIX


class RecordingDriver:
    """Pretends to be a SUT driver, recording every call it receives."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        if not (name.startswith("test_STATE") or name.startswith("action")):
            raise AttributeError(name)

        def record() -> None:
            self.calls.append(name)

        return record

    @property
    def states_tested(self) -> list[str]:
        return [c[len("test_"):] for c in self.calls if c.startswith("test_")]

    @property
    def actions_called(self) -> list[str]:
        return [c for c in self.calls if not c.startswith("test_")]


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def two_state_machine() -> StateMachine:
    """STATEA -action1-> STATEB -action2-> STATEA."""
    return load_table(FIXTURES / "test1.csv", seed=7)


@pytest.fixture
def fork_machine() -> StateMachine:
    """A -> B -> C, then C forks to dead ends D and E."""
    return load_table(FIXTURES / "test4.csv", seed=7)


@pytest.fixture
def chain_machine() -> StateMachine:
    """STATEA through STATEH in a straight line."""
    return load_table(FIXTURES / "test5.csv", seed=7)


@pytest.fixture
def loop_machine() -> StateMachine:
    """Five states with loop backs and no dead ends."""
    return load_table(FIXTURES / "test9.csv", seed=7)


@pytest.fixture
def simple_guarded_builder() -> ModelBuilder:
    """action2 may run only once, and only after action1."""
    builder = ModelBuilder()

    @builder.action()
    def action1(context):
        context.set("done1", True)

    @builder.action()
    def action2(context):
        context.set("done2", True)

    @builder.guard("action2")
    def action2_allowed(context):
        return context.get("done1", False) and not context.get("done2", False)

    builder.attach_transition("STATEA", "action1", "STATEB")
    builder.attach_transition("STATEB", "action2", "STATEA")
    return builder


@pytest.fixture
def login_builder() -> ModelBuilder:
    """Content can only be viewed after logging in; logging in happens once."""
    builder = ModelBuilder()
    builder.define_action("view_content")
    builder.define_action("click_log_in", lambda context: context.set("logged_in", True))
    builder.define_action("click_home")
    builder.define_guard("view_content", lambda context: context.get("logged_in", False))
    builder.define_guard("click_log_in", lambda context: not context.get("logged_in", False))
    builder.attach_transition("HOME", "view_content", "SHOWING_CONTENT")
    builder.attach_transition("HOME", "click_log_in", "LOG_IN_COMPLETE")
    builder.attach_transition("LOG_IN_COMPLETE", "click_home", "HOME")
    return builder


@pytest.fixture
def driver() -> RecordingDriver:
    return RecordingDriver()


def make_transitions(*triples: tuple[str, str, str]) -> list[TransitionRecord]:
    return [TransitionRecord(*t) for t in triples]
