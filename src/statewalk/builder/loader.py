"""Loading state tables from CSV files."""

from __future__ import annotations

import csv
import io
import logging
import random
from pathlib import Path

from statewalk.builder.dsl import build_from_transitions
from statewalk.builder.tabular import Grid, Layout, detect_layout, parse_linear, parse_matrix
from statewalk.core.machine import StateMachine
from statewalk.core.transition import TransitionRecord
from statewalk.errors import EmptyInputError, ErrorContext, MissingSourceError

logger = logging.getLogger(__name__)


def read_grid(path: str | Path) -> Grid:
    """Read a CSV file into rows of cells.

    Carriage returns are turned into newlines first, so files saved with
    DOS or old Mac line endings parse the same as Unix ones.
    """
    text = Path(path).read_text().replace("\r", "\n")
    return [row for row in csv.reader(io.StringIO(text))]


def _check_source(path: Path) -> None:
    if not path.exists():
        raise MissingSourceError(
            f"State table file not found: {path}",
            context=ErrorContext(source=str(path)),
        )
    if path.stat().st_size == 0:
        raise EmptyInputError(
            f"State table file is empty: {path}",
            context=ErrorContext(source=str(path)),
        )


def detect_table_layout(path: str | Path) -> Layout:
    """Detect whether a CSV file holds a linear or a matrix state table.

    Raises:
        MissingSourceError: If the file does not exist.
        EmptyInputError: If the file is zero bytes long.
        UnknownLayoutError: If the header is not recognised.
    """
    source = Path(path)
    _check_source(source)
    logger.debug("Detecting on file: %s", source)
    return detect_layout(read_grid(source))


def read_table(path: str | Path) -> list[TransitionRecord]:
    """Read the raw transition list out of a CSV state table of either layout."""
    source = Path(path)
    _check_source(source)
    grid = read_grid(source)
    layout = detect_layout(grid)
    logger.debug("Reading %s table: %s", layout.value, source)
    if layout is Layout.MATRIX:
        return parse_matrix(grid)
    return parse_linear(grid)


def load_table(
    path: str | Path,
    debug: bool = False,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> StateMachine:
    """Load a CSV state table into a runnable StateMachine.

    Every action named in the table becomes a callback-less action on the
    machine.
    """
    transitions = read_table(path)
    machine = build_from_transitions(transitions, debug=debug, rng=rng, seed=seed)
    logger.debug("Loaded %s: %r", path, machine)
    return machine


__all__ = ["read_grid", "detect_table_layout", "read_table", "load_table"]
