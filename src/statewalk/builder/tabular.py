"""Tabular state tables: layout detection and parsing.

Two layouts are understood. Both are handed in as an already-parsed grid of
string cells (a list of rows).

Linear (one transition per row)::

    Start State, Action,  End State
    STATEA,      action1, STATEB
    STATEB,      action2, STATEA

Matrix (source states down the side, destination states across the top; a
cell may name several actions separated by whitespace)::

    Start/End, STATEA,  STATEB
    STATEA,    ,        action1
    STATEB,    action2,
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from statewalk.core.transition import TransitionRecord
from statewalk.errors import (
    EmptyInputError,
    ErrorContext,
    InsufficientDataError,
    UnknownLayoutError,
)

logger = logging.getLogger(__name__)

Grid = Sequence[Sequence[str]]

LINEAR_HEADER = "Start State"
MATRIX_HEADER = "Start/End"

# Column positions in the linear layout.
START_STATE = 0
ACTION = 1
END_STATE = 2


class Layout(str, Enum):
    """Shape of a state table."""

    LINEAR = "linear"
    MATRIX = "matrix"


def _rows(grid: Grid) -> list[Sequence[str]]:
    """Drop rows that hold no text at all (blank lines in the source)."""
    return [row for row in grid if any(cell.strip() for cell in row)]


def _cell(row: Sequence[str], index: int) -> str:
    return row[index].strip() if index < len(row) else ""


def detect_layout(grid: Grid) -> Layout:
    """Detect the layout from the first row's first cell, case-insensitively.

    Raises:
        EmptyInputError: If the grid has no rows.
        UnknownLayoutError: If the corner cell is neither recognised header.
    """
    rows = _rows(grid)
    if not rows:
        raise EmptyInputError("State table is empty")

    top_left = rows[0][0].strip().lower()
    if top_left == MATRIX_HEADER.lower():
        layout = Layout.MATRIX
    elif top_left == LINEAR_HEADER.lower():
        layout = Layout.LINEAR
    else:
        raise UnknownLayoutError(
            f"Unable to detect whether this is a linear or matrix state table "
            f"(top left cell: {rows[0][0]!r})",
            suggestions=[
                f"Start a linear table with a '{LINEAR_HEADER}' header cell",
                f"Start a matrix table with a '{MATRIX_HEADER}' corner cell",
            ],
        )
    logger.debug("Detected %s state table", layout.value)
    return layout


def _check_row_count(rows: list[Sequence[str]]) -> None:
    if len(rows) == 0:
        raise EmptyInputError("State table is empty")
    if len(rows) == 1:
        raise InsufficientDataError(
            "Missing data in state table: header row only",
            context=ErrorContext(extra={"header": list(rows[0])}),
        )


def parse_linear(grid: Grid) -> list[TransitionRecord]:
    """Parse a linear table into transition records, in row order.

    The header row is ignored; every later row is ``(start, action, end)``.

    Raises:
        EmptyInputError: If the grid has no rows.
        InsufficientDataError: If the grid only has the header row.
    """
    rows = _rows(grid)
    _check_row_count(rows)

    transitions = []
    for row in rows[1:]:
        transition = TransitionRecord(
            _cell(row, START_STATE),
            _cell(row, ACTION),
            _cell(row, END_STATE),
        )
        logger.debug("Read in transition: %s", transition)
        transitions.append(transition)
    return transitions


def parse_matrix(grid: Grid) -> list[TransitionRecord]:
    """Parse a matrix table into transition records.

    Records come out row by row, then column by column, then in the order
    the actions are listed inside a cell.

    Raises:
        EmptyInputError: If the grid has no rows.
        InsufficientDataError: If the grid only has the header row.
    """
    rows = _rows(grid)
    _check_row_count(rows)

    destinations = [cell.strip() for cell in rows[0][1:]]
    transitions = []
    for row in rows[1:]:
        start = _cell(row, 0)
        for index, cell in enumerate(row[1:]):
            # Remove leading, trailing and repeated spaces
            contents = " ".join(cell.split())
            if not contents:
                continue
            end = destinations[index] if index < len(destinations) else ""
            for action in contents.split(" "):
                transition = TransitionRecord(start, action, end)
                logger.debug("Read in transition (matrix): %s", transition)
                transitions.append(transition)
    return transitions


def parse_table(grid: Grid) -> list[TransitionRecord]:
    """Detect the layout of ``grid`` and parse it accordingly."""
    layout = detect_layout(grid)
    if layout is Layout.MATRIX:
        return parse_matrix(grid)
    return parse_linear(grid)


__all__ = [
    "Grid",
    "Layout",
    "LINEAR_HEADER",
    "MATRIX_HEADER",
    "detect_layout",
    "parse_linear",
    "parse_matrix",
    "parse_table",
]
