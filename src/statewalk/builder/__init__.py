"""Building state models from tables or from code."""

from statewalk.builder.tabular import (
    Layout,
    detect_layout,
    parse_linear,
    parse_matrix,
    parse_table,
)
from statewalk.builder.dsl import ModelBuilder, build_from_transitions
from statewalk.builder.loader import detect_table_layout, load_table, read_grid, read_table

__all__ = [
    "Layout",
    "detect_layout",
    "parse_linear",
    "parse_matrix",
    "parse_table",
    "ModelBuilder",
    "build_from_transitions",
    "detect_table_layout",
    "load_table",
    "read_grid",
    "read_table",
]
