"""CLI commands for statewalk."""

from __future__ import annotations

import sys
from typing import NoReturn

import click

from statewalk.builder import detect_table_layout, load_table
from statewalk.config import WalkConfig, load_config
from statewalk.errors import StateWalkError
from statewalk.log import setup_logging
from statewalk.reporters import ConsoleReporter


def _fail(error: StateWalkError) -> NoReturn:
    click.echo(f"Error: {error.message}", err=True)
    for suggestion in error.suggestions:
        click.echo(f"  - {suggestion}", err=True)
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """statewalk - random walks over finite-state models."""
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
    except StateWalkError as e:
        _fail(e)
    if verbose:
        config_obj.debug = True

    ctx.obj["config"] = config_obj
    ctx.obj["verbose"] = verbose

    setup_logging(config_obj.debug)


@cli.command()
@click.argument("table", type=click.Path())
def detect(table: str) -> None:
    """Print the layout of a CSV state table: linear or matrix."""
    try:
        layout = detect_table_layout(table)
    except StateWalkError as e:
        _fail(e)
    click.echo(layout.value)


@cli.command()
@click.argument("table", type=click.Path())
@click.pass_context
def describe(ctx: click.Context, table: str) -> None:
    """Summarise the states and actions of a state table."""
    config: WalkConfig = ctx.obj["config"]
    try:
        machine = load_table(table, debug=config.debug)
    except StateWalkError as e:
        _fail(e)
    ConsoleReporter().report_model(machine)


@cli.command()
@click.argument("table", type=click.Path())
@click.option("--start", "-s", "start_state", required=True, help="State to start walking from")
@click.option("--steps", "-n", type=int, default=None, help="Maximum number of steps")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible walk")
@click.pass_context
def walk(
    ctx: click.Context,
    table: str,
    start_state: str,
    steps: int | None,
    seed: int | None,
) -> None:
    """Generate one random walk over a state table and report it."""
    config: WalkConfig = ctx.obj["config"]
    step_limit = steps if steps is not None else config.step_limit
    walk_seed = seed if seed is not None else config.seed

    try:
        machine = load_table(table, debug=config.debug, seed=walk_seed)
        result = machine.random_walk(start_state, step_limit)
    except StateWalkError as e:
        _fail(e)
    ConsoleReporter().report_walk(result)


@cli.command()
@click.argument("table", type=click.Path())
@click.option("--output", "-o", type=click.Path(), default=None, help="Write DOT text to file")
@click.option("--name", default=None, help="Graph name")
@click.pass_context
def dot(ctx: click.Context, table: str, output: str | None, name: str | None) -> None:
    """Export a state table as a Graphviz DOT graph."""
    config: WalkConfig = ctx.obj["config"]
    try:
        machine = load_table(table, debug=config.debug)
        graph = machine.create_graph(
            name=name or config.graph_name,
            node_shape=config.node_shape,
            graph_type=config.graph_type,
            guard_prefix=config.guard_prefix,
        )
        text = graph.to_dot()
    except StateWalkError as e:
        _fail(e)

    if output:
        graph.output(output)
        click.echo(f"Graph written to {output}")
    else:
        click.echo(text, nl=False)
