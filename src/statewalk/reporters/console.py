"""Console reporter for terminal output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from statewalk.core.machine import StateMachine
from statewalk.core.walk import Walk


class ConsoleReporter:
    """Renders models and walks to the terminal with rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def report_model(self, machine: StateMachine) -> None:
        """Output a summary of a model and the actions offered per state."""
        model = machine.adjacency_model
        summary = Table.grid(padding=(0, 2))
        summary.add_column(style="bold")
        summary.add_column()
        summary.add_row("States", str(model.state_count))
        summary.add_row("Transitions", str(model.transition_count))
        summary.add_row("Actions", str(len(machine.actions)))
        guarded = machine.guarded_actions
        summary.add_row("Guarded", ", ".join(str(a) for a in guarded) if guarded else "-")
        self.console.print(Panel(summary, title="State Model", expand=False))

        table = Table(show_header=True, header_style="bold dim", padding=(0, 1))
        table.add_column("State", style="cyan")
        table.add_column("Actions")
        for state in model.iter_states():
            actions = machine.actions_for_state(state)
            if actions:
                cell = Text(", ".join(str(a) for a in actions))
            else:
                cell = Text("<No Actions>", style="dim")
            table.add_row(str(state), cell)
        self.console.print(table)

    def report_walk(self, walk: Walk) -> None:
        """Output each step of a walk followed by its coverage figures."""
        table = Table(
            title=f"Walk from {walk.start_state}",
            show_header=True,
            header_style="bold dim",
            padding=(0, 1),
        )
        table.add_column("#", justify="right", width=3)
        table.add_column("Start", style="cyan")
        table.add_column("Action", style="bold")
        table.add_column("End", style="cyan")
        for index, step in enumerate(walk, start=1):
            table.add_row(str(index), str(step.start), str(step.action), str(step.end))
        self.console.print(table)

        self.console.print(
            f"Ended in [bold]{walk.end_state}[/bold] after {len(walk)} step(s): "
            f"state coverage [green]{self._percent(walk.state_coverage)}[/green], "
            f"transition coverage [green]{self._percent(walk.transition_coverage)}[/green]"
        )

    def _percent(self, value: float | None) -> str:
        if value is None:
            return "-"
        return f"{value:.1f}%"
