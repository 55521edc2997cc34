"""
Console reporting for simulation results.

Renders the strategy x outcome proportion table and single games with
rich, plus a plain-text table for callers without a terminal.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table

from montyhall.config.defaults import DEFAULT_DECIMALS, DEFAULT_REPORT_TITLE
from montyhall.models.game import GameResult, Outcome, ProportionTable, Strategy

console = Console()

# Proportion table columns, alphabetical: LOSE then WIN
OUTCOME_COLUMNS = tuple(sorted(Outcome, key=lambda o: o.value))


def build_proportion_table(
    table: ProportionTable,
    decimals: int = DEFAULT_DECIMALS,
    title: str = DEFAULT_REPORT_TITLE,
) -> Table:
    """Build a rich Table for a proportion table."""
    rich_table = Table(title=title, box=None)
    rich_table.add_column("Strategy")
    for outcome in OUTCOME_COLUMNS:
        rich_table.add_column(outcome.value, justify="right")

    for strategy in Strategy:
        row = table.get(strategy, {})
        rich_table.add_row(
            strategy.value,
            *(f"{row.get(outcome, 0.0):.{decimals}f}" for outcome in OUTCOME_COLUMNS),
        )
    return rich_table


def print_proportion_table(
    table: ProportionTable,
    decimals: int = DEFAULT_DECIMALS,
    title: str = DEFAULT_REPORT_TITLE,
    output: Optional[Console] = None,
) -> None:
    """Print a proportion table to the console."""
    (output or console).print(build_proportion_table(table, decimals, title))


def format_proportion_table(
    table: ProportionTable,
    decimals: int = DEFAULT_DECIMALS,
) -> str:
    """Plain-text proportion table.

    Example::

        strategy  LOSE  WIN
        stay      0.66  0.34
        switch    0.34  0.66
    """
    outcomes = OUTCOME_COLUMNS
    width = max(decimals + 2, *(len(o.value) for o in outcomes))
    label_width = max(len("strategy"), *(len(s.value) for s in Strategy))

    lines = [
        "strategy".ljust(label_width)
        + "".join(f"  {o.value:>{width}}" for o in outcomes)
    ]
    for strategy in Strategy:
        row = table.get(strategy, {})
        lines.append(
            strategy.value.ljust(label_width)
            + "".join(f"  {row.get(o, 0.0):>{width}.{decimals}f}" for o in outcomes)
        )
    return "\n".join(lines)


def print_game_result(result: GameResult, output: Optional[Console] = None) -> None:
    """Print a single game: doors, pick, reveal and both outcomes."""
    out = output or console

    doors = Table(title="Doors", box=None)
    doors.add_column("Door", justify="right")
    doors.add_column("Behind")
    doors.add_column("")
    for door, content in enumerate(result.assignment.doors, start=1):
        marks = []
        if door == result.initial_pick:
            marks.append("picked")
        if door == result.revealed_door:
            marks.append("opened")
        doors.add_row(str(door), content.value, ", ".join(marks))
    out.print(doors)

    outcomes = Table(title="Outcomes", box=None)
    outcomes.add_column("Strategy")
    outcomes.add_column("Final door", justify="right")
    outcomes.add_column("Outcome")
    for strategy, outcome in result.rows():
        color = "green" if outcome is Outcome.WIN else "red"
        outcomes.add_row(
            strategy.value,
            str(result.final_picks[strategy]),
            f"[{color}]{outcome.value}[/{color}]",
        )
    out.print(outcomes)
