"""
MONTYHALL Command-Line Interface.

Play a single game with full detail, or simulate a batch and compare the
stay and switch strategies.
"""

import sys
from pathlib import Path
from typing import Any, Optional

import click
from rich.console import Console
from rich.panel import Panel

from montyhall import __version__
from montyhall.config.schema import MontyHallConfig, get_default_config
from montyhall.engine.simulation import MontyHallSimulation
from montyhall.engine.stats import count_outcomes, win_rates
from montyhall.io import ResultsExportError, export_results, print_game_result
from montyhall.models.game import Outcome, Strategy

console = Console()


# =============================================================================
# Main CLI Group
# =============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="MONTYHALL")
def cli() -> None:
    """
    MONTYHALL - A Monty Hall Problem Simulation

    Three doors, one car, two goats. Should you switch?
    """


# =============================================================================
# Commands
# =============================================================================


@cli.command()
@click.option("--seed", "-s", type=int, default=None, help="Random seed for reproducibility")
def play(seed: Optional[int]) -> None:
    """Play a single game and show both strategies."""
    simulation = MontyHallSimulation(random_seed=seed)
    result = simulation.play_game()

    console.print()
    console.print(Panel.fit(
        f"You picked door [bold]{result.initial_pick}[/bold]. "
        f"The host opened door [bold]{result.revealed_door}[/bold] to show a goat.",
        border_style="blue",
    ))
    print_game_result(result, output=console)

    winner = "switching" if result.outcome(Strategy.SWITCH) is Outcome.WIN else "staying"
    console.print(f"\n[bold]This time, {winner} wins.[/bold]")


@cli.command()
@click.option("--games", "-n", type=int, default=None, help="Number of games to play")
@click.option("--seed", "-s", type=int, default=None, help="Random seed for reproducibility")
@click.option("--decimals", "-d", type=int, default=None, help="Decimal places in the table")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Configuration file (.json/.yaml)")
@click.option("--output", "-o", type=click.Path(), help="Export results (.json or .csv)")
def simulate(
    games: Optional[int],
    seed: Optional[int],
    decimals: Optional[int],
    config_path: Optional[str],
    output: Optional[str],
) -> None:
    """Play many games and report win/loss proportions per strategy."""
    try:
        sim_config = _load_config(config_path, seed=seed, decimals=decimals)
        simulation = MontyHallSimulation(config=sim_config)
        batch = simulation.run(n=games, show=True, console=console)
    except (ValueError, ImportError, FileNotFoundError) as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    rates = win_rates(count_outcomes(batch.games))
    console.print()
    console.print(f"Games played: {batch.n_games:,}")
    for strategy, rate in rates.items():
        console.print(f"  {strategy.value.capitalize()} win rate: {rate:.1%}")

    if output:
        try:
            path = export_results(batch, output)
            console.print(f"[green]Results written to {path}[/green]")
        except ResultsExportError as e:
            console.print(f"[red]Failed to export: {e}[/red]")
            sys.exit(1)


@cli.command()
@click.option("--output", "-o", type=click.Path(), help="Write the default config to this file")
def config(output: Optional[str]) -> None:
    """Show the default configuration."""
    default = get_default_config()
    if output:
        try:
            default.to_file(output)
        except (ValueError, ImportError, OSError) as e:
            console.print(f"[red]Failed to write config: {e}[/red]")
            sys.exit(1)
        console.print(f"[green]Configuration written to {output}[/green]")
        return

    console.print_json(default.model_dump_json())


# =============================================================================
# Helpers
# =============================================================================


def _load_config(
    config_path: Optional[str],
    seed: Optional[int] = None,
    decimals: Optional[int] = None,
) -> MontyHallConfig:
    """Load a config file (or defaults) and apply command-line overrides."""
    if config_path:
        base = MontyHallConfig.from_file(Path(config_path))
    else:
        base = get_default_config()

    overrides: dict[str, Any] = {}
    if seed is not None:
        overrides.setdefault("simulation", {})["random_seed"] = seed
    if decimals is not None:
        overrides.setdefault("report", {})["decimals"] = decimals

    return base.merge(overrides) if overrides else base


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    cli()
