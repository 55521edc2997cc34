"""
Game orchestration and batch runs.

One game draws an assignment, a pick and a host reveal once, then resolves
and judges BOTH strategies against that same draw. A batch repeats this n
times independently and reports the row-normalized proportion table.
"""

import random
from collections.abc import Iterator
from typing import Optional

from rich.console import Console

from montyhall.config.defaults import (
    DEFAULT_DECIMALS,
    DEFAULT_N_GAMES,
    DEFAULT_REPORT_TITLE,
)
from montyhall.config.schema import MontyHallConfig, get_default_config
from montyhall.engine.game import (
    RandomSource,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    resolve_rng,
    select_door,
)
from montyhall.engine.stats import count_outcomes, proportion_table
from montyhall.engine.validation import validate_decimals, validate_game_count
from montyhall.io.report_writer import print_proportion_table
from montyhall.models.game import BatchResult, GameResult, Strategy


def play_game(rng: Optional[RandomSource] = None) -> GameResult:
    """Play one game and evaluate both strategies.

    Args:
        rng: Random source (module default if None)

    Returns:
        GameResult with a STAY and a SWITCH outcome for the same game
    """
    rng = resolve_rng(rng)

    game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(game, first_pick, rng)

    final_picks = {
        strategy: change_door(strategy, opened_door, first_pick)
        for strategy in Strategy
    }
    outcomes = {
        strategy: determine_winner(final_pick, game)
        for strategy, final_pick in final_picks.items()
    }

    return GameResult(
        assignment=game,
        initial_pick=first_pick,
        revealed_door=opened_door,
        final_picks=final_picks,
        outcomes=outcomes,
    )


def iter_games(n: int, rng: Optional[RandomSource] = None) -> Iterator[GameResult]:
    """Lazily play n independent games.

    The count is checked immediately, before the first game is drawn.

    Raises:
        GameValidationError: If n is not a positive integer
    """
    n = validate_game_count(n)
    rng = resolve_rng(rng)
    return (play_game(rng) for _ in range(n))


def play_n_games(
    n: int = DEFAULT_N_GAMES,
    rng: Optional[RandomSource] = None,
    decimals: int = DEFAULT_DECIMALS,
    console: Optional[Console] = None,
    show: bool = True,
    title: Optional[str] = None,
) -> BatchResult:
    """Play n games and print the proportion of wins/losses per strategy.

    Args:
        n: Number of games (positive integer)
        rng: Random source (module default if None)
        decimals: Rounding precision for the printed table
        console: Console to print to (module console if None)
        show: Print the proportion table
        title: Table title (default title if None)

    Returns:
        BatchResult with every game in play order

    Raises:
        GameValidationError: If n is not a positive integer or decimals is
            outside 0-6
    """
    decimals = validate_decimals(decimals)
    batch = BatchResult(games=list(iter_games(n, rng)))

    if show:
        table = proportion_table(count_outcomes(batch.games), decimals=decimals)
        print_proportion_table(
            table,
            decimals=decimals,
            title=title or DEFAULT_REPORT_TITLE,
            output=console,
        )

    return batch


class MontyHallSimulation:
    """Seeded simulation runner.

    Owns a private random generator so that runs are reproducible without
    touching the module-level default.

    Usage:
        simulation = MontyHallSimulation(random_seed=42)
        batch = simulation.run(1000)
    """

    def __init__(
        self,
        config: Optional[MontyHallConfig] = None,
        random_seed: Optional[int] = None,
    ):
        """Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            random_seed: Random seed; falls back to config.simulation.random_seed
        """
        self.config = config or get_default_config()
        if random_seed is None:
            random_seed = self.config.simulation.random_seed
        self._random_seed = random_seed
        self._rng = random.Random(random_seed)

    def set_random_seed(self, seed: Optional[int]) -> None:
        """Set random seed for reproducible simulations.

        Args:
            seed: Random seed (None for system random)
        """
        self._random_seed = seed
        self._rng = random.Random(seed)

    def play_game(self) -> GameResult:
        """Play one game with this simulation's generator."""
        return play_game(self._rng)

    def iter_games(self, n: Optional[int] = None) -> Iterator[GameResult]:
        """Lazily play n games (config default if None)."""
        if n is None:
            n = self.config.simulation.n_games
        return iter_games(n, self._rng)

    def run(
        self,
        n: Optional[int] = None,
        show: Optional[bool] = None,
        console: Optional[Console] = None,
    ) -> BatchResult:
        """Run a batch using the configured defaults.

        Args:
            n: Number of games (config.simulation.n_games if None)
            show: Print the proportion table (config.report.show_table if None)
            console: Console to print to

        Returns:
            BatchResult for the batch
        """
        report = self.config.report
        return play_n_games(
            n=self.config.simulation.n_games if n is None else n,
            rng=self._rng,
            decimals=report.decimals,
            console=console,
            show=report.show_table if show is None else show,
            title=report.title,
        )

    def reset(self) -> None:
        """Restart the generator from the initial seed."""
        self._rng = random.Random(self._random_seed)
