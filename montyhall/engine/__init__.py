"""
Monty Hall simulation engine.

This module contains the core game logic:
- Game creation, door selection and the host's reveal
- Stay/switch resolution and outcome judging
- Single-game orchestration and batch runs
- Outcome counting and proportion tables
- Input validation
"""

from montyhall.engine.game import (
    RandomSource,
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    resolve_rng,
    select_door,
)
from montyhall.engine.stats import (
    count_outcomes,
    empty_counts,
    proportion_table,
    win_rates,
)
from montyhall.engine.validation import (
    DoorResolutionError,
    GameValidationError,
    validate_assignment,
    validate_decimals,
    validate_door,
    validate_game_count,
)

__all__ = [
    # Game
    "RandomSource",
    "change_door",
    "create_game",
    "determine_winner",
    "open_goat_door",
    "resolve_rng",
    "select_door",
    # Stats
    "count_outcomes",
    "empty_counts",
    "proportion_table",
    "win_rates",
    # Validation
    "DoorResolutionError",
    "GameValidationError",
    "validate_assignment",
    "validate_decimals",
    "validate_door",
    "validate_game_count",
    # Simulation
    "MontyHallSimulation",
    "iter_games",
    "play_game",
    "play_n_games",
]

from montyhall.engine.simulation import (
    MontyHallSimulation,
    iter_games,
    play_game,
    play_n_games,
)
