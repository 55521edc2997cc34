"""
MONTYHALL - A Monty Hall Problem Simulation

A teaching simulation of the three-door game show puzzle: one door hides a
car, two hide goats, the host always opens a goat door, and the contestant
decides whether to stay or switch.

This package provides:
- Single-game functions (create, pick, reveal, stay/switch, judge)
- Batch runs with a win/loss proportion table per strategy
- JSON/CSV export of batch results
- CLI interface for playing and simulating
"""

__version__ = "0.1.0"

from montyhall.config.defaults import DEFAULT_CONFIG
from montyhall.engine import (
    DoorResolutionError,
    GameValidationError,
    MontyHallSimulation,
    change_door,
    create_game,
    determine_winner,
    iter_games,
    open_goat_door,
    play_game,
    play_n_games,
    select_door,
)
from montyhall.models import (
    BatchResult,
    DoorContent,
    GameAssignment,
    GameResult,
    Outcome,
    Strategy,
)

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    # Game steps
    "create_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "determine_winner",
    # Runs
    "play_game",
    "iter_games",
    "play_n_games",
    "MontyHallSimulation",
    # Models
    "BatchResult",
    "DoorContent",
    "GameAssignment",
    "GameResult",
    "Outcome",
    "Strategy",
    # Errors
    "DoorResolutionError",
    "GameValidationError",
]
