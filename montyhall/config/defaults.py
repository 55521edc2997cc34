"""
Default configuration values for the Monty Hall simulation.

The game itself has no tunable parameters: three doors, one reward and two
decoys. The values below cover batch size and reporting only.
"""

from typing import Any

# =============================================================================
# GAME LAYOUT
# =============================================================================

# Door numbers are 1-indexed, matching how the puzzle is usually told.
DOORS: tuple[int, int, int] = (1, 2, 3)

DECOY_LABEL = "decoy"
REWARD_LABEL = "reward"

# Labels from the TV-show framing, accepted when parsing assignments.
CLASSIC_LABELS: dict[str, str] = {
    "goat": DECOY_LABEL,
    "car": REWARD_LABEL,
}

# One reward, two decoys
REWARD_COUNT = 1

# =============================================================================
# BATCH RUNS
# =============================================================================

DEFAULT_N_GAMES = 100

# Proportion table rounding
DEFAULT_DECIMALS = 2
MAX_DECIMALS = 6

DEFAULT_REPORT_TITLE = "Outcome proportions by strategy"


# =============================================================================
# LEGACY DICT CONFIG
# =============================================================================

DEFAULT_CONFIG: dict[str, Any] = {
    "simulation": {
        "n_games": DEFAULT_N_GAMES,
        "random_seed": None,
    },
    "report": {
        "decimals": DEFAULT_DECIMALS,
        "show_table": True,
        "title": DEFAULT_REPORT_TITLE,
    },
}
