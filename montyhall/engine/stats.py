"""
Aggregation of game outcomes.

Counts WIN/LOSE per strategy and turns the counts into a row-normalized
proportion table: each strategy's proportions sum to 1 before rounding.
"""

from collections.abc import Iterable

from montyhall.config.defaults import DEFAULT_DECIMALS
from montyhall.models.game import (
    CountTable,
    GameResult,
    Outcome,
    ProportionTable,
    Strategy,
)


def empty_counts() -> CountTable:
    """Zero-filled count table with every strategy and outcome."""
    return {strategy: {outcome: 0 for outcome in Outcome} for strategy in Strategy}


def count_outcomes(games: Iterable[GameResult]) -> CountTable:
    """Count outcomes per strategy.

    Args:
        games: Game results (a BatchResult's ``games`` or any iterable)

    Returns:
        Mapping of strategy -> outcome -> count
    """
    counts = empty_counts()
    for game in games:
        for strategy, outcome in game.rows():
            counts[strategy][outcome] += 1
    return counts


def proportion_table(
    counts: CountTable,
    decimals: int = DEFAULT_DECIMALS,
) -> ProportionTable:
    """Row-normalize a count table.

    Args:
        counts: Strategy -> outcome -> count
        decimals: Rounding precision

    Returns:
        Strategy -> outcome -> proportion of that strategy's games.
        A strategy with no games gets zeros.
    """
    table: ProportionTable = {}
    for strategy in Strategy:
        row = counts.get(strategy, {})
        total = sum(row.values())
        table[strategy] = {
            outcome: round(row.get(outcome, 0) / total, decimals) if total else 0.0
            for outcome in Outcome
        }
    return table


def win_rates(counts: CountTable) -> dict[Strategy, float]:
    """Unrounded WIN proportion per strategy."""
    rates = {}
    for strategy in Strategy:
        row = counts.get(strategy, {})
        total = sum(row.values())
        rates[strategy] = row.get(Outcome.WIN, 0) / total if total else 0.0
    return rates
