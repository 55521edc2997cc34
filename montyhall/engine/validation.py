"""
Input validation for the Monty Hall engine.

Every engine function checks its inputs before computing anything, so an
invalid game never produces a silently wrong door or outcome.
"""

from collections.abc import Sequence
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from montyhall.config.defaults import DOORS, MAX_DECIMALS
from montyhall.models.game import DoorContent, GameAssignment


class GameValidationError(ValueError):
    """Raised when an input violates a game invariant."""

    def __init__(
        self,
        field: str,
        message: str,
        value: Any = None,
        suggestion: Optional[str] = None,
    ):
        self.field = field
        self.message = message
        self.value = value
        self.suggestion = suggestion
        super().__init__(str(self))

    def __str__(self) -> str:
        msg = f"{self.field}: {self.message}"
        if self.value is not None:
            msg += f" (got: {self.value!r})"
        if self.suggestion:
            msg += f" - {self.suggestion}"
        return msg


class DoorResolutionError(RuntimeError):
    """Raised when no unique door satisfies a reveal or switch.

    Unreachable for valid inputs.
    """

    pass


def validate_door(door: Any, field: str = "door") -> int:
    """Validate a door number.

    Args:
        door: Door number to check
        field: Name used in the error message

    Returns:
        The door number

    Raises:
        GameValidationError: If door is not an int in 1-3
    """
    if isinstance(door, bool) or not isinstance(door, int):
        raise GameValidationError(
            field=field,
            message="Door must be an integer",
            value=door,
        )
    if door not in DOORS:
        raise GameValidationError(
            field=field,
            message=f"Door must be one of {DOORS}",
            value=door,
        )
    return door


def validate_assignment(
    game: GameAssignment | Sequence[str | DoorContent],
) -> GameAssignment:
    """Validate a game assignment, coercing plain label sequences.

    Args:
        game: GameAssignment or sequence of three labels

    Returns:
        A valid GameAssignment

    Raises:
        GameValidationError: If the layout is not three doors with one reward
    """
    if isinstance(game, GameAssignment):
        return game
    if isinstance(game, str) or not isinstance(game, Sequence):
        raise GameValidationError(
            field="game",
            message="Expected a GameAssignment or a sequence of door labels",
            value=game,
        )

    try:
        return GameAssignment.from_labels(game)
    except PydanticValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else str(e)
        raise GameValidationError(
            field="game",
            message=reason,
            value=list(game),
            suggestion="Use three doors with exactly one reward",
        ) from e


def validate_game_count(n: Any) -> int:
    """Validate the number of games for a batch run.

    Args:
        n: Requested number of games

    Returns:
        The game count

    Raises:
        GameValidationError: If n is not a positive integer
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise GameValidationError(
            field="n",
            message="Number of games must be an integer",
            value=n,
        )
    if n <= 0:
        raise GameValidationError(
            field="n",
            message="Number of games must be positive",
            value=n,
            suggestion="Pass n >= 1",
        )
    return n


def validate_decimals(decimals: Any) -> int:
    """Validate the rounding precision of a proportion table.

    Raises:
        GameValidationError: If decimals is not an int in 0-MAX_DECIMALS
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise GameValidationError(
            field="decimals",
            message="Decimals must be an integer",
            value=decimals,
        )
    if not 0 <= decimals <= MAX_DECIMALS:
        raise GameValidationError(
            field="decimals",
            message=f"Decimals must be between 0 and {MAX_DECIMALS}",
            value=decimals,
        )
    return decimals
