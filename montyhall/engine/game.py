"""
Single-game mechanics for the Monty Hall simulation.

The steps of one game, in order:
1. Place the reward behind one of three doors (create_game)
2. Contestant picks a door (select_door)
3. Host opens a decoy door that is not the pick (open_goat_door)
4. Contestant stays or switches (change_door)
5. Final door is judged (determine_winner)

Random steps draw from an injectable RandomSource; ``random.Random``
satisfies it, so tests can pass a seeded instance.
"""

import random
from collections.abc import Sequence
from typing import Optional, Protocol, TypeVar

from montyhall.config.defaults import DOORS
from montyhall.engine.validation import (
    DoorResolutionError,
    GameValidationError,
    validate_assignment,
    validate_door,
)
from montyhall.models.game import DoorContent, GameAssignment, Outcome, Strategy

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can draw uniformly from a finite sequence."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


# Used when no random source is injected
_default_rng = random.Random()


def resolve_rng(rng: Optional[RandomSource]) -> RandomSource:
    return rng if rng is not None else _default_rng


def create_game(rng: Optional[RandomSource] = None) -> GameAssignment:
    """Create a new game: two decoys and one reward behind three doors.

    Each door is equally likely to hold the reward.

    Args:
        rng: Random source (module default if None)

    Returns:
        A fresh GameAssignment
    """
    reward_door = resolve_rng(rng).choice(DOORS)
    return GameAssignment.with_reward_at(reward_door)


def select_door(rng: Optional[RandomSource] = None) -> int:
    """Contestant's initial pick, uniform over doors 1-3.

    Args:
        rng: Random source (module default if None)

    Returns:
        Door number between 1 and 3
    """
    return resolve_rng(rng).choice(DOORS)


def open_goat_door(
    game: GameAssignment | Sequence[str | DoorContent],
    pick: int,
    rng: Optional[RandomSource] = None,
) -> int:
    """Host opens a decoy door that the contestant did not pick.

    If the contestant picked the reward, the host chooses at random between
    the two decoys. If the contestant picked a decoy, the host is forced to
    open the other decoy and no randomness is used.

    Args:
        game: Game assignment (or three labels)
        pick: Contestant's initial door
        rng: Random source (module default if None)

    Returns:
        Door number opened by the host

    Raises:
        GameValidationError: If the game or pick is invalid
        DoorResolutionError: If no decoy door can be opened
    """
    game = validate_assignment(game)
    pick = validate_door(pick, field="pick")

    candidates = [
        door for door in DOORS
        if door != pick and not game.is_reward(door)
    ]

    if game.is_reward(pick):
        if len(candidates) != 2:
            raise DoorResolutionError(
                f"Expected two decoy doors to choose from, found {candidates}"
            )
        return resolve_rng(rng).choice(candidates)

    if len(candidates) != 1:
        raise DoorResolutionError(
            f"Expected exactly one decoy door besides pick {pick}, found {candidates}"
        )
    return candidates[0]


def change_door(
    stay: bool | Strategy,
    revealed: int,
    pick: int,
) -> int:
    """Resolve the contestant's final door.

    Args:
        stay: True (or Strategy.STAY) to keep the pick, False (or
            Strategy.SWITCH) to switch
        revealed: Door opened by the host
        pick: Contestant's initial door

    Returns:
        The initial pick when staying, otherwise the one door that is
        neither opened nor picked

    Raises:
        GameValidationError: If doors are out of range, or revealed equals
            pick on a switch
        DoorResolutionError: If no unique door remains
    """
    if isinstance(stay, Strategy):
        stay = stay is Strategy.STAY

    pick = validate_door(pick, field="pick")
    revealed = validate_door(revealed, field="revealed")

    if stay:
        return pick

    if revealed == pick:
        raise GameValidationError(
            field="revealed",
            message="Host cannot open the contestant's door",
            value=revealed,
        )

    remaining = [door for door in DOORS if door != revealed and door != pick]
    if len(remaining) != 1:
        raise DoorResolutionError(
            f"Expected one door to switch to, found {remaining}"
        )
    return remaining[0]


def determine_winner(
    final_pick: int,
    game: GameAssignment | Sequence[str | DoorContent],
) -> Outcome:
    """Judge the final door.

    Args:
        final_pick: Contestant's final door
        game: Game assignment (or three labels)

    Returns:
        Outcome.WIN if the reward is behind final_pick, else Outcome.LOSE
    """
    game = validate_assignment(game)
    final_pick = validate_door(final_pick, field="final_pick")

    if game.is_reward(final_pick):
        return Outcome.WIN
    return Outcome.LOSE
