"""
Game models for the Monty Hall simulation.

A game is three doors, exactly one of which hides the reward (the car);
the other two hide decoys (goats). Doors are numbered 1-3.

Results keep the whole game instance alongside the per-strategy outcomes
so that STAY and SWITCH can be compared on the same draw.
"""

from collections.abc import Sequence
from enum import Enum

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from montyhall.config.defaults import (
    CLASSIC_LABELS,
    DOORS,
    REWARD_COUNT,
)


class DoorContent(str, Enum):
    """What sits behind a door."""

    DECOY = "decoy"    # goat
    REWARD = "reward"  # car

    @classmethod
    def parse(cls, label: "str | DoorContent") -> "DoorContent":
        """Parse a door label.

        Accepts the enum itself, "decoy"/"reward" and the classic
        "goat"/"car" labels, case-insensitively.

        Raises:
            ValueError: If the label is not recognised
        """
        if isinstance(label, cls):
            return label
        if not isinstance(label, str):
            raise ValueError(f"Door label must be a string, got {type(label).__name__}")
        key = label.strip().lower()
        key = CLASSIC_LABELS.get(key, key)
        try:
            return cls(key)
        except ValueError as e:
            raise ValueError(f"Unknown door label: {label!r}") from e


class Strategy(str, Enum):
    """Contestant strategy after the host opens a door."""

    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    """Result of a game for one strategy."""

    WIN = "WIN"
    LOSE = "LOSE"


class GameAssignment(BaseModel):
    """Placement of the reward and decoys behind the three doors.

    Immutable once created. Position ``i`` in ``doors`` is door ``i + 1``.
    """

    model_config = ConfigDict(frozen=True)

    doors: tuple[DoorContent, ...] = Field(
        description="Contents of doors 1, 2 and 3 in order"
    )

    @field_validator("doors", mode="before")
    @classmethod
    def parse_labels(cls, v: Sequence[str | DoorContent]) -> tuple[DoorContent, ...]:
        """Coerce raw labels into DoorContent values."""
        if isinstance(v, str):
            raise ValueError("Expected a sequence of door labels, got a single string")
        return tuple(DoorContent.parse(label) for label in v)

    @field_validator("doors")
    @classmethod
    def check_layout(cls, v: tuple[DoorContent, ...]) -> tuple[DoorContent, ...]:
        """Exactly three doors, exactly one reward."""
        if len(v) != len(DOORS):
            raise ValueError(f"Expected {len(DOORS)} doors, got {len(v)}")
        rewards = sum(1 for content in v if content is DoorContent.REWARD)
        if rewards != REWARD_COUNT:
            raise ValueError(f"Expected exactly one reward door, got {rewards}")
        return v

    @classmethod
    def from_labels(cls, labels: Sequence[str | DoorContent]) -> "GameAssignment":
        """Create from a sequence of three labels, e.g. ``["goat", "car", "goat"]``."""
        return cls(doors=tuple(labels))

    @classmethod
    def with_reward_at(cls, door: int) -> "GameAssignment":
        """Create the assignment with the reward behind ``door``."""
        if door not in DOORS:
            raise ValueError(f"Door must be one of {DOORS}, got {door}")
        return cls(
            doors=tuple(
                DoorContent.REWARD if d == door else DoorContent.DECOY for d in DOORS
            )
        )

    def content_at(self, door: int) -> DoorContent:
        """Get the content behind a door (1-indexed)."""
        if door not in DOORS:
            raise ValueError(f"Door must be one of {DOORS}, got {door}")
        return self.doors[door - 1]

    def is_reward(self, door: int) -> bool:
        """Check whether the reward is behind ``door``."""
        return self.content_at(door) is DoorContent.REWARD

    @property
    def reward_door(self) -> int:
        """Door number hiding the reward."""
        return self.doors.index(DoorContent.REWARD) + 1

    @property
    def decoy_doors(self) -> tuple[int, ...]:
        """Door numbers hiding decoys, in ascending order."""
        return tuple(d for d in DOORS if self.doors[d - 1] is DoorContent.DECOY)

    def labels(self) -> list[str]:
        """Plain string labels in door order."""
        return [content.value for content in self.doors]


DoorNumber = Annotated[int, Field(ge=1, le=3)]

# Strategy -> outcome -> count, and the row-normalized form of the same table
CountTable = dict[Strategy, dict[Outcome, int]]
ProportionTable = dict[Strategy, dict[Outcome, float]]


class GameResult(BaseModel):
    """Both strategies' outcomes for one game instance.

    STAY and SWITCH share the assignment, initial pick and revealed door.
    A result must be internally consistent: one entry per strategy, a
    revealed decoy other than the pick, and outcomes that match the
    final doors.
    """

    assignment: GameAssignment
    initial_pick: DoorNumber = Field(description="Contestant's first door")
    revealed_door: DoorNumber = Field(description="Decoy door opened by the host")
    final_picks: dict[Strategy, DoorNumber] = Field(
        description="Final door for each strategy"
    )
    outcomes: dict[Strategy, Outcome] = Field(
        description="WIN/LOSE for each strategy"
    )

    @model_validator(mode="after")
    def check_consistency(self) -> "GameResult":
        """Validate the game against its own assignment."""
        expected = set(Strategy)
        if set(self.final_picks) != expected or set(self.outcomes) != expected:
            raise ValueError("Expected exactly one final pick and one outcome per strategy")
        if self.revealed_door == self.initial_pick:
            raise ValueError("Revealed door cannot be the initial pick")
        if self.assignment.is_reward(self.revealed_door):
            raise ValueError("Revealed door cannot hide the reward")
        for strategy in Strategy:
            door = self.final_picks[strategy]
            won = self.outcomes[strategy] is Outcome.WIN
            if won != self.assignment.is_reward(door):
                raise ValueError(
                    f"Outcome for {strategy.value} does not match door {door}"
                )
        return self

    def outcome(self, strategy: Strategy) -> Outcome:
        """Get the outcome for a strategy."""
        return self.outcomes[Strategy(strategy)]

    def rows(self) -> list[tuple[Strategy, Outcome]]:
        """(strategy, outcome) rows, STAY first."""
        return [(strategy, self.outcomes[strategy]) for strategy in Strategy]


class BatchResult(BaseModel):
    """Ordered results of a batch of independent games."""

    games: list[GameResult] = Field(default_factory=list)

    @property
    def n_games(self) -> int:
        """Number of games played."""
        return len(self.games)

    def rows(self) -> list[tuple[Strategy, Outcome]]:
        """All (strategy, outcome) rows in play order, two per game."""
        return [row for game in self.games for row in game.rows()]

    def outcomes_for(self, strategy: Strategy) -> list[Outcome]:
        """Outcomes of every game for one strategy."""
        strategy = Strategy(strategy)
        return [game.outcomes[strategy] for game in self.games]
