"""
Pytest configuration and fixtures for MONTYHALL tests.
"""

import random
from collections.abc import Sequence

import pytest

from montyhall.models.game import GameAssignment


class ScriptedRandom:
    """Random source that returns items at scripted positions.

    Each call to ``choice`` consumes the next index; once the script is
    exhausted it keeps picking the first item.
    """

    def __init__(self, indices: Sequence[int] = ()):
        self._indices = list(indices)
        self.calls: list[list] = []

    def choice(self, seq):
        self.calls.append(list(seq))
        index = self._indices.pop(0) if self._indices else 0
        return seq[index]


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def reward_first() -> GameAssignment:
    """Reward behind door 1."""
    return GameAssignment.from_labels(["reward", "decoy", "decoy"])


@pytest.fixture
def reward_second() -> GameAssignment:
    """Reward behind door 2."""
    return GameAssignment.from_labels(["decoy", "reward", "decoy"])


@pytest.fixture(params=[1, 2, 3])
def any_assignment(request) -> GameAssignment:
    """Each of the three possible assignments."""
    return GameAssignment.with_reward_at(request.param)
