"""Tests for engine input validation."""

import pytest

from montyhall.engine.validation import (
    DoorResolutionError,
    GameValidationError,
    validate_assignment,
    validate_decimals,
    validate_door,
    validate_game_count,
)
from montyhall.models.game import GameAssignment


class TestGameValidationError:
    """Tests for GameValidationError."""

    def test_is_value_error(self):
        assert issubclass(GameValidationError, ValueError)

    def test_error_str_basic(self):
        error = GameValidationError(field="pick", message="Door must be an integer")
        assert str(error) == "pick: Door must be an integer"

    def test_error_str_with_value(self):
        error = GameValidationError(field="pick", message="Out of range", value=7)
        assert "(got: 7)" in str(error)

    def test_error_str_with_suggestion(self):
        error = GameValidationError(
            field="n",
            message="Must be positive",
            value=0,
            suggestion="Pass n >= 1",
        )
        assert str(error).endswith("- Pass n >= 1")

    def test_attributes(self):
        error = GameValidationError(field="n", message="Bad", value=-1)
        assert error.field == "n"
        assert error.value == -1

    def test_resolution_error_is_runtime_error(self):
        assert issubclass(DoorResolutionError, RuntimeError)


class TestValidateDoor:
    """Tests for validate_door."""

    @pytest.mark.parametrize("door", [1, 2, 3])
    def test_valid(self, door):
        assert validate_door(door) == door

    @pytest.mark.parametrize("door", [0, 4, -2])
    def test_out_of_range(self, door):
        with pytest.raises(GameValidationError, match="one of"):
            validate_door(door)

    @pytest.mark.parametrize("door", ["2", 2.0, None, True])
    def test_not_integer(self, door):
        with pytest.raises(GameValidationError, match="integer"):
            validate_door(door)

    def test_field_name_in_message(self):
        with pytest.raises(GameValidationError, match="^revealed:"):
            validate_door(9, field="revealed")


class TestValidateAssignment:
    """Tests for validate_assignment."""

    def test_passthrough(self, reward_first):
        assert validate_assignment(reward_first) is reward_first

    def test_coerces_labels(self):
        game = validate_assignment(["car", "goat", "goat"])
        assert isinstance(game, GameAssignment)
        assert game.reward_door == 1

    def test_coerces_tuple(self):
        assert validate_assignment(("decoy", "decoy", "reward")).reward_door == 3

    @pytest.mark.parametrize(
        "labels",
        [
            ["decoy", "reward"],
            ["decoy", "decoy", "decoy"],
            ["reward", "reward", "reward"],
            ["decoy", "reward", "decoy", "decoy"],
            ["decoy", "reward", "bicycle"],
        ],
    )
    def test_invalid_layouts(self, labels):
        with pytest.raises(GameValidationError) as exc_info:
            validate_assignment(labels)
        assert exc_info.value.field == "game"

    @pytest.mark.parametrize("game", ["car", 3, None, {"doors": 3}])
    def test_wrong_type(self, game):
        with pytest.raises(GameValidationError):
            validate_assignment(game)


class TestValidateGameCount:
    """Tests for validate_game_count."""

    @pytest.mark.parametrize("n", [1, 100, 10_000])
    def test_valid(self, n):
        assert validate_game_count(n) == n

    @pytest.mark.parametrize("n", [0, -1, -100])
    def test_non_positive(self, n):
        with pytest.raises(GameValidationError, match="positive"):
            validate_game_count(n)

    @pytest.mark.parametrize("n", [1.5, 10.0, "10", None, False])
    def test_non_integer(self, n):
        with pytest.raises(GameValidationError, match="integer"):
            validate_game_count(n)


class TestValidateDecimals:
    """Tests for validate_decimals."""

    @pytest.mark.parametrize("decimals", [0, 2, 6])
    def test_valid(self, decimals):
        assert validate_decimals(decimals) == decimals

    @pytest.mark.parametrize("decimals", [-1, 7])
    def test_out_of_range(self, decimals):
        with pytest.raises(GameValidationError, match="between 0 and 6"):
            validate_decimals(decimals)

    @pytest.mark.parametrize("decimals", [2.0, "2", None, True])
    def test_non_integer(self, decimals):
        with pytest.raises(GameValidationError, match="integer"):
            validate_decimals(decimals)
