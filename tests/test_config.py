"""Tests for configuration system."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from montyhall.config import (
    DEFAULT_CONFIG,
    MontyHallConfig,
    get_default_config,
)
from montyhall.config.defaults import CLASSIC_LABELS, DOORS


class TestMontyHallConfig:
    """Tests for MontyHallConfig class."""

    def test_default_config_creation(self) -> None:
        config = MontyHallConfig()

        assert config.simulation.n_games == 100
        assert config.simulation.random_seed is None
        assert config.report.decimals == 2
        assert config.report.show_table is True

    def test_get_default_config(self) -> None:
        config = get_default_config()

        assert isinstance(config, MontyHallConfig)
        assert config.simulation.n_games == 100

    def test_legacy_dict_matches_model(self) -> None:
        """DEFAULT_CONFIG dict mirrors the pydantic defaults."""
        assert MontyHallConfig.from_dict(DEFAULT_CONFIG) == MontyHallConfig()

    def test_from_dict_partial(self) -> None:
        config = MontyHallConfig.from_dict({"simulation": {"n_games": 500}})

        assert config.simulation.n_games == 500
        # Defaults preserved
        assert config.report.decimals == 2

    def test_to_dict(self) -> None:
        data = get_default_config().to_dict()

        assert data["simulation"]["n_games"] == 100
        assert data["report"]["decimals"] == 2

    @pytest.mark.parametrize(
        "data",
        [
            {"simulation": {"n_games": 0}},
            {"simulation": {"n_games": -5}},
            {"report": {"decimals": -1}},
            {"report": {"decimals": 12}},
        ],
    )
    def test_invalid_values(self, data) -> None:
        with pytest.raises(ValidationError):
            MontyHallConfig.from_dict(data)

    def test_merge(self) -> None:
        base = MontyHallConfig.from_dict({"report": {"title": "Mine"}})
        merged = base.merge({"simulation": {"random_seed": 42}})

        assert merged.simulation.random_seed == 42
        assert merged.report.title == "Mine"
        # Original is unchanged
        assert base.simulation.random_seed is None


class TestConfigFiles:
    """Tests for loading and saving config files."""

    def test_json_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        config = MontyHallConfig.from_dict({"simulation": {"n_games": 250, "random_seed": 9}})

        config.to_file(path)
        assert json.loads(path.read_text())["simulation"]["n_games"] == 250
        assert MontyHallConfig.from_file(path) == config

    def test_yaml_round_trip(self, tmp_path: Path) -> None:
        pytest.importorskip("yaml")
        path = tmp_path / "config.yaml"
        config = MontyHallConfig.from_dict({"report": {"decimals": 3}})

        config.to_file(path)
        assert MontyHallConfig.from_file(path).report.decimals == 3

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        pytest.importorskip("yaml")
        path = tmp_path / "empty.yml"
        path.write_text("")

        assert MontyHallConfig.from_file(path) == MontyHallConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            MontyHallConfig.from_file(tmp_path / "nope.json")

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("")

        with pytest.raises(ValueError, match="Unsupported"):
            MontyHallConfig.from_file(path)
        with pytest.raises(ValueError, match="Unsupported"):
            get_default_config().to_file(path)


class TestDefaults:
    """Tests for default constants."""

    def test_doors(self) -> None:
        assert DOORS == (1, 2, 3)

    def test_classic_labels(self) -> None:
        assert CLASSIC_LABELS == {"goat": "decoy", "car": "reward"}
