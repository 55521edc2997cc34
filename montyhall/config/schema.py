"""
Configuration schema for the Monty Hall simulation.

Provides Pydantic models for configuration validation and type safety.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from montyhall.config.defaults import (
    DEFAULT_DECIMALS,
    DEFAULT_N_GAMES,
    DEFAULT_REPORT_TITLE,
    MAX_DECIMALS,
)


class SimulationConfig(BaseModel):
    """Batch simulation parameters."""

    n_games: int = Field(
        default=DEFAULT_N_GAMES,
        ge=1,
        description="Number of games played by a batch run",
    )
    random_seed: int | None = Field(
        default=None,
        description="Random seed for reproducible simulations (None = random)",
    )


class ReportConfig(BaseModel):
    """Proportion table reporting."""

    decimals: int = Field(
        default=DEFAULT_DECIMALS,
        ge=0,
        le=MAX_DECIMALS,
        description="Decimal places used when rounding proportions",
    )
    show_table: bool = Field(
        default=True,
        description="Print the proportion table after a batch run",
    )
    title: str = Field(
        default=DEFAULT_REPORT_TITLE,
        description="Title shown above the proportion table",
    )


class MontyHallConfig(BaseModel):
    """Top-level configuration: simulation and reporting sections."""

    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MontyHallConfig":
        """Create configuration from a dictionary.

        Args:
            data: Configuration dictionary (can be partial)

        Returns:
            MontyHallConfig with defaults for any missing values
        """
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "MontyHallConfig":
        """Load configuration from a .json or .yaml/.yml file.

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is not supported
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, encoding="utf-8") as f:
            if _file_format(path) == "json":
                data = json.load(f)
            else:
                data = _yaml().safe_load(f)

        return cls.from_dict(data or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return self.model_dump()

    def to_file(self, path: str | Path) -> None:
        """Save configuration as .json or .yaml/.yml."""
        path = Path(path)
        file_format = _file_format(path)

        with open(path, "w", encoding="utf-8") as f:
            if file_format == "json":
                json.dump(self.to_dict(), f, indent=2)
            else:
                _yaml().dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def merge(self, overrides: dict[str, Any]) -> "MontyHallConfig":
        """New config with ``overrides`` deep-merged over this one."""
        merged = self.to_dict()
        _deep_merge(merged, overrides)
        return MontyHallConfig.from_dict(merged)


def _file_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    raise ValueError(
        f"Unsupported config file format: {suffix}. Use .json or .yaml/.yml"
    )


def _yaml():
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as e:
        raise ImportError(
            "PyYAML is required for YAML config files. "
            "Install with: pip install montyhall[yaml]"
        ) from e
    return yaml


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> None:
    for key, value in overrides.items():
        if isinstance(base.get(key), dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def get_default_config() -> MontyHallConfig:
    """Default simulation configuration."""
    return MontyHallConfig()
