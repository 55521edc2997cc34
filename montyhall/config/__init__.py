"""
Configuration management for the Monty Hall simulation.

This module provides:
- Default game layout and batch parameters
- Configuration schema and validation
- Support for custom configuration files (JSON/YAML)
"""

from montyhall.config.defaults import DEFAULT_CONFIG
from montyhall.config.schema import (
    MontyHallConfig,
    ReportConfig,
    SimulationConfig,
    get_default_config,
)

__all__ = [
    # Legacy dict-based config
    "DEFAULT_CONFIG",
    # Pydantic config classes
    "MontyHallConfig",
    "ReportConfig",
    "SimulationConfig",
    # Functions
    "get_default_config",
]
