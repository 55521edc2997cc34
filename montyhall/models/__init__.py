"""
Data models for the Monty Hall simulation.

This module contains Pydantic models representing:
- Door contents, strategies and outcomes
- Game assignments (what is behind each door)
- Single-game and batch results
"""

from montyhall.models.game import (
    BatchResult,
    CountTable,
    DoorContent,
    GameAssignment,
    GameResult,
    Outcome,
    ProportionTable,
    Strategy,
)

__all__ = [
    "BatchResult",
    "CountTable",
    "DoorContent",
    "GameAssignment",
    "GameResult",
    "Outcome",
    "ProportionTable",
    "Strategy",
]
