"""Core value types and config helpers for Monty Hall simulations."""

from .config_loading import SUPPORTED_CONFIG_SUFFIXES, load_config_mapping
from .contracts import (
    DOORS,
    BatchResult,
    Door,
    GameRound,
    GameState,
    Outcome,
    Prize,
    RoundResult,
    Strategy,
    coerce_strategy,
    outcome_counts,
    validate_door,
)

__all__ = [
    "BatchResult",
    "DOORS",
    "Door",
    "GameRound",
    "GameState",
    "Outcome",
    "Prize",
    "RoundResult",
    "SUPPORTED_CONFIG_SUFFIXES",
    "Strategy",
    "coerce_strategy",
    "load_config_mapping",
    "outcome_counts",
    "validate_door",
]
