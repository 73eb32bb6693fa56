"""Batch simulation and config-driven runs."""

from .batch import DEFAULT_N_GAMES, play_n_games
from .config import (
    SimulationConfig,
    SimulationRun,
    load_simulation_config,
    run_simulation,
    run_simulation_from_config,
    simulation_config_from_mapping,
)

__all__ = [
    "DEFAULT_N_GAMES",
    "SimulationConfig",
    "SimulationRun",
    "load_simulation_config",
    "play_n_games",
    "run_simulation",
    "run_simulation_from_config",
    "simulation_config_from_mapping",
]
