"""Config-driven simulation runs.

A run is described by :class:`SimulationConfig`, built either directly or
from a declarative JSON/YAML mapping such as::

    n_games: 10000
    seed: 7
    decimals: 3
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from monty_hall.analysis.proportions import BatchSummary, summarize_batch
from monty_hall.core.config_loading import load_config_mapping
from monty_hall.core.config_validation import (
    coerce_float,
    coerce_optional_int,
    coerce_positive_int,
    require_int,
    validate_allowed_keys,
)
from monty_hall.core.contracts import BatchResult
from monty_hall.runtime.rng import make_rng

from .batch import DEFAULT_N_GAMES, play_n_games

CONFIG_KEYS: tuple[str, ...] = ("n_games", "seed", "decimals", "confidence")


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Settings for one batch simulation.

    Parameters
    ----------
    n_games : int, optional
        Number of rounds. Defaults to ``100``.
    seed : int | None, optional
        Seed for the batch generator. ``None`` uses NumPy's entropy source.
    decimals : int, optional
        Rounding precision of the summary proportions.
    confidence : float, optional
        Confidence level of the win-rate intervals.

    Raises
    ------
    ValueError
        If any setting is out of range.
    """

    n_games: int = DEFAULT_N_GAMES
    seed: int | None = None
    decimals: int = 2
    confidence: float = 0.95

    def __post_init__(self) -> None:
        require_int(self.n_games, field_name="n_games", minimum=1)
        if self.seed is not None:
            require_int(self.seed, field_name="seed", minimum=0)
        require_int(self.decimals, field_name="decimals", minimum=0)
        if not 0.0 < self.confidence < 1.0:
            raise ValueError(f"confidence must be within (0, 1), got {self.confidence}")


@dataclass(frozen=True, slots=True)
class SimulationRun:
    """Batch together with its summary and the config that produced it."""

    config: SimulationConfig
    batch: BatchResult
    summary: BatchSummary


def simulation_config_from_mapping(config: Mapping[str, Any]) -> SimulationConfig:
    """Parse a declarative mapping into :class:`SimulationConfig`.

    Parameters
    ----------
    config : Mapping[str, Any]
        Mapping with optional keys ``n_games``, ``seed``, ``decimals`` and
        ``confidence``. Missing keys keep their defaults.

    Returns
    -------
    SimulationConfig
        Validated settings.

    Raises
    ------
    ValueError
        If unknown keys are present or a value cannot be coerced.
    """

    validate_allowed_keys(config, field_name="config", allowed_keys=CONFIG_KEYS)

    kwargs: dict[str, Any] = {}
    if "n_games" in config:
        kwargs["n_games"] = coerce_positive_int(config["n_games"], field_name="config.n_games")
    if "seed" in config:
        kwargs["seed"] = coerce_optional_int(config["seed"], field_name="config.seed")
    if "decimals" in config:
        decimals = coerce_optional_int(config["decimals"], field_name="config.decimals")
        if decimals is None:
            raise ValueError("config.decimals must be an integer")
        kwargs["decimals"] = decimals
    if "confidence" in config:
        kwargs["confidence"] = coerce_float(config["confidence"], field_name="config.confidence")
    return SimulationConfig(**kwargs)


def load_simulation_config(path: str | Path) -> SimulationConfig:
    """Load and parse a JSON/YAML simulation config file."""

    return simulation_config_from_mapping(load_config_mapping(path))


def run_simulation(config: SimulationConfig) -> SimulationRun:
    """Play a seeded batch and summarize it.

    Parameters
    ----------
    config : SimulationConfig
        Batch settings.

    Returns
    -------
    SimulationRun
        Unaggregated batch plus its per-strategy summary.
    """

    batch = play_n_games(config.n_games, rng=make_rng(config.seed))
    summary = summarize_batch(batch, decimals=config.decimals, confidence=config.confidence)
    return SimulationRun(config=config, batch=batch, summary=summary)


def run_simulation_from_config(config: Mapping[str, Any]) -> SimulationRun:
    """Run :func:`run_simulation` from a declarative mapping."""

    return run_simulation(simulation_config_from_mapping(config))


__all__ = [
    "CONFIG_KEYS",
    "SimulationConfig",
    "SimulationRun",
    "load_simulation_config",
    "run_simulation",
    "run_simulation_from_config",
    "simulation_config_from_mapping",
]
