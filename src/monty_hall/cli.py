"""Command-line entry point for batch simulations."""

from __future__ import annotations

import argparse
import logging
from typing import Any, Sequence

from monty_hall.analysis.proportions import print_summary
from monty_hall.core import load_config_mapping
from monty_hall.simulation.config import run_simulation, simulation_config_from_mapping

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def run_simulation_cli(argv: Sequence[str] | None = None) -> int:
    """Simulate a batch of games and print stay/switch proportions.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        CLI argument list. When ``None``, process arguments are used.

    Returns
    -------
    int
        Exit code (`0` on success).
    """

    parser = argparse.ArgumentParser(description="Estimate Monty Hall stay/switch win rates by simulation.")
    parser.add_argument("--config", default=None, help="Optional JSON or YAML simulation config.")
    parser.add_argument("--n-games", type=int, default=None, help="Number of games to play (default 100).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible batch.")
    parser.add_argument(
        "--decimals",
        type=int,
        default=None,
        help="Rounding precision of the printed proportions (default 2).",
    )
    parser.add_argument(
        "--confidence",
        type=float,
        default=None,
        help="Confidence level of the win-rate intervals (default 0.95).",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level)),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    mapping = _merge_overrides(
        load_config_mapping(args.config) if args.config is not None else {},
        n_games=args.n_games,
        seed=args.seed,
        decimals=args.decimals,
        confidence=args.confidence,
    )
    run = run_simulation(simulation_config_from_mapping(mapping))

    print_summary(run.summary)
    print(f"Simulation complete: n_games={run.config.n_games}, seed={run.config.seed}")
    return 0


def _merge_overrides(config: dict[str, Any], **overrides: Any) -> dict[str, Any]:
    """Apply explicitly passed CLI flags on top of file settings."""

    merged = dict(config)
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return merged


def main() -> None:
    """Execute the simulation CLI and exit with returned code."""

    raise SystemExit(run_simulation_cli())


if __name__ == "__main__":
    main()


__all__ = ["main", "run_simulation_cli"]
