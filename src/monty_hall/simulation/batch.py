"""Repeat rounds to build an unaggregated batch result."""

from __future__ import annotations

import logging

import numpy as np

from monty_hall.core.contracts import BatchResult, GameRound, Outcome, Strategy, outcome_counts
from monty_hall.game.rounds import play_game
from monty_hall.runtime.rng import resolve_rng

DEFAULT_N_GAMES = 100

logger = logging.getLogger(__name__)


def play_n_games(n: int = DEFAULT_N_GAMES, *, rng: np.random.Generator | None = None) -> BatchResult:
    """Play ``n`` independent rounds.

    Parameters
    ----------
    n : int, optional
        Number of rounds. Defaults to ``100``.
    rng : numpy.random.Generator | None, optional
        Generator shared across all rounds. Pass a seeded generator for
        reproducible batches.

    Returns
    -------
    BatchResult
        Rounds in play order; ``records`` yields ``2 * n`` labelled
        outcomes (stay then switch per round).

    Raises
    ------
    ValueError
        If ``n`` is not a positive integer.

    Notes
    -----
    Nothing is printed here. Aggregate with
    :func:`monty_hall.analysis.summarize_batch` and display with
    :func:`monty_hall.analysis.print_summary`.
    """

    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"n must be a positive integer, got {n!r}")
    if n <= 0:
        raise ValueError(f"n must be > 0, got {n}")

    generator = resolve_rng(rng)
    logger.info("playing %d Monty Hall games", n)

    rounds: list[GameRound] = []
    for _ in range(int(n)):
        rounds.append(play_game(rng=generator))

    batch = BatchResult(rounds=tuple(rounds))
    if logger.isEnabledFor(logging.INFO):
        stay_wins = outcome_counts(batch.outcomes(Strategy.STAY))[Outcome.WIN]
        switch_wins = outcome_counts(batch.outcomes(Strategy.SWITCH))[Outcome.WIN]
        logger.info(
            "finished %d games: stay won %d, switch won %d",
            batch.n_games,
            stay_wins,
            switch_wins,
        )
    return batch


__all__ = ["DEFAULT_N_GAMES", "play_n_games"]
