"""Win/lose proportions per strategy for a simulated batch.

Aggregation is pure: :func:`summarize_batch` returns a
:class:`BatchSummary` and never prints. :func:`format_summary_table` and
:func:`print_summary` are the presentation step, invoked by callers such as
the CLI.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from scipy.stats import binomtest

from monty_hall.core.config_validation import require_int
from monty_hall.core.contracts import BatchResult, Outcome, Strategy, outcome_counts


@dataclass(frozen=True, slots=True)
class StrategySummary:
    """Aggregated outcomes for one strategy.

    Parameters
    ----------
    strategy : Strategy
        Strategy being summarized.
    n_games : int
        Number of rounds.
    n_wins : int
        Rounds won.
    win_proportion : float
        ``n_wins / n_games`` rounded to the summary precision.
    lose_proportion : float
        ``1 - n_wins / n_games`` rounded to the summary precision.
    ci_low : float
        Lower bound of the Wilson score interval for the win rate.
    ci_high : float
        Upper bound of the Wilson score interval for the win rate.
    """

    strategy: Strategy
    n_games: int
    n_wins: int
    win_proportion: float
    lose_proportion: float
    ci_low: float
    ci_high: float

    @property
    def n_losses(self) -> int:
        """Rounds lost."""

        return self.n_games - self.n_wins

    def proportion(self, outcome: Outcome | str) -> float:
        """Return the rounded proportion of one outcome."""

        if Outcome(outcome) is Outcome.WIN:
            return self.win_proportion
        return self.lose_proportion


@dataclass(frozen=True, slots=True)
class BatchSummary:
    """Per-strategy proportions for one batch.

    Parameters
    ----------
    strategies : tuple[StrategySummary, ...]
        Summaries in :class:`Strategy` declaration order.
    decimals : int
        Rounding precision applied to the proportions.
    confidence : float
        Confidence level of the win-rate intervals.
    """

    strategies: tuple[StrategySummary, ...]
    decimals: int
    confidence: float

    def for_strategy(self, strategy: Strategy | str) -> StrategySummary:
        """Return the summary row of one strategy."""

        resolved = Strategy(strategy)
        for row in self.strategies:
            if row.strategy is resolved:
                return row
        raise KeyError(resolved.value)

    @property
    def win_rates(self) -> dict[Strategy, float]:
        """Rounded win proportion keyed by strategy."""

        return {row.strategy: row.win_proportion for row in self.strategies}

    def as_table(self) -> dict[str, dict[str, float]]:
        """Return ``{strategy: {"LOSE": p, "WIN": p}}`` row proportions."""

        return {
            row.strategy.value: {
                Outcome.LOSE.value: row.lose_proportion,
                Outcome.WIN.value: row.win_proportion,
            }
            for row in self.strategies
        }


def summarize_batch(
    batch: BatchResult,
    *,
    decimals: int = 2,
    confidence: float = 0.95,
) -> BatchSummary:
    """Compute per-strategy outcome proportions.

    Parameters
    ----------
    batch : BatchResult
        Unaggregated rounds from :func:`monty_hall.simulation.play_n_games`.
    decimals : int, optional
        Rounding precision for proportions and interval bounds.
    confidence : float, optional
        Confidence level in ``(0, 1)`` for the Wilson score intervals.

    Returns
    -------
    BatchSummary
        Row proportions per strategy.

    Raises
    ------
    ValueError
        If the batch is empty or an option is out of range.
    """

    if batch.n_games == 0:
        raise ValueError("cannot summarize an empty batch; win proportions are undefined")
    decimals = require_int(decimals, field_name="decimals", minimum=0)
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"confidence must be within (0, 1), got {confidence}")

    rows: list[StrategySummary] = []
    for strategy in Strategy:
        counts = outcome_counts(batch.outcomes(strategy))
        n_wins = counts[Outcome.WIN]
        n_games = n_wins + counts[Outcome.LOSE]
        interval = binomtest(n_wins, n_games).proportion_ci(
            confidence_level=confidence,
            method="wilson",
        )
        rows.append(
            StrategySummary(
                strategy=strategy,
                n_games=n_games,
                n_wins=n_wins,
                win_proportion=round(n_wins / n_games, decimals),
                lose_proportion=round(counts[Outcome.LOSE] / n_games, decimals),
                ci_low=round(float(interval.low), decimals),
                ci_high=round(float(interval.high), decimals),
            )
        )
    return BatchSummary(strategies=tuple(rows), decimals=int(decimals), confidence=float(confidence))


def format_summary_table(summary: BatchSummary) -> str:
    """Render a summary as a fixed-width text table.

    Rows are strategies; columns are the ``LOSE`` and ``WIN`` proportions
    followed by the win-rate interval.
    """

    width = max(4, summary.decimals + 2)
    ci_label = f"{summary.confidence:.0%} CI (WIN)"
    header = f"{'strategy':<10} {'LOSE':>{width}} {'WIN':>{width}}  {ci_label}"
    lines = [header]
    for row in summary.strategies:
        lines.append(
            f"{row.strategy.value:<10} "
            f"{row.lose_proportion:>{width}.{summary.decimals}f} "
            f"{row.win_proportion:>{width}.{summary.decimals}f}  "
            f"[{row.ci_low:.{summary.decimals}f}, {row.ci_high:.{summary.decimals}f}]"
        )
    return "\n".join(lines)


def print_summary(summary: BatchSummary, file: TextIO | None = None) -> None:
    """Print :func:`format_summary_table` output to ``file`` (stdout by default)."""

    print(format_summary_table(summary), file=file if file is not None else sys.stdout)


__all__ = [
    "BatchSummary",
    "StrategySummary",
    "format_summary_table",
    "print_summary",
    "summarize_batch",
]
