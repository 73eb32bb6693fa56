"""Top-level package for ``monty_hall``.

One round of the three-door game runs through a fixed pipeline:

1. :func:`~monty_hall.game.setup.create_game` hides two goats and a car,
2. :func:`~monty_hall.game.setup.select_door` makes the contestant's pick,
3. :func:`~monty_hall.game.host.open_goat_door` reveals a goat,
4. :func:`~monty_hall.game.strategies.change_door` resolves stay/switch,
5. :func:`~monty_hall.game.outcome.determine_winner` scores each final door.

:func:`~monty_hall.game.rounds.play_game` runs one round and
:func:`~monty_hall.simulation.batch.play_n_games` repeats it. Every random
stage accepts an explicit ``numpy.random.Generator``.
"""

from .analysis import BatchSummary, format_summary_table, print_summary, summarize_batch
from .core.contracts import (
    DOORS,
    BatchResult,
    GameRound,
    GameState,
    Outcome,
    Prize,
    RoundResult,
    Strategy,
)
from .game import change_door, create_game, determine_winner, open_goat_door, play_game, select_door
from .runtime import make_rng
from .simulation import SimulationConfig, play_n_games, run_simulation, run_simulation_from_config

__all__ = [
    "BatchResult",
    "BatchSummary",
    "DOORS",
    "GameRound",
    "GameState",
    "Outcome",
    "Prize",
    "RoundResult",
    "SimulationConfig",
    "Strategy",
    "change_door",
    "create_game",
    "determine_winner",
    "format_summary_table",
    "make_rng",
    "open_goat_door",
    "play_game",
    "play_n_games",
    "print_summary",
    "run_simulation",
    "run_simulation_from_config",
    "select_door",
    "summarize_batch",
]
