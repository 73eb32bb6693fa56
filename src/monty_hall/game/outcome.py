"""Map a final pick to a win or a loss."""

from __future__ import annotations

from collections.abc import Iterable

from monty_hall.core.contracts import Door, GameState, Outcome, Prize


def determine_winner(final_pick: Door, game: GameState | Iterable[Prize | str]) -> Outcome:
    """Return :attr:`Outcome.WIN` when ``final_pick`` hides the car.

    Examples
    --------
    >>> determine_winner(3, ["goat", "goat", "car"])
    <Outcome.WIN: 'WIN'>
    >>> determine_winner(1, ["goat", "car", "goat"]) == "LOSE"
    True
    """

    state = GameState.from_prizes(game)
    return Outcome.WIN if state[final_pick] is Prize.CAR else Outcome.LOSE


__all__ = ["determine_winner"]
