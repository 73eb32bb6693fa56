"""Host behaviour: open a goat door the contestant did not pick."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from monty_hall.core.contracts import Door, GameState, Prize, validate_door
from monty_hall.runtime.rng import choose_uniform, resolve_rng


def open_goat_door(
    game: GameState | Iterable[Prize | str],
    pick: Door,
    *,
    rng: np.random.Generator | None = None,
) -> Door:
    """Choose the door the host opens after the contestant's first pick.

    Parameters
    ----------
    game : GameState | Iterable[Prize | str]
        Prize arrangement, e.g. ``["goat", "car", "goat"]``.
    pick : int
        Contestant's current door.
    rng : numpy.random.Generator | None, optional
        Random generator used only when the host has two goats to choose
        from.

    Returns
    -------
    int
        A goat door different from ``pick``.

    Raises
    ------
    ValueError
        If ``game`` does not hide exactly one car or ``pick`` is not a door.

    Notes
    -----
    When ``pick`` hides the car, both other doors hide goats and the host
    picks one uniformly at random. Otherwise exactly one other door hides a
    goat and the host must open it; no randomness is drawn in that case.
    """

    state = GameState.from_prizes(game)
    first_pick = validate_door(pick, field_name="pick")

    if state[first_pick] is Prize.CAR:
        return int(choose_uniform(state.goat_doors, resolve_rng(rng)))

    (opened,) = (door for door in state.goat_doors if door != first_pick)
    return opened


__all__ = ["open_goat_door"]
