"""Random round setup: prize arrangement and the contestant's first pick."""

from __future__ import annotations

import numpy as np

from monty_hall.core.contracts import DOORS, Door, GameState, Prize
from monty_hall.runtime.rng import choose_uniform, resolve_rng

_PRIZE_POOL: tuple[Prize, ...] = (Prize.GOAT, Prize.GOAT, Prize.CAR)


def create_game(*, rng: np.random.Generator | None = None) -> GameState:
    """Shuffle two goats and one car behind the three doors.

    Parameters
    ----------
    rng : numpy.random.Generator | None, optional
        Random generator. ``None`` draws from a fresh entropy-seeded one.

    Returns
    -------
    GameState
        Uniformly random arrangement; the car is behind each door with
        probability 1/3.
    """

    generator = resolve_rng(rng)
    order = generator.permutation(len(_PRIZE_POOL))
    return GameState(prizes=tuple(_PRIZE_POOL[int(index)] for index in order))  # type: ignore[arg-type]


def select_door(*, rng: np.random.Generator | None = None) -> Door:
    """Return the contestant's uninformed first pick, uniform over the doors."""

    return int(choose_uniform(DOORS, resolve_rng(rng)))


__all__ = ["create_game", "select_door"]
