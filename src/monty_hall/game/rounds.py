"""Play one complete round under both strategies."""

from __future__ import annotations

import logging

import numpy as np

from monty_hall.core.contracts import GameRound, Strategy
from monty_hall.runtime.rng import resolve_rng

from .host import open_goat_door
from .outcome import determine_winner
from .setup import create_game, select_door
from .strategies import change_door

logger = logging.getLogger(__name__)


def play_game(*, rng: np.random.Generator | None = None) -> GameRound:
    """Play one round and resolve it for both stay and switch.

    Parameters
    ----------
    rng : numpy.random.Generator | None, optional
        Generator shared by setup, first pick and host tie-break.

    Returns
    -------
    GameRound
        Round record with paired stay/switch outcomes.

    Notes
    -----
    The step order is ``setup -> first pick -> host reveal -> strategy
    resolution -> outcome``. Both strategies see the same game, first pick
    and opened door, so exactly one of them wins.
    """

    generator = resolve_rng(rng)

    game = create_game(rng=generator)
    first_pick = select_door(rng=generator)
    opened_door = open_goat_door(game, first_pick, rng=generator)

    stay_pick = change_door(Strategy.STAY, opened_door, first_pick)
    switch_pick = change_door(Strategy.SWITCH, opened_door, first_pick)

    game_round = GameRound(
        game=game,
        first_pick=first_pick,
        opened_door=opened_door,
        stay_pick=stay_pick,
        switch_pick=switch_pick,
        stay_outcome=determine_winner(stay_pick, game),
        switch_outcome=determine_winner(switch_pick, game),
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "round game=%s first_pick=%d opened=%d stay=%s switch=%s",
            game.labels(),
            first_pick,
            opened_door,
            game_round.stay_outcome.value,
            game_round.switch_outcome.value,
        )
    return game_round


__all__ = ["play_game"]
