"""Stages of a single Monty Hall round.

Data flows ``create_game``/``select_door`` -> ``open_goat_door`` ->
``change_door`` -> ``determine_winner``; :func:`play_game` runs them in
that order.
"""

from .host import open_goat_door
from .outcome import determine_winner
from .rounds import play_game
from .setup import create_game, select_door
from .strategies import change_door

__all__ = [
    "change_door",
    "create_game",
    "determine_winner",
    "open_goat_door",
    "play_game",
    "select_door",
]
