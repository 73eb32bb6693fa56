"""Tests for the individual stages of a round."""

from __future__ import annotations

from collections import Counter
from itertools import permutations

import numpy as np
import pytest

from monty_hall.core import DOORS, GameState, Outcome, Prize, Strategy
from monty_hall.game import change_door, create_game, determine_winner, open_goat_door, select_door

ALL_GAMES = tuple(
    GameState.from_prizes(arrangement)
    for arrangement in sorted(set(permutations(("goat", "goat", "car"))))
)


def test_create_game_always_hides_one_car() -> None:
    """Every generated game should hold exactly one car and two goats."""

    rng = np.random.default_rng(0)
    for _ in range(200):
        game = create_game(rng=rng)
        assert Counter(game.prizes) == {Prize.CAR: 1, Prize.GOAT: 2}


def test_create_game_car_position_is_uniform() -> None:
    """Each car position should occur about a third of the time."""

    rng = np.random.default_rng(11)
    n = 6000
    counts = Counter(create_game(rng=rng).car_door for _ in range(n))

    assert set(counts) == set(DOORS)
    for door in DOORS:
        assert abs(counts[door] / n - 1.0 / 3.0) < 0.03


def test_select_door_is_uniform_over_doors() -> None:
    """First picks should cover every door with roughly equal frequency."""

    rng = np.random.default_rng(5)
    n = 6000
    counts = Counter(select_door(rng=rng) for _ in range(n))

    assert set(counts) == set(DOORS)
    for door in DOORS:
        assert abs(counts[door] / n - 1.0 / 3.0) < 0.03


def test_stages_work_without_explicit_generator() -> None:
    """Omitting ``rng`` should fall back to an entropy-seeded generator."""

    game = create_game()
    pick = select_door()

    assert pick in DOORS
    assert open_goat_door(game, pick) != pick


def test_open_goat_door_never_reveals_pick_or_car() -> None:
    """The host must open a goat door other than the contestant's pick."""

    rng = np.random.default_rng(3)
    for game in ALL_GAMES:
        for pick in DOORS:
            for _ in range(20):
                opened = open_goat_door(game, pick, rng=rng)
                assert opened != pick
                assert game[opened] is Prize.GOAT


def test_open_goat_door_picks_either_goat_when_pick_is_car() -> None:
    """With the car picked, both goat doors should be revealed over time."""

    rng = np.random.default_rng(8)
    opened = {open_goat_door(["goat", "goat", "car"], 3, rng=rng) for _ in range(200)}

    assert opened == {1, 2}


def test_open_goat_door_splits_evenly_between_goats_when_pick_is_car() -> None:
    """The host's choice between two goat doors should be a fair coin."""

    rng = np.random.default_rng(17)
    n = 4000
    counts = Counter(open_goat_door(["goat", "goat", "car"], 3, rng=rng) for _ in range(n))

    assert set(counts) == {1, 2}
    assert abs(counts[1] / n - 0.5) < 0.03


def test_open_goat_door_is_deterministic_when_pick_is_goat() -> None:
    """With a goat picked, the only other goat door must be opened."""

    rng = np.random.default_rng(4)
    state_before = rng.bit_generator.state

    assert open_goat_door(["goat", "car", "goat"], 1, rng=rng) == 3
    assert open_goat_door(["car", "goat", "goat"], 3, rng=rng) == 2
    assert rng.bit_generator.state == state_before


def test_open_goat_door_rejects_invalid_inputs() -> None:
    """Malformed games and picks should fail fast."""

    with pytest.raises(ValueError, match="exactly one car"):
        open_goat_door(["goat", "goat", "goat"], 1)
    with pytest.raises(ValueError, match="pick"):
        open_goat_door(["goat", "car", "goat"], 4)


@pytest.mark.parametrize(
    ("opened_door", "original_pick"),
    [(opened, picked) for opened in DOORS for picked in DOORS if opened != picked],
)
def test_change_door_stay_and_switch(opened_door: int, original_pick: int) -> None:
    """Stay keeps the pick; switch moves to the remaining closed door."""

    assert change_door(Strategy.STAY, opened_door, original_pick) == original_pick
    switched = change_door("switch", opened_door, original_pick)
    assert switched not in (opened_door, original_pick)
    assert switched in DOORS


def test_change_door_rejects_opened_pick_and_unknown_strategy() -> None:
    """Invalid strategy inputs should raise."""

    with pytest.raises(ValueError, match="must differ"):
        change_door(Strategy.SWITCH, 2, 2)
    with pytest.raises(ValueError, match="strategy must be one of"):
        change_door("wait", 1, 2)
    with pytest.raises(ValueError, match="opened_door"):
        change_door(Strategy.STAY, 0, 2)


def test_determine_winner_examples() -> None:
    """Known arrangements should score as documented."""

    assert determine_winner(3, ["goat", "goat", "car"]) == "WIN"
    assert determine_winner(1, ["goat", "car", "goat"]) == "LOSE"


def test_determine_winner_matches_car_position() -> None:
    """A pick wins exactly when it hides the car."""

    for game in ALL_GAMES:
        for door in DOORS:
            expected = Outcome.WIN if game[door] is Prize.CAR else Outcome.LOSE
            assert determine_winner(door, game) is expected


def test_determine_winner_rejects_invalid_door() -> None:
    """Out-of-range final picks should raise."""

    with pytest.raises(ValueError):
        determine_winner(0, ["goat", "goat", "car"])


def test_stages_reject_non_generator_rng() -> None:
    """Passing something other than a NumPy generator should raise."""

    with pytest.raises(ValueError, match="numpy.random.Generator"):
        create_game(rng=42)
