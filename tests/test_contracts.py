"""Tests for core value types."""

from __future__ import annotations

import numpy as np
import pytest

from monty_hall.core import (
    BatchResult,
    GameRound,
    GameState,
    Outcome,
    Prize,
    RoundResult,
    Strategy,
    outcome_counts,
    validate_door,
)


def _round(stay: Outcome, switch: Outcome) -> GameRound:
    """Build one round record with fixed doors."""

    return GameRound(
        game=GameState.from_prizes(["car", "goat", "goat"]),
        first_pick=1,
        opened_door=2,
        stay_pick=1,
        switch_pick=3,
        stay_outcome=stay,
        switch_outcome=switch,
    )


def test_game_state_from_labels_is_one_based() -> None:
    """Door ``n`` should map to the ``n``-th prize label."""

    game = GameState.from_prizes(["goat", "car", "goat"])

    assert game[1] is Prize.GOAT
    assert game[2] is Prize.CAR
    assert game.car_door == 2
    assert game.goat_doors == (1, 3)
    assert game.labels() == ("goat", "car", "goat")


def test_game_state_accepts_members_and_mixed_case_labels() -> None:
    """Prize members and case-insensitive labels should both parse."""

    game = GameState.from_prizes([Prize.GOAT, "GOAT", " car "])

    assert game.prizes == (Prize.GOAT, Prize.GOAT, Prize.CAR)
    assert GameState.from_prizes(game) is game


@pytest.mark.parametrize(
    ("prizes", "message"),
    [
        (["goat", "goat", "goat"], "exactly one car"),
        (["car", "car", "goat"], "exactly one car"),
        (["goat", "car"], "exactly 3 doors"),
        (["goat", "car", "goat", "goat"], "exactly 3 doors"),
        (["goat", "cow", "car"], "unknown prize label"),
    ],
)
def test_game_state_rejects_invalid_arrangements(prizes, message) -> None:
    """Malformed games should fail at construction."""

    with pytest.raises(ValueError, match=message):
        GameState.from_prizes(prizes)


@pytest.mark.parametrize("door", [0, 4, -1, True, 2.0, "2", None])
def test_validate_door_rejects_non_doors(door) -> None:
    """Only integers 1..3 are doors."""

    with pytest.raises(ValueError):
        validate_door(door)


def test_validate_door_accepts_numpy_integers() -> None:
    """NumPy integer scalars should be accepted and returned as ``int``."""

    value = validate_door(np.int64(3))

    assert value == 3
    assert type(value) is int


def test_game_state_indexing_validates_door() -> None:
    """Indexing with a non-door should raise instead of wrapping around."""

    game = GameState.from_prizes(["goat", "goat", "car"])

    with pytest.raises(ValueError):
        game[0]


def test_outcome_compares_equal_to_labels() -> None:
    """Outcome members should compare equal to their plain labels."""

    assert Outcome.WIN == "WIN"
    assert Outcome.LOSE == "LOSE"
    assert Strategy("switch") is Strategy.SWITCH


def test_batch_records_preserve_round_order() -> None:
    """Records should list stay then switch for every round in order."""

    batch = BatchResult(rounds=(_round(Outcome.WIN, Outcome.LOSE), _round(Outcome.LOSE, Outcome.WIN)))

    assert batch.n_games == 2
    assert batch.records == (
        RoundResult(Strategy.STAY, Outcome.WIN),
        RoundResult(Strategy.SWITCH, Outcome.LOSE),
        RoundResult(Strategy.STAY, Outcome.LOSE),
        RoundResult(Strategy.SWITCH, Outcome.WIN),
    )
    assert batch.outcomes("switch") == (Outcome.LOSE, Outcome.WIN)


def test_outcome_counts_include_both_keys() -> None:
    """Counts should report zero for outcomes that never occurred."""

    assert outcome_counts([Outcome.WIN, Outcome.WIN]) == {Outcome.WIN: 2, Outcome.LOSE: 0}
