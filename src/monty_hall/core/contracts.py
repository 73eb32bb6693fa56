"""Value types shared by every stage of a Monty Hall round.

The game is fixed at three doors labelled ``1``, ``2`` and ``3``. Every type
in this module is immutable so a round's state can be passed between the
setup, host, strategy and outcome stages without defensive copies.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
import operator

Door = int
"""Door label in ``{1, 2, 3}``."""

DOORS: tuple[Door, ...] = (1, 2, 3)


class Prize(str, Enum):
    """What is hidden behind a door."""

    GOAT = "goat"
    CAR = "car"


class Strategy(str, Enum):
    """Contestant behaviour after the host opens a goat door."""

    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    """Result of a final pick."""

    WIN = "WIN"
    LOSE = "LOSE"


def validate_door(door: object, *, field_name: str = "door") -> Door:
    """Validate one door label.

    Parameters
    ----------
    door : object
        Candidate door label.
    field_name : str, optional
        Name used in error messages.

    Returns
    -------
    int
        The door label as a plain ``int``.

    Raises
    ------
    ValueError
        If ``door`` is not an integer in ``{1, 2, 3}``.
    """

    # numpy integers are accepted; bool is an int subclass but not a door.
    if isinstance(door, bool):
        raise ValueError(f"{field_name} must be an integer in {DOORS}, got {door!r}")
    try:
        value = operator.index(door)
    except TypeError as exc:
        raise ValueError(f"{field_name} must be an integer in {DOORS}, got {door!r}") from exc
    if value not in DOORS:
        raise ValueError(f"{field_name} must be one of {DOORS}, got {value!r}")
    return value


def coerce_strategy(strategy: Strategy | str) -> Strategy:
    """Return ``strategy`` as a :class:`Strategy` member."""

    try:
        return Strategy(strategy)
    except ValueError as exc:
        allowed = ", ".join(repr(item.value) for item in Strategy)
        raise ValueError(f"strategy must be one of {allowed}, got {strategy!r}") from exc


@dataclass(frozen=True, slots=True)
class GameState:
    """Arrangement of prizes behind the three doors.

    Parameters
    ----------
    prizes : tuple[Prize, Prize, Prize]
        Prize behind doors ``1``, ``2`` and ``3`` in that order.

    Raises
    ------
    ValueError
        If there are not exactly three prizes or not exactly one car.

    Notes
    -----
    Doors are 1-based, so ``game[1]`` is the first prize. Use
    :meth:`from_prizes` to build a game from plain labels such as
    ``["goat", "goat", "car"]``.
    """

    prizes: tuple[Prize, Prize, Prize]

    def __post_init__(self) -> None:
        if len(self.prizes) != len(DOORS):
            raise ValueError(f"a game must have exactly {len(DOORS)} doors, got {len(self.prizes)}")
        if any(not isinstance(prize, Prize) for prize in self.prizes):
            raise ValueError("prizes must be Prize members; use GameState.from_prizes for labels")
        n_cars = sum(1 for prize in self.prizes if prize is Prize.CAR)
        if n_cars != 1:
            raise ValueError(f"a game must hide exactly one car, got {n_cars}")

    @classmethod
    def from_prizes(cls, prizes: GameState | Iterable[Prize | str]) -> GameState:
        """Build a validated game from prize members or labels.

        Parameters
        ----------
        prizes : GameState | Iterable[Prize | str]
            Existing game (returned unchanged) or prizes for doors 1..3.

        Returns
        -------
        GameState
            Validated game.

        Raises
        ------
        ValueError
            If a label is unknown or the arrangement is invalid.
        """

        if isinstance(prizes, GameState):
            return prizes
        try:
            parsed = tuple(
                prize if isinstance(prize, Prize) else Prize(str(prize).strip().lower())
                for prize in prizes
            )
        except ValueError as exc:
            raise ValueError(f"unknown prize label in {prizes!r}") from exc
        return cls(prizes=parsed)  # type: ignore[arg-type]

    def __getitem__(self, door: Door) -> Prize:
        return self.prizes[validate_door(door) - 1]

    def __iter__(self):
        return iter(self.prizes)

    def __len__(self) -> int:
        return len(self.prizes)

    @property
    def car_door(self) -> Door:
        """Door hiding the car."""

        return self.prizes.index(Prize.CAR) + 1

    @property
    def goat_doors(self) -> tuple[Door, Door]:
        """Doors hiding goats, in ascending order."""

        return tuple(door for door in DOORS if self[door] is Prize.GOAT)  # type: ignore[return-value]

    def labels(self) -> tuple[str, ...]:
        """Return prize labels, e.g. ``("goat", "car", "goat")``."""

        return tuple(prize.value for prize in self.prizes)


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Outcome of one strategy in one round."""

    strategy: Strategy
    outcome: Outcome


@dataclass(frozen=True, slots=True)
class GameRound:
    """Complete record of one round played under both strategies.

    Parameters
    ----------
    game : GameState
        Prize arrangement for the round.
    first_pick : int
        Contestant's initial door.
    opened_door : int
        Goat door revealed by the host.
    stay_pick : int
        Final door under :attr:`Strategy.STAY`.
    switch_pick : int
        Final door under :attr:`Strategy.SWITCH`.
    stay_outcome : Outcome
        Result of ``stay_pick``.
    switch_outcome : Outcome
        Result of ``switch_pick``.

    Notes
    -----
    Both strategies are resolved against the same game, first pick and
    opened door, so the two outcomes are paired rather than independent.
    """

    game: GameState
    first_pick: Door
    opened_door: Door
    stay_pick: Door
    switch_pick: Door
    stay_outcome: Outcome
    switch_outcome: Outcome

    @property
    def results(self) -> tuple[RoundResult, RoundResult]:
        """Return ``(stay, switch)`` results for the round."""

        return (
            RoundResult(strategy=Strategy.STAY, outcome=self.stay_outcome),
            RoundResult(strategy=Strategy.SWITCH, outcome=self.switch_outcome),
        )

    def outcome_for(self, strategy: Strategy | str) -> Outcome:
        """Return the outcome of one strategy."""

        if coerce_strategy(strategy) is Strategy.STAY:
            return self.stay_outcome
        return self.switch_outcome


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Ordered, unaggregated rounds from one batch.

    Parameters
    ----------
    rounds : tuple[GameRound, ...]
        Rounds in the order they were played.
    """

    rounds: tuple[GameRound, ...]

    @property
    def n_games(self) -> int:
        """Number of rounds in the batch."""

        return len(self.rounds)

    @property
    def records(self) -> tuple[RoundResult, ...]:
        """Flatten rounds into ``2 * n_games`` labelled outcomes.

        Records keep round order with the stay result before the switch
        result of the same round.
        """

        return tuple(result for game_round in self.rounds for result in game_round.results)

    def outcomes(self, strategy: Strategy | str) -> tuple[Outcome, ...]:
        """Return one strategy's outcomes in round order."""

        resolved = coerce_strategy(strategy)
        return tuple(game_round.outcome_for(resolved) for game_round in self.rounds)


def outcome_counts(outcomes: Sequence[Outcome]) -> dict[Outcome, int]:
    """Count outcomes, always including both ``WIN`` and ``LOSE`` keys."""

    counts = {outcome: 0 for outcome in Outcome}
    for outcome in outcomes:
        counts[Outcome(outcome)] += 1
    return counts


__all__ = [
    "BatchResult",
    "DOORS",
    "Door",
    "GameRound",
    "GameState",
    "Outcome",
    "Prize",
    "RoundResult",
    "Strategy",
    "coerce_strategy",
    "outcome_counts",
    "validate_door",
]
