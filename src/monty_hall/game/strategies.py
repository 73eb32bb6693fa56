"""Resolve the contestant's final door under a stay/switch strategy."""

from __future__ import annotations

from monty_hall.core.contracts import DOORS, Door, Strategy, coerce_strategy, validate_door


def change_door(strategy: Strategy | str, opened_door: Door, original_pick: Door) -> Door:
    """Return the final door for ``strategy``.

    Parameters
    ----------
    strategy : Strategy | str
        ``"stay"`` keeps ``original_pick``; ``"switch"`` moves to the only
        door that is neither opened nor originally picked.
    opened_door : int
        Door opened by the host.
    original_pick : int
        Contestant's first pick.

    Returns
    -------
    int
        Final door.

    Raises
    ------
    ValueError
        If the strategy is unknown, a door is invalid, or the host opened
        the contestant's own door.
    """

    resolved = coerce_strategy(strategy)
    opened = validate_door(opened_door, field_name="opened_door")
    picked = validate_door(original_pick, field_name="original_pick")
    if opened == picked:
        raise ValueError(f"opened_door and original_pick must differ, both are {picked}")

    if resolved is Strategy.STAY:
        return picked

    (remaining,) = (door for door in DOORS if door not in (opened, picked))
    return remaining


__all__ = ["change_door"]
