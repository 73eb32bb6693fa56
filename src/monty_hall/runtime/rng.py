"""Random-generator plumbing shared by every random stage of a round.

Game setup, the contestant's pick and the host's tie-break all draw from an
explicit :class:`numpy.random.Generator` so seeded runs are reproducible.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a generator from an optional seed.

    Parameters
    ----------
    seed : int | None, optional
        Seed passed to :func:`numpy.random.default_rng`. ``None`` uses
        NumPy's entropy source.

    Returns
    -------
    numpy.random.Generator
        Fresh generator.
    """

    return np.random.default_rng(seed)


def resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    """Return ``rng`` or an entropy-seeded generator when it is ``None``."""

    if rng is None:
        return make_rng()
    if not isinstance(rng, np.random.Generator):
        raise ValueError(f"rng must be a numpy.random.Generator, got {type(rng).__name__}")
    return rng


def choose_uniform(options: Sequence[Any], rng: np.random.Generator) -> Any:
    """Draw one element of ``options`` with equal probability.

    Raises
    ------
    ValueError
        If ``options`` is empty.
    """

    if len(options) == 0:
        raise ValueError("options must contain at least one element")
    return options[int(rng.integers(len(options)))]


__all__ = ["choose_uniform", "make_rng", "resolve_rng"]
