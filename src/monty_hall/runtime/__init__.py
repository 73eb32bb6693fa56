"""Runtime helpers for seeded simulation."""

from .rng import choose_uniform, make_rng, resolve_rng

__all__ = ["choose_uniform", "make_rng", "resolve_rng"]
