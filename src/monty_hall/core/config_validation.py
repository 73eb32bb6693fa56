"""Strict checks and coercions for declarative simulation settings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any
import operator


def validate_allowed_keys(
    mapping: Mapping[str, Any],
    *,
    field_name: str,
    allowed_keys: Iterable[str],
) -> None:
    """Reject keys that are not part of a config schema.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Configuration mapping to validate.
    field_name : str
        Human-readable path used in error messages.
    allowed_keys : Iterable[str]
        Key names accepted in ``mapping``.

    Raises
    ------
    ValueError
        If unknown keys are present.
    """

    allowed = set(str(key) for key in allowed_keys)
    unknown = sorted(str(key) for key in mapping if str(key) not in allowed)
    if unknown:
        raise ValueError(f"{field_name} has unknown keys: {unknown}; allowed: {sorted(allowed)}")


def coerce_positive_int(raw: Any, *, field_name: str) -> int:
    """Coerce a strictly positive integer.

    Booleans and non-integral floats are rejected so ``true`` or ``2.5`` in
    a config file never silently become a batch size.
    """

    if isinstance(raw, bool):
        raise ValueError(f"{field_name} must be a positive integer, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"{field_name} must be a positive integer, got {raw!r}")
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field_name} must be a positive integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{field_name} must be > 0, got {value}")
    return value


def require_int(value: Any, *, field_name: str, minimum: int) -> int:
    """Require an actual integer (not ``bool``, not ``float``) >= ``minimum``.

    NumPy integer scalars are accepted and returned as ``int``.
    """

    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer, got {value!r}")
    try:
        number = operator.index(value)
    except TypeError as exc:
        raise ValueError(f"{field_name} must be an integer, got {value!r}") from exc
    if number < minimum:
        raise ValueError(f"{field_name} must be >= {minimum}, got {number}")
    return number


def coerce_optional_int(raw: Any, *, field_name: str) -> int | None:
    """Coerce an optional non-negative integer such as a seed."""

    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValueError(f"{field_name} must be an integer or null, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"{field_name} must be an integer or null, got {raw!r}")
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field_name} must be an integer or null, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{field_name} must be >= 0, got {value}")
    return value


def coerce_float(raw: Any, *, field_name: str) -> float:
    """Coerce one float field."""

    if isinstance(raw, bool):
        raise ValueError(f"{field_name} must be a number, got {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field_name} must be a number, got {raw!r}") from exc


__all__ = [
    "coerce_float",
    "coerce_optional_int",
    "coerce_positive_int",
    "require_int",
    "validate_allowed_keys",
]
