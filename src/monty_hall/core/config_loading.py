"""Read simulation settings from JSON or YAML files.

A settings file is either a flat mapping of simulation keys or a mapping
with a ``simulation`` section holding them, so the same file can carry
other tool settings alongside::

    simulation:
      n_games: 10000
      seed: 7

Validation of the keys themselves lives in :mod:`monty_hall.simulation.config`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, TextIO

SIMULATION_SECTION = "simulation"

logger = logging.getLogger(__name__)


def _parse_json(handle: TextIO) -> Any:
    return json.load(handle)


def _parse_yaml(handle: TextIO) -> Any:
    try:
        import yaml
    except ImportError as exc:  # pragma: no cover - exercised only without pyyaml
        raise ImportError(
            "YAML settings require PyYAML. Install with `pip install monty-hall-sim[yaml]`."
        ) from exc
    document = yaml.safe_load(handle)
    # An empty YAML document means "no overrides".
    return {} if document is None else document


_PARSERS: dict[str, Callable[[TextIO], Any]] = {
    ".json": _parse_json,
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
}

SUPPORTED_CONFIG_SUFFIXES: tuple[str, ...] = tuple(_PARSERS)


def load_config_mapping(path: str | Path, *, section: str | None = SIMULATION_SECTION) -> dict[str, Any]:
    """Load simulation settings from one JSON/YAML file.

    Parameters
    ----------
    path : str | pathlib.Path
        Settings file ending in `.json`, `.yaml`, or `.yml`.
    section : str | None, optional
        Name of the nested section holding the settings. When the file has
        that key its value is returned; otherwise the whole root is. Pass
        ``None`` to always return the root.

    Returns
    -------
    dict[str, Any]
        Settings mapping.

    Raises
    ------
    ValueError
        If the suffix is unsupported, or the root or section is not a mapping.
    ImportError
        If a YAML file is given and PyYAML is not installed.
    """

    config_path = Path(path)
    suffix = config_path.suffix.lower()
    parser = _PARSERS.get(suffix)
    if parser is None:
        supported = ", ".join(SUPPORTED_CONFIG_SUFFIXES)
        raise ValueError(
            f"unsupported config file extension {suffix!r}; expected one of {supported}"
        )

    with config_path.open("r", encoding="utf-8") as handle:
        raw = parser(handle)
    if not isinstance(raw, dict):
        raise ValueError("config root must be a JSON/YAML object")

    if section is not None and section in raw:
        raw = raw[section]
        if not isinstance(raw, dict):
            raise ValueError(f"config section {section!r} must be a JSON/YAML object")

    logger.debug("loaded settings from %s: %s", config_path, sorted(raw))
    return raw


__all__ = ["SIMULATION_SECTION", "SUPPORTED_CONFIG_SUFFIXES", "load_config_mapping"]
