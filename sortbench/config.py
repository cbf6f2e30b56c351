"""YAML configuration with built-in defaults.

Every key is optional: a missing file or section falls back to
``DEFAULT_CONFIG``. Sections that are present must be mappings.
"""
from __future__ import annotations

import copy
import os
from typing import Any, Dict

import yaml

from sortbench.models import CANONICAL_ORDER, SweepConfig

DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "general": {
        "n": 10000,
        "min_value": 1,
        "max_value": 100000,
        "seed": None,
        "algorithms": list(CANONICAL_ORDER),
    },
    "output": {
        "enabled": False,
        "results_folder": "results",
        "chart": True,
    },
    "experiment": {
        "enabled": False,
        "sizes": [500, 1000, 2000, 4000],
        "repeats": 3,
        "base_seed": 0,
        "results_dir": "results/experiments",
    },
}

SECTIONS = ("general", "output", "experiment")


def merge_config(overrides: Dict[str, Any] | None) -> Dict[str, Any]:
    """Overlay ``overrides`` on a deep copy of the defaults, one section deep."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not overrides:
        return config
    if not isinstance(overrides, dict):
        raise ValueError("Configuration root must be a mapping")
    for key, value in overrides.items():
        if key in SECTIONS:
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ValueError(f"Config section '{key}' must be a mapping")
            config[key].update(value)
        else:
            config[key] = value
    return config


def load_config(config_file: str = "config.yaml", required: bool = False) -> Dict[str, Any]:
    """Load configuration from a YAML file merged over the defaults.

    Raises:
        FileNotFoundError: If ``required`` and the file does not exist.
    """
    if not os.path.isfile(config_file):
        if required:
            raise FileNotFoundError(f"Config file not found: {config_file}")
        return merge_config(None)
    with open(config_file, "r", encoding="utf-8") as file:
        raw = yaml.safe_load(file)
    return merge_config(raw)


def sweep_from_config(config: Dict[str, Any]) -> SweepConfig:
    general = config["general"]
    exp = config["experiment"]
    sizes = exp.get("sizes") or []
    if not sizes:
        raise ValueError("experiment.sizes must be a non-empty list")
    return SweepConfig(
        sizes=tuple(int(s) for s in sizes),
        repeats=int(exp.get("repeats", 1)),
        min_value=int(general["min_value"]),
        max_value=int(general["max_value"]),
        base_seed=int(exp.get("base_seed", 0)),
        algorithms=tuple(general.get("algorithms") or CANONICAL_ORDER),
    )
