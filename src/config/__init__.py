"""Experiment configuration system with frozen, hashable, serializable dataclasses."""

from src.config.experiment import (
    EnvironmentConfig,
    ForageConfig,
    SweepConfig,
    WalkConfig,
)
from src.config.defaults import DEFAULT_CONFIG
from src.config.hashing import config_hash, environment_config_hash, full_config_hash
from src.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "EnvironmentConfig",
    "ForageConfig",
    "SweepConfig",
    "WalkConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "environment_config_hash",
    "full_config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]
