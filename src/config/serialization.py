"""JSON serialization and deserialization for experiment configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from src.config.experiment import ForageConfig

# strict=True rejects unknown keys (catches schema drift); cast converts
# JSON arrays back to tuples and JSON integers to floats where a float
# field is declared.
_DACITE_CONFIG = DaciteConfig(
    cast=[tuple, float],
    check_types=True,
    strict=True,
)


def config_to_json(config: ForageConfig) -> str:
    """Serialize a ForageConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> ForageConfig:
    """Deserialize a JSON string to a ForageConfig."""
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: ForageConfig) -> dict[str, Any]:
    """Convert a ForageConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> ForageConfig:
    """Reconstruct a ForageConfig from a plain dictionary."""
    return from_dict(data_class=ForageConfig, data=d, config=_DACITE_CONFIG)
