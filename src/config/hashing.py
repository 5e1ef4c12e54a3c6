"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from src.config.experiment import ForageConfig


def config_hash(config: Any) -> str:
    """Deterministic SHA-256 hash of a config object.

    Args:
        config: Any dataclass instance (or sub-config).

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    serialized = json.dumps(
        asdict(config),
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def environment_config_hash(config: ForageConfig) -> str:
    """Hash of the foodspot environment only (excludes seed and walk parameters).

    Runs that differ only in walk parameters or seed share the same
    environment hash, so their results can be compared directly.
    """
    return config_hash(config.environment)


def full_config_hash(config: ForageConfig) -> str:
    """Hash for full experiment identity, seed included."""
    return config_hash(config)
