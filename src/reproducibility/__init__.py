"""Reproducibility infrastructure: seed management and per-run seed derivation."""

from src.reproducibility.seed import derive_seed, set_seed, verify_seed_determinism

__all__ = [
    "derive_seed",
    "set_seed",
    "verify_seed_determinism",
]
