"""Experiment result data structures."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ComboResult:
    """Outcome of all walks run with one (exponent, initial direction) combination.

    Straight experiments have no exponent and run one walk per direction.
    """

    exponent: float | None
    init_dir: float | None
    found: int  # number of foodspots found across the walks
    segments: int  # total segments in the full walks, before truncation
    lengths: tuple[float, ...]  # path length until found (or whole walk), per walk


@dataclass(frozen=True)
class ExperimentResult:
    """Immutable container for an experiment run and its provenance.

    rng_states maps a combination key (see combo_key()) to the random
    source state captured just before that combination's walks, so any
    combination can be rerun on its own.
    """

    kind: str  # "levy" or "straight"
    seed: int
    config_hash: str
    combos: list[ComboResult]
    rng_states: dict[str, dict[str, Any]] = field(default_factory=dict)


def combo_key(exponent: float | None, init_dir: float | None) -> str:
    """Stable key for an (exponent, initial direction) combination."""
    mu = "none" if exponent is None else repr(float(exponent))
    direction = "rand" if init_dir is None else repr(float(init_dir))
    return f"mu{mu}_dir{direction}"
