"""Seeded random source with explicit, serializable state.

Wraps a numpy PCG64 Generator so that every component drawing random
numbers shares one object passed by reference, and so that the exact
generator state can be captured, written to disk and restored later to
replay a run.
"""

import copy
import json
import logging
import math
from pathlib import Path
from typing import Any

import numpy as np

log = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


def make_seed() -> int:
    """Draw a fresh non-negative 63-bit seed from OS entropy."""
    return int(np.random.SeedSequence().entropy % 2**63)


class RandomSource:
    """Stateful uniform random source used as direction distribution.

    Provides uniform doubles and uniform radians. Every draw advances the
    underlying generator, so draw order across components must be fixed
    for a run to be reproducible from its seed or saved state.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = make_seed() if seed is None else int(seed)
        self._rng = np.random.Generator(np.random.PCG64(self.seed))

    def next_double(self, low: float | None = None, high: float | None = None) -> float:
        """Uniform double in [0, 1), or in [low, high) if bounds are given."""
        u = float(self._rng.random())
        if low is None and high is None:
            return u
        if low is None or high is None:
            raise ValueError("next_double needs both low and high, or neither")
        return low + u * (high - low)

    def next_radian(self) -> float:
        """Uniform direction in [0, 2pi)."""
        return float(self._rng.random()) * TWO_PI

    def get_state(self) -> dict[str, Any]:
        """Snapshot of the generator state (a JSON-serializable dict)."""
        return copy.deepcopy(self._rng.bit_generator.state)

    def set_state(self, state: dict[str, Any]) -> None:
        """Restore a snapshot taken with get_state()."""
        self._rng.bit_generator.state = copy.deepcopy(state)

    def write_state(self, path: Path) -> Path:
        """Write the current generator state to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.get_state(), sort_keys=True))
        log.debug("RNG state written to %s", path)
        return path

    def read_state(self, path: Path) -> None:
        """Restore the generator state from a file written by write_state()."""
        self.set_state(json.loads(Path(path).read_text()))
        log.debug("RNG state read from %s", path)
