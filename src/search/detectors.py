"""Look functions for tests and small experiments.

A look function takes (x, y) and returns a falsy value, or a truthy
value describing the foodspots perceptible from that point. The
TargetSetDetector checks every foodspot on every call; it is meant for
modest foodspot counts, not as a spatial index.
"""

import logging

import numpy as np

log = logging.getLogger(__name__)


def never_found(x: float, y: float) -> bool:
    """Look function that never finds a foodspot."""
    return False


class RepeatedSuccessLook:
    """Look function that "finds" a foodspot on every interval-th call."""

    def __init__(self, interval: int) -> None:
        if interval < 1:
            raise ValueError(f"interval must be >= 1, got {interval}")
        self.interval = interval
        self._count = 1

    def __call__(self, x: float, y: float) -> bool:
        if self._count == self.interval:
            self._count = 1
            return True
        self._count += 1
        return False


def centerless_rectangular_grid(
    sep: float, width: float, height: float
) -> np.ndarray:
    """Foodspot coordinates on a grid with spacing sep, omitting the centre point.

    The grid covers [0, width] x [0, height]. The centre is left empty
    because walks usually start there.

    Returns:
        Float array of shape (n_foodspots, 2).
    """
    xs = np.arange(0.0, width + sep / 2, sep)
    ys = np.arange(0.0, height + sep / 2, sep)
    grid = np.stack(np.meshgrid(xs, ys, indexing="ij"), axis=-1).reshape(-1, 2)
    centre = np.array([width / 2, height / 2])
    keep = ~np.all(np.isclose(grid, centre), axis=1)
    return grid[keep]


class TargetSetDetector:
    """Look function over a fixed set of foodspot coordinates.

    Args:
        foodspots: Array-like of shape (n, 2).
        perc_radius: A foodspot is perceived from within this distance.
    """

    def __init__(self, foodspots: np.ndarray, perc_radius: float) -> None:
        if perc_radius <= 0:
            raise ValueError(f"perc_radius must be > 0, got {perc_radius}")
        self.foodspots = np.asarray(foodspots, dtype=np.float64).reshape(-1, 2)
        self.perc_radius = float(perc_radius)
        self._radius_sq = self.perc_radius**2
        log.debug(
            "Detector over %d foodspots, perc_radius=%g",
            len(self.foodspots),
            self.perc_radius,
        )

    def __call__(self, x: float, y: float) -> list[tuple[float, float]] | None:
        d = self.foodspots - (x, y)
        hits = self.foodspots[(d * d).sum(axis=1) <= self._radius_sq]
        if len(hits) == 0:
            return None
        return [(float(fx), float(fy)) for fx, fy in hits]
