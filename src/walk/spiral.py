"""Archimedean spirals as lazy stop streams.

Spirals are easier to build directly as coordinates than as step
vectors. A finite prefix (e.g. via itertools.islice) can be spliced
into a composite walk with composite_walk_stops() and searched with
foodwalk().
"""

import itertools
import math
from collections.abc import Iterator

from src.walk.geometry import rotate
from src.walk.types import Stop


def archimedean_spiral_pt(a: float, theta: float) -> tuple[float, float]:
    """Point at angle theta on the spiral r = a * theta around the origin."""
    r = a * theta
    return r * math.cos(theta), r * math.sin(theta)


def archimedean_spiral(
    a: float,
    increment: float,
    x: float = 0.0,
    y: float = 0.0,
    angle: float = 0.0,
    label: str | None = None,
) -> Iterator[Stop]:
    """Infinite stream of stops on an Archimedean spiral.

    Args:
        a: Arm separation factor; the radius at angle theta is a * theta.
        increment: Angle in radians between successive points.
        x: x coordinate of the spiral's centre.
        y: y coordinate of the spiral's centre.
        angle: Rotation of the whole spiral about its centre, in radians.
        label: Label attached to every stop.
    """
    if increment <= 0:
        raise ValueError(f"increment must be > 0, got {increment}")

    def points() -> Iterator[Stop]:
        for k in itertools.count():
            px, py = archimedean_spiral_pt(a, k * increment)
            if angle:
                # rotate about the origin before shifting to the centre
                px, py = rotate(angle, (px, py))
            yield Stop(px + x, py + y, label)

    return points()


def unit_archimedean_spiral(
    arm_dist: float,
    increment: float,
    x: float = 0.0,
    y: float = 0.0,
    angle: float = 0.0,
    label: str | None = None,
) -> Iterator[Stop]:
    """Archimedean spiral whose successive arms are arm_dist apart.

    Distance is measured along a straight line from the centre. See
    archimedean_spiral() for the other arguments.
    """
    return archimedean_spiral(arm_dist / (2 * math.pi), increment, x, y, angle, label)
