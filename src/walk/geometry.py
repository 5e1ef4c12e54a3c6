"""Planar geometry primitives used by walk accumulation and segment scanning."""

import math

from src.walk.types import Stop


def as_xy(point: Stop | tuple[float, float]) -> tuple[float, float]:
    """Return the (x, y) coordinates of a Stop or a coordinate pair."""
    if isinstance(point, Stop):
        return point.x, point.y
    x, y = point
    return float(x), float(y)


def as_stop(point: Stop | tuple[float, float]) -> Stop:
    """Return point as a Stop, converting coordinate pairs."""
    if isinstance(point, Stop):
        return point
    return Stop(*as_xy(point))


def rotate(angle: float, xy: tuple[float, float]) -> tuple[float, float]:
    """Rotate the vector xy counterclockwise by angle radians about the origin."""
    x, y = xy
    cos_t = math.cos(angle)
    sin_t = math.sin(angle)
    return x * cos_t - y * sin_t, x * sin_t + y * cos_t


def distance_2d(
    p: Stop | tuple[float, float], q: Stop | tuple[float, float]
) -> float:
    """Euclidean distance between two points."""
    x0, y0 = as_xy(p)
    x1, y1 = as_xy(q)
    return math.hypot(x1 - x0, y1 - y0)


def slope_from_coords(
    p1: Stop | tuple[float, float], p2: Stop | tuple[float, float]
) -> float:
    """Slope of the line through p1 and p2.

    Returns math.inf when the x coordinates are equal, which covers both
    vertical segments and zero-length segments.
    """
    x1, y1 = as_xy(p1)
    x2, y2 = as_xy(p2)
    dx = x2 - x1
    if dx == 0.0:
        return math.inf
    return (y2 - y1) / dx


def intercept_from_slope(slope: float, point: Stop | tuple[float, float]) -> float:
    """y-intercept of the line with the given slope passing through point."""
    x, y = as_xy(point)
    return y - slope * x
