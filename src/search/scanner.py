"""Incremental foodspot detection along a single line segment.

find_in_seg() walks from one endpoint toward the other in steps of
length eps, asking a detector ("look function") at every point whether
any foodspot is perceptible from there.

Steep segments are scanned with x and y swapped: incrementing x by a
tiny amount along a near-vertical line gives huge, unstable y steps,
and a truly vertical line has no usable slope at all. After the swap
|slope| <= STEEP_SLOPE_INF, so x moves toward its endpoint by a
bounded positive increment on every iteration.

The loop ends when x reaches the endpoint x2; y is never compared to
y2. With a slope very close to (but not) zero, adding y_eps to y can
leave y unchanged in floating point, so a test on y might never
succeed. Once x == x2 the y coordinate is treated as having reached y2;
any remaining difference is far below the eps resolution of the search.
"""

import math
from collections.abc import Callable
from typing import Any

from src.walk.geometry import as_xy, slope_from_coords
from src.walk.types import Detection, Stop

LookFn = Callable[[float, float], Any]

# Slopes steeper than this (in absolute value) are scanned with x and y
# swapped.
STEEP_SLOPE_INF = 1.0


def xy_shifts(eps: float, slope: float) -> tuple[float, float]:
    """Split a shift of length eps along a line into x and y shifts.

    Both returned shifts are non-negative; callers apply the signs.
    """
    if math.isinf(slope):
        return 0.0, eps
    x_eps = eps / math.sqrt(1.0 + slope * slope)
    y_eps = abs(slope * x_eps)
    return x_eps, y_eps


def swap_args(f: LookFn) -> LookFn:
    """Wrap a two-argument function so that its arguments are reversed."""
    def swapped(x: float, y: float) -> Any:
        return f(y, x)

    return swapped


def find_in_seg(
    look_fn: LookFn,
    eps: float,
    p1: Stop | tuple[float, float],
    p2: Stop | tuple[float, float],
    steep_slope_inf: float = STEEP_SLOPE_INF,
) -> Detection | None:
    """Scan the segment from p1 to p2 for foodspots.

    Starting at p1, calls look_fn(x, y) at points eps apart along the
    segment, ending with p2 itself. Stops at the first truthy result.

    Args:
        look_fn: Detector returning a falsy value, or a truthy value
            describing the foodspots perceptible from (x, y).
        eps: Distance between successive checks (> 0).
        p1: Starting endpoint.
        p2: Ending endpoint.
        steep_slope_inf: Absolute slope above which x and y are swapped.

    Returns:
        Detection with look_fn's value and the point it was found from,
        or None if nothing was found on the segment.

    Raises:
        ValueError: If eps is not positive, or too small to move x along
            the segment in floating point.
    """
    if not eps > 0:
        raise ValueError(f"eps must be > 0, got {eps}")

    x1, y1 = as_xy(p1)
    x2, y2 = as_xy(p2)
    slope = slope_from_coords((x1, y1), (x2, y2))
    steep = math.isinf(slope) or abs(slope) > steep_slope_inf
    if steep:
        slope = 1.0 / slope  # 0.0 for vertical and zero-length segments
        look_fn = swap_args(look_fn)
        x1, y1, x2, y2 = y1, x1, y2, x2

    x_pos_dir = x1 <= x2
    y_pos_dir = y1 <= y2
    x_eps, y_eps = xy_shifts(eps, slope)
    x_shift = x_eps if x_pos_dir else -x_eps
    y_shift = y_eps if y_pos_dir else -y_eps

    x, y = x1, y1
    while True:
        food = look_fn(x, y)
        if food:
            return Detection(food, (y, x) if steep else (x, y))
        if x == x2:
            return None
        xsh = x + x_shift
        ysh = y + y_shift
        if xsh == x:
            raise ValueError(
                f"eps ({eps}) is too small to advance from x={x} toward {x2}"
            )
        # clamp so neither coordinate overshoots its endpoint
        x = x2 if (xsh > x2 if x_pos_dir else xsh < x2) else xsh
        y = y2 if (ysh > y2 if y_pos_dir else ysh < y2) else ysh
