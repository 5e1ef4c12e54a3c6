"""Foodspot search along whole walks, and assembly of foodwalk outcomes."""

import logging
from collections.abc import Iterable

from src.search.scanner import LookFn, find_in_seg
from src.walk.geometry import as_stop
from src.walk.types import Stop, WalkOutcome

log = logging.getLogger(__name__)


def path_with_food(
    look_fn: LookFn, eps: float, stops: Iterable[Stop | tuple[float, float]]
) -> tuple[object | None, list[Stop]]:
    """Search a walk segment by segment and truncate it where food is found.

    Uses find_in_seg() on each pair of consecutive stops in order.

    Args:
        look_fn: Detector, see find_in_seg().
        eps: Distance between successive checks within a segment.
        stops: The walk, as Stops or (x, y) pairs; must contain at least
            two points.

    Returns:
        (found, path) where found is look_fn's value at the first
        detection and path is the walk up to and including the point from
        which it was made; or (None, the whole walk) if nothing was found.

    Raises:
        ValueError: If stops has fewer than two elements.
    """
    stops = [as_stop(s) for s in stops]
    if len(stops) < 2:
        raise ValueError(f"a walk needs at least 2 stops, got {len(stops)}")

    for j in range(1, len(stops)):
        detection = find_in_seg(look_fn, eps, stops[j - 1], stops[j])
        if detection is not None:
            x, y = detection.at
            log.debug("Food found in segment %d at (%.6g, %.6g)", j - 1, x, y)
            return detection.targets, stops[:j] + [Stop(x, y, stops[j].label)]
    return None, stops


def trim_full_walk(
    found: object | None, walk_until_food: list[Stop], full_walk: list[Stop]
) -> WalkOutcome:
    """Build a WalkOutcome, keeping only the unexplored tail of full_walk.

    If nothing was found the two walks are identical and the remainder is
    None. Otherwise the first len(walk_until_food) - 2 stops are dropped
    from full_walk, so the remainder begins with the segment in which the
    food was found.
    """
    if not found:
        return WalkOutcome(found, walk_until_food, None)
    return WalkOutcome(found, walk_until_food, full_walk[len(walk_until_food) - 2:])


def foodwalk(
    look_fn: LookFn, look_eps: float, stop_walk: Iterable[Stop | tuple[float, float]]
) -> WalkOutcome:
    """Search stop_walk for food and return the resulting WalkOutcome.

    stop_walk may be built directly from coordinate pairs, e.g. a
    composite walk containing spirals; pairs are converted to Stops.
    """
    stop_walk = [as_stop(s) for s in stop_walk]
    found, walk_until_food = path_with_food(look_fn, look_eps, stop_walk)
    return trim_full_walk(found, walk_until_food, stop_walk)


def reconstruct_full_walk(outcome: WalkOutcome) -> list[Stop]:
    """Recover the untruncated walk from a WalkOutcome.

    Drops the detection point from path_until_found and joins the
    remainder on at the stop the two share.
    """
    if outcome.remainder is None:
        return list(outcome.path_until_found)
    head = outcome.path_until_found[:-1]
    return head[:-1] + list(outcome.remainder)
