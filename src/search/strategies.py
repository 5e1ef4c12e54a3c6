"""Named foraging strategies: straight walks and Lévy walks.

Each driver builds a walk, searches it with foodwalk(), and returns a
WalkOutcome. Random draws from the shared direction and length
distributions happen in a fixed order so that runs are reproducible
from a seed or a saved random-source state:

- straight_foodwalk: initial direction (only when init_dir is None),
  then pad direction (only when walk.init_pad is not None).
- levy_foodwalk: for each step, direction then length, for as many
  steps as it takes to reach walk.maxpathlen; then pad direction (only
  when walk.init_pad is not None).
"""

import logging
from collections.abc import Iterable

from src.config.experiment import WalkConfig
from src.distributions.types import DirectionDistribution, LengthDistribution
from src.search.foodwalk import foodwalk
from src.search.scanner import LookFn
from src.walk.generator import make_levy_vecs
from src.walk.paths import (
    count_vecs_upto_len,
    next_walk_stop,
    subst_init_dir,
    vecs_upto_len,
    walk_stops,
)
from src.walk.types import StepVector, Stop, WalkOutcome

log = logging.getLogger(__name__)


def shift_beyond_radius(
    dir_dist: DirectionDistribution,
    pad_dist: float,
    coords: Stop | tuple[float, float],
) -> Stop:
    """Move pad_dist away from coords in a random direction."""
    return next_walk_stop(coords, StepVector(dir_dist.next_radian(), pad_dist))


def _padded_start(
    walk: WalkConfig,
    dir_dist: DirectionDistribution,
    init_loc: Stop | tuple[float, float],
) -> Stop | tuple[float, float]:
    if walk.init_pad is not None:
        return shift_beyond_radius(dir_dist, walk.init_pad, init_loc)
    return init_loc


def vecs_foodwalk(
    look_fn: LookFn,
    look_eps: float,
    init_loc: Stop | tuple[float, float],
    vecs: Iterable[StepVector],
    maxpathlen: float,
) -> WalkOutcome:
    """Trim a step-vector stream to maxpathlen, turn it into stops, and search it.

    Works with any stream, e.g. composite walks from
    incremental_composite_vecs().
    """
    if maxpathlen <= 0:
        raise ValueError(f"maxpathlen must be > 0, got {maxpathlen}")
    step_walk = vecs_upto_len(maxpathlen, vecs)
    return foodwalk(look_fn, look_eps, walk_stops(init_loc, step_walk))


def levy_foodwalk(
    look_fn: LookFn,
    walk: WalkConfig,
    dir_dist: DirectionDistribution,
    len_dist: LengthDistribution,
    init_loc: Stop | tuple[float, float],
    init_dir: float | None = None,
) -> WalkOutcome:
    """Generate a Lévy walk from init_loc and search it for food.

    Step lengths come from len_dist truncated to
    [walk.min_step_len, walk.trunclen]; the walk ends where food is first
    found, or when the summed step lengths reach walk.maxpathlen.

    Args:
        look_fn: Detector, see find_in_seg().
        walk: Walk parameters.
        dir_dist: Direction distribution (shared random source).
        len_dist: Length distribution, normally a PowerLaw.
        init_loc: Starting point, before any padding shift.
        init_dir: Direction of the first step; random if None.

    Returns:
        WalkOutcome for the walk.
    """
    if walk.maxpathlen <= 0:
        raise ValueError(f"maxpathlen must be > 0, got {walk.maxpathlen}")
    inf_step_walk: Iterable[StepVector] = make_levy_vecs(
        dir_dist, len_dist, walk.min_step_len, walk.trunclen
    )
    if init_dir is not None:
        inf_step_walk = subst_init_dir(init_dir, inf_step_walk)
    step_walk = vecs_upto_len(walk.maxpathlen, inf_step_walk)
    first_loc = _padded_start(walk, dir_dist, init_loc)
    stops = walk_stops(first_loc, step_walk)
    log.debug("Levy walk with %d steps", len(step_walk))
    return foodwalk(look_fn, walk.look_eps, stops)


def levy_foodwalk_flush_state(
    walk: WalkConfig,
    dir_dist: DirectionDistribution,
    len_dist: LengthDistribution,
) -> None:
    """Advance the random sources exactly as levy_foodwalk() would.

    No stops are accumulated and no search happens; only the draws are
    made, so that alternative runs sharing one random source stay in the
    same state.
    """
    count_vecs_upto_len(
        walk.maxpathlen,
        make_levy_vecs(dir_dist, len_dist, walk.min_step_len, walk.trunclen),
    )
    if walk.init_pad is not None:
        dir_dist.next_radian()


def straight_foodwalk(
    look_fn: LookFn,
    walk: WalkConfig,
    dir_dist: DirectionDistribution,
    init_loc: Stop | tuple[float, float],
    init_dir: float | None = None,
) -> WalkOutcome:
    """Search a single straight segment of length walk.maxpathlen for food.

    Args:
        look_fn: Detector, see find_in_seg().
        walk: Walk parameters.
        dir_dist: Direction distribution, used for a random initial
            direction and for the padding shift.
        init_loc: Starting point, before any padding shift.
        init_dir: Direction of the segment; random if None.

    Returns:
        WalkOutcome for the walk.
    """
    if walk.maxpathlen <= 0:
        raise ValueError(f"maxpathlen must be > 0, got {walk.maxpathlen}")
    first_dir = dir_dist.next_radian() if init_dir is None else init_dir
    first_loc = _padded_start(walk, dir_dist, init_loc)
    stops = walk_stops(first_loc, [StepVector(first_dir, walk.maxpathlen)])
    return foodwalk(look_fn, walk.look_eps, stops)
