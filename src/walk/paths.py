"""Turning step-vector streams into finite walks.

Step vectors are easier to splice and measure than coordinates: the
total length of a walk is the sum of its vector lengths, and composite
walks are plain concatenations of vector sequences. This module trims
(possibly infinite) vector streams to a desired total length and
accumulates finite vector sequences into stops, i.e. absolute
coordinates.
"""

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import replace

from src.walk.geometry import as_stop, as_xy, distance_2d, rotate
from src.walk.types import Stop, StepVector


def subst_init_dir(init_dir: float, step_seq: Iterable[StepVector]) -> Iterator[StepVector]:
    """Lazily yield step_seq with the first vector's direction replaced by init_dir."""
    it = iter(step_seq)
    first = next(it, None)
    if first is None:
        return
    yield replace(first, direction=init_dir)
    yield from it


def vecs_upto_len(
    desired_total: float,
    vecs: Iterable[StepVector],
    trim: bool = True,
) -> list[StepVector]:
    """Take vectors from the front of vecs until their lengths sum to desired_total.

    Vectors are pulled only while the running total is below
    desired_total, so an infinite lazy stream is never advanced past
    the last vector needed. With trim=True the last vector is shortened
    so the lengths sum to exactly desired_total; with trim=False it is
    returned unchanged. If vecs runs out first, everything consumed is
    returned. desired_total is assumed to be >= 0.
    """
    tot_len = 0.0
    out_vecs: list[StepVector] = []
    it = iter(vecs)
    while tot_len < desired_total:
        vec = next(it, None)
        if vec is None:
            return out_vecs
        tot_len += vec.length
        out_vecs.append(vec)

    if trim and out_vecs:
        overshoot = tot_len - desired_total
        last = out_vecs[-1]
        out_vecs[-1] = replace(last, length=last.length - overshoot)
    return out_vecs


def count_vecs_upto_len(desired_total: float, vecs: Iterable[StepVector]) -> int:
    """Number of vectors vecs_upto_len() would take for desired_total.

    Consumes vecs exactly as vecs_upto_len() does, without keeping them.
    """
    tot_len = 0.0
    count = 0
    it = iter(vecs)
    while tot_len < desired_total:
        vec = next(it, None)
        if vec is None:
            break
        tot_len += vec.length
        count += 1
    return count


def next_walk_stop(prev: Stop | tuple[float, float], vec: StepVector) -> Stop:
    """Add step vector vec to point prev, giving the next stop of a walk."""
    prev_x, prev_y = as_xy(prev)
    vec_x, vec_y = rotate(vec.direction, (vec.length, 0.0))  # vector lying on x-axis
    return Stop(prev_x + vec_x, prev_y + vec_y, vec.label)


def walk_stops(
    base: Stop | tuple[float, float], step_vectors: Iterable[StepVector]
) -> list[Stop]:
    """Accumulate a finite sequence of step vectors into stops, starting at base."""
    prev = as_stop(base)
    result = [prev]
    for vec in step_vectors:
        prev = next_walk_stop(prev, vec)
        result.append(prev)
    return result


def vecs_path_len(step_vectors: Iterable[StepVector]) -> float:
    """Total length of a path given as step vectors."""
    return sum(vec.length for vec in step_vectors)


def stops_path_len(stops: list[Stop]) -> float:
    """Total length of a path given as stops."""
    return sum(distance_2d(p, q) for p, q in itertools.pairwise(stops))


def composite_walk_stops(walk_stop_seqs: Iterable[Iterable[Stop]]) -> list[Stop]:
    """Concatenate finite sequences of stops into one realized list."""
    return [stop for seq in walk_stop_seqs for stop in seq]
