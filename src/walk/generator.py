"""Step-vector generation for random and composite walks.

Implements two generation strategies:
1. Single-distribution step vectors (Lévy walks when the length
   distribution is a power law), via step_vector_fn() and make_levy_vecs()
2. Composite walks that cyclically interleave several step-vector
   functions under the control of switch functions, via
   CompositeWalkScheduler

All streams are lazy and infinite: a vector is drawn only when the
consumer asks for it, which keeps the draw order from the shared random
source deterministic. They cannot be restarted; to replay a stream,
recreate it from a random source in the same state.
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import replace
from typing import Any

from src.distributions.types import DirectionDistribution, LengthDistribution
from src.walk.types import StepVector

log = logging.getLogger(__name__)

StepVectorFn = Callable[[], StepVector]
SwitchFn = Callable[[StepVector, Any], Any]


def step_vector_fn(
    dir_dist: DirectionDistribution,
    len_dist: LengthDistribution,
    low: float | None = None,
    high: float | None = None,
) -> StepVectorFn:
    """Return a function of no arguments producing one random step vector.

    The direction is drawn first, uniformly in [0, 2pi) from dir_dist;
    the length is drawn second from len_dist, truncated to [low, high]
    when both bounds are given.

    Example::

        source = RandomSource(seed)
        next_step = step_vector_fn(source, PowerLaw(source, 1, 2), 1, 100)
        steps = [next_step() for _ in range(10)]
    """
    if (low is None) != (high is None):
        raise ValueError("step_vector_fn needs both low and high, or neither")

    if low is None:
        def next_step() -> StepVector:
            direction = dir_dist.next_radian()
            return StepVector(direction, len_dist.next_double())
    else:
        def next_step() -> StepVector:
            direction = dir_dist.next_radian()
            return StepVector(direction, len_dist.next_double(low, high))

    return next_step


def make_levy_vecs(
    dir_dist: DirectionDistribution,
    len_dist: LengthDistribution,
    low: float,
    high: float,
) -> Iterator[StepVector]:
    """Infinite iterator of step vectors with lengths truncated to [low, high]."""
    next_step = step_vector_fn(dir_dist, len_dist, low, high)
    while True:
        yield next_step()


def switch_after_n_steps(n: int) -> SwitchFn:
    """Switch function that moves on to the next step-vector function after n steps.

    The carry value is the number of steps taken so far with the current
    function; the returned value is False on every nth call.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    def switch(_vec: StepVector, step_count: int | None) -> int | bool:
        new_count = 1 if step_count is None else step_count + 1
        if new_count >= n:
            return False
        return new_count

    return switch


class CompositeWalkScheduler:
    """Round-robin scheduler over (step-vector fn, switch fn, label) triples.

    Each call to next() draws a fresh vector from the current step-vector
    function, tags it with the current label if labels were given, and
    passes (vector, carry) to the current switch function. A truthy
    return value means "continue with this pair" and becomes the new
    carry; a falsy one advances cyclically to the next pair and resets
    the carry to None.

    Args:
        switch_fns: Switch functions, one per step-vector function.
        vec_fns: Step-vector functions such as those from step_vector_fn().
        labels: Optional labels, one per step-vector function.
    """

    def __init__(
        self,
        switch_fns: Sequence[SwitchFn],
        vec_fns: Sequence[StepVectorFn],
        labels: Sequence[str] | None = None,
    ) -> None:
        if not vec_fns:
            raise ValueError("at least one step-vector function is required")
        if len(switch_fns) != len(vec_fns):
            raise ValueError(
                f"switch_fns ({len(switch_fns)}) and vec_fns ({len(vec_fns)}) "
                "must have the same length"
            )
        if labels is not None and len(labels) != len(vec_fns):
            raise ValueError(
                f"labels ({len(labels)}) and vec_fns ({len(vec_fns)}) "
                "must have the same length"
            )
        self._switch_fns = list(switch_fns)
        self._vec_fns = list(vec_fns)
        self._labels = None if labels is None else list(labels)
        self.index = 0
        self.carry: Any = None

    def __iter__(self) -> "CompositeWalkScheduler":
        return self

    def __next__(self) -> StepVector:
        vec = self._vec_fns[self.index]()
        if self._labels is not None:
            vec = replace(vec, label=self._labels[self.index])
        self._transition(self._switch_fns[self.index](vec, self.carry))
        return vec

    def _transition(self, new_carry: Any) -> None:
        if new_carry:
            self.carry = new_carry
            return
        self.index = (self.index + 1) % len(self._vec_fns)
        self.carry = None
        log.debug("Composite walk switched to generator %d", self.index)


def incremental_composite_vecs(
    switch_fns: Sequence[SwitchFn],
    vec_fns: Sequence[StepVectorFn],
    labels: Sequence[str] | None = None,
) -> Iterator[StepVector]:
    """Infinite composite stream of step vectors; see CompositeWalkScheduler."""
    return CompositeWalkScheduler(switch_fns, vec_fns, labels)
