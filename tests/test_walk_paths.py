"""Tests for trimming step-vector streams and accumulating them into stops."""

import itertools
import math

import pytest

from src.distributions import PowerLaw, RandomSource
from src.walk.generator import make_levy_vecs
from src.walk.geometry import (
    distance_2d,
    intercept_from_slope,
    rotate,
    slope_from_coords,
)
from src.walk.paths import (
    composite_walk_stops,
    count_vecs_upto_len,
    next_walk_stop,
    stops_path_len,
    subst_init_dir,
    vecs_path_len,
    vecs_upto_len,
    walk_stops,
)
from src.walk.types import Stop, StepVector


def _levy_stream(seed: int = 42):
    source = RandomSource(seed)
    return make_levy_vecs(source, PowerLaw(source, 1.0, 2.0), 1.0, 100.0)


class _CountingStream:
    """Iterator of unit vectors that counts how many were pulled."""

    def __init__(self, length: float = 1.0) -> None:
        self.pulled = 0
        self.length = length

    def __iter__(self):
        return self

    def __next__(self) -> StepVector:
        self.pulled += 1
        return StepVector(0.0, self.length)


class TestGeometry:
    """Planar primitives."""

    def test_rotate_quarter_turn(self) -> None:
        x, y = rotate(math.pi / 2, (2.0, 0.0))
        assert x == pytest.approx(0.0, abs=1e-12)
        assert y == pytest.approx(2.0)

    def test_distance(self) -> None:
        assert distance_2d((0, 0), Stop(3.0, 4.0)) == 5.0

    def test_slope_vertical_and_degenerate(self) -> None:
        assert math.isinf(slope_from_coords((1, 0), (1, 5)))
        assert math.isinf(slope_from_coords((1, 1), (1, 1)))
        assert slope_from_coords((0, 0), (2, 1)) == 0.5

    def test_intercept(self) -> None:
        assert intercept_from_slope(2.0, (1.0, 5.0)) == 3.0


class TestVecsUptoLen:
    """Exact-length truncation of step-vector streams."""

    @pytest.mark.parametrize("desired", [0.5, 1.0, 37.25, 500.0, 12_345.6])
    def test_trim_exact_total(self, desired: float) -> None:
        vecs = vecs_upto_len(desired, _levy_stream())
        assert vecs_path_len(vecs) == pytest.approx(desired, rel=1e-9)

    @pytest.mark.parametrize("desired", [0.5, 37.25, 500.0])
    def test_untrimmed_total_bounds(self, desired: float) -> None:
        vecs = vecs_upto_len(desired, _levy_stream(), trim=False)
        total = vecs_path_len(vecs)
        assert total >= desired
        assert total < desired + vecs[-1].length

    def test_only_last_vector_changes(self) -> None:
        untrimmed = vecs_upto_len(300.0, _levy_stream(7), trim=False)
        trimmed = vecs_upto_len(300.0, _levy_stream(7))
        assert trimmed[:-1] == untrimmed[:-1]
        assert trimmed[-1].direction == untrimmed[-1].direction
        assert trimmed[-1].length <= untrimmed[-1].length

    def test_exact_fit_leaves_last_vector_unchanged(self) -> None:
        vecs = [StepVector(0.0, 2.0), StepVector(1.0, 3.0), StepVector(2.0, 4.0)]
        assert vecs_upto_len(5.0, vecs) == vecs[:2]

    def test_zero_total_takes_nothing(self) -> None:
        stream = _CountingStream()
        assert vecs_upto_len(0.0, stream) == []
        assert stream.pulled == 0

    def test_does_not_pull_past_needed_vector(self) -> None:
        stream = _CountingStream()
        vecs = vecs_upto_len(3.5, stream)
        assert len(vecs) == 4
        assert stream.pulled == 4
        assert vecs[-1].length == pytest.approx(0.5)

    def test_exhausted_stream_returns_everything(self) -> None:
        vecs = [StepVector(0.0, 1.0), StepVector(0.0, 2.0)]
        assert vecs_upto_len(10.0, vecs) == vecs
        assert vecs_upto_len(10.0, vecs, trim=False) == vecs
        assert vecs_upto_len(10.0, []) == []

    def test_label_kept_on_trimmed_vector(self) -> None:
        vecs = vecs_upto_len(1.5, [StepVector(0.0, 1.0, "a"), StepVector(0.0, 1.0, "b")])
        assert vecs[-1] == StepVector(0.0, 0.5, "b")

    def test_count_matches_vecs_upto_len(self) -> None:
        expected = len(vecs_upto_len(2_000.0, _levy_stream(3)))
        assert count_vecs_upto_len(2_000.0, _levy_stream(3)) == expected

    def test_count_pulls_same_number(self) -> None:
        stream = _CountingStream(2.0)
        assert count_vecs_upto_len(7.0, stream) == 4
        assert stream.pulled == 4


class TestSubstInitDir:
    """Replacing the first direction of a stream."""

    def test_first_direction_replaced(self) -> None:
        vecs = list(subst_init_dir(1.25, [StepVector(0.0, 2.0, "x"), StepVector(3.0, 4.0)]))
        assert vecs == [StepVector(1.25, 2.0, "x"), StepVector(3.0, 4.0)]

    def test_empty_stream(self) -> None:
        assert list(subst_init_dir(1.0, [])) == []

    def test_lazy_on_infinite_stream(self) -> None:
        stream = _CountingStream()
        out = subst_init_dir(0.5, stream)
        assert stream.pulled == 0
        first = list(itertools.islice(out, 3))
        assert first[0].direction == 0.5
        assert stream.pulled == 3


class TestWalkStops:
    """Accumulating step vectors into stops."""

    def test_base_point_first(self) -> None:
        stops = walk_stops((5.0, 6.0), [])
        assert stops == [Stop(5.0, 6.0)]

    def test_simple_square(self) -> None:
        vecs = [
            StepVector(0.0, 1.0),
            StepVector(math.pi / 2, 1.0),
            StepVector(math.pi, 1.0),
            StepVector(3 * math.pi / 2, 1.0),
        ]
        stops = walk_stops(Stop(0.0, 0.0), vecs)
        assert len(stops) == 5
        assert stops[2].x == pytest.approx(1.0)
        assert stops[2].y == pytest.approx(1.0)
        assert stops[-1].x == pytest.approx(0.0, abs=1e-12)
        assert stops[-1].y == pytest.approx(0.0, abs=1e-12)

    def test_segment_lengths_match_vectors(self) -> None:
        vecs = vecs_upto_len(5_000.0, _levy_stream(11))
        stops = walk_stops((100.0, -50.0), vecs)
        assert len(stops) == len(vecs) + 1
        for p, q, v in zip(stops, stops[1:], vecs):
            assert distance_2d(p, q) == pytest.approx(v.length, rel=1e-9)
        assert stops_path_len(stops) == pytest.approx(5_000.0, rel=1e-9)

    def test_labels_carried_to_stops(self) -> None:
        stops = walk_stops((0.0, 0.0), [StepVector(0.0, 1.0, "a"), StepVector(0.0, 1.0)])
        assert [s.label for s in stops] == [None, "a", None]

    def test_next_walk_stop(self) -> None:
        stop = next_walk_stop((1.0, 1.0), StepVector(math.pi, 2.0, "back"))
        assert stop.x == pytest.approx(-1.0)
        assert stop.y == pytest.approx(1.0)
        assert stop.label == "back"

    def test_composite_walk_stops(self) -> None:
        a = walk_stops((0.0, 0.0), [StepVector(0.0, 1.0)])
        b = walk_stops((5.0, 5.0), [StepVector(0.0, 1.0)])
        assert composite_walk_stops([a, iter(b)]) == a + b
