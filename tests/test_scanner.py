"""Tests for incremental foodspot detection along a segment."""

import math

import pytest

from src.search.detectors import never_found
from src.search.scanner import STEEP_SLOPE_INF, find_in_seg, swap_args, xy_shifts
from src.walk.types import Stop


class _RecordingLook:
    """Look function that records every point and fires on a predicate."""

    def __init__(self, predicate=lambda x, y: False, result="food") -> None:
        self.points: list[tuple[float, float]] = []
        self.predicate = predicate
        self.result = result

    def __call__(self, x: float, y: float):
        self.points.append((x, y))
        return self.result if self.predicate(x, y) else None


class TestXYShifts:
    """Decomposition of eps into per-axis shifts."""

    def test_horizontal(self) -> None:
        assert xy_shifts(1.0, 0.0) == (1.0, 0.0)

    def test_diagonal(self) -> None:
        x_eps, y_eps = xy_shifts(1.0, -1.0)
        assert x_eps == pytest.approx(1 / math.sqrt(2))
        assert y_eps == pytest.approx(1 / math.sqrt(2))

    def test_shift_has_length_eps(self) -> None:
        x_eps, y_eps = xy_shifts(0.3, 0.75)
        assert math.hypot(x_eps, y_eps) == pytest.approx(0.3)

    def test_vertical(self) -> None:
        assert xy_shifts(2.0, math.inf) == (0.0, 2.0)


class TestSwapArgs:
    def test_swaps(self) -> None:
        assert swap_args(lambda x, y: (x, y))(1, 2) == (2, 1)


class TestFindInSeg:
    """Scanning single segments."""

    def test_horizontal_detection(self) -> None:
        targets = ["foodspot"]
        look = _RecordingLook(lambda x, y: x == 5.0, targets)
        result = find_in_seg(look, 1.0, (0.0, 0.0), (10.0, 0.0))
        assert result is not None
        assert result.targets is targets
        assert result.at == (5.0, 0.0)
        assert look.points == [(float(i), 0.0) for i in range(6)]

    def test_vertical_detection(self) -> None:
        look = _RecordingLook(lambda x, y: y == 6.0, ["foodspot"])
        result = find_in_seg(look, 2.0, (0.0, 0.0), (0.0, 10.0))
        assert result is not None
        assert result.targets == ["foodspot"]
        assert result.at == (0.0, 6.0)
        # the wrapped detector still receives (x, y) in the original order
        assert look.points == [(0.0, 0.0), (0.0, 2.0), (0.0, 4.0), (0.0, 6.0)]

    def test_non_detection(self) -> None:
        assert find_in_seg(never_found, 0.5, (0.0, 0.0), (10.0, 3.0)) is None

    def test_endpoint_is_checked(self) -> None:
        look = _RecordingLook()
        find_in_seg(look, 3.0, (0.0, 0.0), (10.0, 0.0))
        assert look.points == [(0.0, 0.0), (3.0, 0.0), (6.0, 0.0), (9.0, 0.0), (10.0, 0.0)]

    def test_accepts_stops(self) -> None:
        look = _RecordingLook(lambda x, y: x >= 2.0)
        result = find_in_seg(look, 1.0, Stop(0.0, 0.0, "a"), Stop(4.0, 0.0, "b"))
        assert result.at == (2.0, 0.0)

    def test_reverse_direction(self) -> None:
        look = _RecordingLook(lambda x, y: x <= 7.0)
        result = find_in_seg(look, 1.0, (10.0, 5.0), (0.0, 5.0))
        assert result.at == (7.0, 5.0)

    def test_downward_vertical(self) -> None:
        look = _RecordingLook(lambda x, y: y <= 4.0)
        result = find_in_seg(look, 2.0, (3.0, 10.0), (3.0, 0.0))
        assert result.at == (3.0, 4.0)

    def test_degenerate_segment_single_look(self) -> None:
        look = _RecordingLook()
        assert find_in_seg(look, 1.0, (2.0, 3.0), (2.0, 3.0)) is None
        assert look.points == [(2.0, 3.0)]

    def test_degenerate_segment_detection(self) -> None:
        look = _RecordingLook(lambda x, y: True)
        result = find_in_seg(look, 1.0, (2.0, 3.0), (2.0, 3.0))
        assert result.at == (2.0, 3.0)

    def test_diagonal_points_on_segment(self) -> None:
        look = _RecordingLook()
        find_in_seg(look, 0.1, (0.0, 0.0), (3.0, 2.0))
        assert look.points[-1] == (3.0, 2.0)
        for x, y in look.points[:-1]:
            assert y == pytest.approx(2.0 * x / 3.0, abs=1e-9)
        spacing = math.dist(look.points[0], look.points[1])
        assert spacing == pytest.approx(0.1)

    def test_steep_segment_scanned_along_y(self) -> None:
        look = _RecordingLook()
        find_in_seg(look, 1.0, (0.0, 0.0), (1.0, 10.0))
        ys = [y for _, y in look.points]
        assert ys == sorted(ys)
        assert look.points[-1] == (1.0, 10.0)
        # consecutive points are eps apart along the segment
        assert math.dist(look.points[0], look.points[1]) == pytest.approx(1.0)

    def test_near_vertical_terminates(self) -> None:
        look = _RecordingLook()
        assert find_in_seg(look, 0.5, (0.0, 0.0), (1e-12, 100.0)) is None
        assert 200 <= len(look.points) <= 202

    def test_near_zero_slope_terminates(self) -> None:
        # y_eps is below half an ulp of y, so adding it never moves y
        look = _RecordingLook()
        y2 = 1e8 + 2.0**-22
        assert find_in_seg(look, 1.0, (0.0, 1e8), (50.0, y2)) is None
        assert all(y == 1e8 for _, y in look.points)
        assert look.points[-1][0] == 50.0
        assert len(look.points) == 51

    def test_steep_threshold(self) -> None:
        assert STEEP_SLOPE_INF == 1.0

    def test_invalid_eps(self) -> None:
        with pytest.raises(ValueError, match="eps"):
            find_in_seg(never_found, 0.0, (0.0, 0.0), (1.0, 0.0))

    def test_eps_too_small_for_coordinates(self) -> None:
        with pytest.raises(ValueError, match="too small"):
            find_in_seg(never_found, 1e-12, (1e8, 0.0), (1e8 + 10.0, 0.0))
