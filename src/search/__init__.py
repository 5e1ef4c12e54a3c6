"""Foodspot search: segment scanning, foodwalks, strategies, detectors and summaries."""

from src.search.detectors import (
    RepeatedSuccessLook,
    TargetSetDetector,
    centerless_rectangular_grid,
    never_found,
)
from src.search.foodwalk import (
    foodwalk,
    path_with_food,
    reconstruct_full_walk,
    trim_full_walk,
)
from src.search.scanner import STEEP_SLOPE_INF, find_in_seg, swap_args, xy_shifts
from src.search.strategies import (
    levy_foodwalk,
    levy_foodwalk_flush_state,
    shift_beyond_radius,
    straight_foodwalk,
    vecs_foodwalk,
)
from src.search.summary import (
    count_all_segments,
    count_all_segments_in_foodwalks,
    count_found_foodspots,
    count_segments_until_found,
    count_segments_until_found_in_foodwalks,
    count_successful,
    path_if_found_length,
    path_until_found_length,
    sort_foodwalks,
)

__all__ = [
    "STEEP_SLOPE_INF",
    "RepeatedSuccessLook",
    "TargetSetDetector",
    "centerless_rectangular_grid",
    "count_all_segments",
    "count_all_segments_in_foodwalks",
    "count_found_foodspots",
    "count_segments_until_found",
    "count_segments_until_found_in_foodwalks",
    "count_successful",
    "find_in_seg",
    "foodwalk",
    "levy_foodwalk",
    "levy_foodwalk_flush_state",
    "never_found",
    "path_if_found_length",
    "path_until_found_length",
    "path_with_food",
    "reconstruct_full_walk",
    "shift_beyond_radius",
    "sort_foodwalks",
    "straight_foodwalk",
    "swap_args",
    "trim_full_walk",
    "vecs_foodwalk",
    "xy_shifts",
]
