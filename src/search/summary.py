"""Simple per-walk and per-batch summaries of foodwalk outcomes."""

from collections.abc import Iterable

from src.walk.paths import stops_path_len
from src.walk.types import WalkOutcome


def path_until_found_length(outcome: WalkOutcome) -> float:
    """Length of the walk up to where food was found (or the whole walk)."""
    return stops_path_len(outcome.path_until_found)


def path_if_found_length(outcome: WalkOutcome) -> float | None:
    """Length of the walk up to where food was found, or None if none was."""
    if not outcome.found:
        return None
    return stops_path_len(outcome.path_until_found)


def count_successful(outcomes: Iterable[WalkOutcome]) -> int:
    """Number of foodwalks that found any food."""
    return sum(1 for o in outcomes if o.found)


def count_found_foodspots(outcomes: Iterable[WalkOutcome]) -> int:
    """Number of foodspots found across foodwalks.

    A walk that perceives several foodspots at once counts each of them;
    a detector value that is not a collection counts as one.
    """
    total = 0
    for o in outcomes:
        if not o.found:
            continue
        try:
            total += len(o.found)
        except TypeError:
            total += 1
    return total


def count_segments_until_found(outcome: WalkOutcome) -> int:
    """Segments walked until food was found (or in the whole walk)."""
    return len(outcome.path_until_found) - 1


def count_segments_until_found_in_foodwalks(outcomes: Iterable[WalkOutcome]) -> int:
    return sum(count_segments_until_found(o) for o in outcomes)


def count_all_segments(outcome: WalkOutcome) -> int:
    """Segments in the full walk, including those after food was found.

    The last segment of path_until_found and the first of the remainder
    are parts of the same segment of the full walk.
    """
    if outcome.remainder is None:
        return len(outcome.path_until_found) - 1
    return len(outcome.path_until_found) + len(outcome.remainder) - 3


def count_all_segments_in_foodwalks(outcomes: Iterable[WalkOutcome]) -> int:
    return sum(count_all_segments(o) for o in outcomes)


def sort_foodwalks(outcomes: Iterable[WalkOutcome]) -> list[WalkOutcome]:
    """Foodwalks that found food first, otherwise in their original order."""
    return sorted(outcomes, key=lambda o: 0 if o.found else 1)
