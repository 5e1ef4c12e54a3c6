"""Walk data structures: step vectors, stops, detections and foodwalk outcomes."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class StepVector:
    """Relative displacement in polar form.

    One step of a walk, going from one stop to the next. The label, when
    present, is carried over to the stop this vector produces.
    """

    direction: float  # radians, normally in [0, 2pi)
    length: float
    label: str | None = None


@dataclass(frozen=True, slots=True)
class Stop:
    """Absolute coordinate visited by a walk."""

    x: float
    y: float
    label: str | None = None

    def to_list(self) -> list[Any]:
        """Serializable form: [x, y] or [x, y, label]."""
        if self.label is None:
            return [self.x, self.y]
        return [self.x, self.y, self.label]


@dataclass(frozen=True, slots=True)
class Detection:
    """First perception of foodspots along a segment.

    `targets` is whatever truthy value the detector returned; `at` is the
    coordinate pair from which it was perceived.
    """

    targets: Any
    at: tuple[float, float]


@dataclass(frozen=True)
class WalkOutcome:
    """Result triple of a foodwalk.

    `path_until_found` ends at the detection point, or at the final stop
    when nothing was found. `remainder` is None when nothing was found;
    otherwise it is the unexplored tail of the full walk, starting at the
    first stop of the segment in which the detection happened.
    """

    found: Any | None
    path_until_found: list[Stop]
    remainder: list[Stop] | None

    def __iter__(self):
        return iter((self.found, self.path_until_found, self.remainder))

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for JSON output."""
        return {
            "found": _targets_to_json(self.found),
            "path_until_found": [s.to_list() for s in self.path_until_found],
            "remainder": (
                None
                if self.remainder is None
                else [s.to_list() for s in self.remainder]
            ),
        }


def _targets_to_json(found: Any) -> Any:
    if found is None or isinstance(found, (bool, int, float, str)):
        return found
    if isinstance(found, (list, tuple)):
        return [_targets_to_json(t) for t in found]
    return repr(found)
