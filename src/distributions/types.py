"""Structural interfaces for the distributions consumed by walk generation."""

from typing import Protocol


class DirectionDistribution(Protocol):
    """Anything that yields random directions in radians."""

    def next_radian(self) -> float: ...


class LengthDistribution(Protocol):
    """Anything that yields random lengths, optionally bounded to [low, high]."""

    def next_double(self, low: float | None = None, high: float | None = None) -> float: ...
