"""Random sources and step-length distributions."""

from src.distributions.powerlaw import PowerLaw
from src.distributions.source import RandomSource, make_seed
from src.distributions.types import DirectionDistribution, LengthDistribution

__all__ = [
    "DirectionDistribution",
    "LengthDistribution",
    "PowerLaw",
    "RandomSource",
    "make_seed",
]
