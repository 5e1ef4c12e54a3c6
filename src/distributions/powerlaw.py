"""Power-law (Pareto) step-length distribution with optional truncation.

A Lévy walk draws step lengths from a density proportional to
x^(-mu) for x >= scale, with mu the power-law exponent (mu > 1).
This is a Pareto distribution with shape alpha = mu - 1. Samples are
produced by inverse-CDF transform from a single uniform draw, so that
truncated and untruncated draws consume the shared random source in the
same way.
"""

from src.distributions.source import RandomSource


class PowerLaw:
    """Pareto length distribution backed by a shared RandomSource.

    Args:
        source: Random source to draw uniforms from (shared, stateful).
        scale: Minimum value of the untruncated distribution (> 0).
        exponent: Power-law exponent mu of the density (> 1).
    """

    def __init__(self, source: RandomSource, scale: float, exponent: float) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be > 0, got {scale}")
        if exponent <= 1:
            raise ValueError(f"exponent must be > 1, got {exponent}")
        self.source = source
        self.scale = float(scale)
        self.exponent = float(exponent)
        self.shape = self.exponent - 1.0

    def cdf(self, x: float) -> float:
        if x <= self.scale:
            return 0.0
        return 1.0 - (self.scale / x) ** self.shape

    def inverse_cdf(self, p: float) -> float:
        return self.scale * (1.0 - p) ** (-1.0 / self.shape)

    def next_double(self, low: float | None = None, high: float | None = None) -> float:
        """Draw one length, truncated to [low, high] if bounds are given."""
        u = self.source.next_double()
        if low is None and high is None:
            return self.inverse_cdf(u)
        if low is None or high is None:
            raise ValueError("next_double needs both low and high, or neither")
        if low > high:
            raise ValueError(f"low ({low}) must be <= high ({high})")
        p_low = self.cdf(low)
        p_high = self.cdf(high)
        x = self.inverse_cdf(p_low + u * (p_high - p_low))
        # inverse_cdf can land a hair outside the bounds through rounding
        return min(max(x, low), high)

    def next_radian(self) -> float:
        """Uniform direction from the shared source."""
        return self.source.next_radian()
