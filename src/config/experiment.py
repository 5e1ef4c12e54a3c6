"""Foraging experiment configuration dataclasses, all frozen and slotted."""

import math
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class EnvironmentConfig:
    """Foodspot layout and perception parameters."""

    env_size: float = 20_000.0  # full width and height of the square env
    food_distance: float = 200.0  # grid spacing between foodspots
    perc_radius: float = 1.0  # distance at which a foodspot is perceived
    init_loc: tuple[float, float] | None = None  # None means env centre

    def start_location(self) -> tuple[float, float]:
        """Walk starting point: init_loc, or the centre of the environment."""
        if self.init_loc is not None:
            return self.init_loc
        half = self.env_size / 2
        return (half, half)


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Parameters shared by straight and Lévy foodwalks."""

    look_eps: float = 0.1  # increment within segments for food checks
    maxpathlen: float = 20_000.0  # total length of a walk
    trunclen: float = 10_000.0  # max length of any single step
    min_step_len: float = 1.0  # min length of any single step
    init_pad: float | None = None  # shift the start this far in a random dir


@dataclass(frozen=True, slots=True)
class SweepConfig:
    """Exponent and initial-direction sweep for experiment runs."""

    exponents: tuple[float, ...] = (1.5, 2.0, 2.5, 3.0)  # power-law mu values
    powerlaw_scale: float = 1.0  # minimum value of the power law
    walks_per_combo: int = 100
    num_dirs: int | None = None  # None means one random initial direction
    max_frac: float = 0.25  # fraction of pi spanned by initial directions

    def init_dirs(self) -> list[float | None]:
        """Initial directions: num_dirs + 1 evenly spaced values in [0, max_frac * pi]."""
        if self.num_dirs is None:
            return [None]
        increment = math.pi * self.max_frac / self.num_dirs
        return [k * increment for k in range(self.num_dirs + 1)]


@dataclass(frozen=True, slots=True)
class ForageConfig:
    """Top-level experiment configuration composing all sub-configs.

    All fields are frozen and typed. Cross-parameter validation runs
    in __post_init__ to reject invalid configurations early.
    """

    environment: EnvironmentConfig = field(default_factory=EnvironmentConfig)
    walk: WalkConfig = field(default_factory=WalkConfig)
    sweep: SweepConfig = field(default_factory=SweepConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Cross-parameter validation."""
        if self.walk.look_eps <= 0:
            raise ValueError(f"look_eps must be > 0, got {self.walk.look_eps}")
        if self.walk.maxpathlen <= 0:
            raise ValueError(
                f"maxpathlen must be > 0, got {self.walk.maxpathlen}"
            )
        if self.walk.min_step_len <= 0:
            raise ValueError(
                f"min_step_len must be > 0, got {self.walk.min_step_len}"
            )
        if self.walk.trunclen < self.walk.min_step_len:
            raise ValueError(
                f"trunclen ({self.walk.trunclen}) must be "
                f">= min_step_len ({self.walk.min_step_len})"
            )
        if self.walk.init_pad is not None and self.walk.init_pad < 0:
            raise ValueError(f"init_pad must be >= 0, got {self.walk.init_pad}")
        if self.environment.perc_radius <= 0:
            raise ValueError(
                f"perc_radius must be > 0, got {self.environment.perc_radius}"
            )
        if self.environment.food_distance <= 0:
            raise ValueError(
                f"food_distance must be > 0, got {self.environment.food_distance}"
            )
        if self.environment.env_size < self.environment.food_distance:
            raise ValueError(
                f"env_size ({self.environment.env_size}) must be "
                f">= food_distance ({self.environment.food_distance})"
            )
        if not self.sweep.exponents:
            raise ValueError("exponents must not be empty")
        if any(mu <= 1 for mu in self.sweep.exponents):
            raise ValueError(
                f"exponents must all be > 1, got {self.sweep.exponents}"
            )
        if self.sweep.powerlaw_scale <= 0:
            raise ValueError(
                f"powerlaw_scale must be > 0, got {self.sweep.powerlaw_scale}"
            )
        if self.sweep.walks_per_combo < 1:
            raise ValueError(
                f"walks_per_combo must be >= 1, got {self.sweep.walks_per_combo}"
            )
        if self.sweep.num_dirs is not None and self.sweep.num_dirs < 1:
            raise ValueError(
                f"num_dirs must be >= 1 or None, got {self.sweep.num_dirs}"
            )
        if not 0 < self.sweep.max_frac <= 2:
            raise ValueError(
                f"max_frac must be in (0, 2], got {self.sweep.max_frac}"
            )
