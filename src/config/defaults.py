"""Default configuration: the single source of truth for default experiment parameters."""

from src.config.experiment import ForageConfig

# Instantiated with all-default values: env_size=20000, food_distance=200,
# perc_radius=1, look_eps=0.1, maxpathlen=20000, trunclen=10000, seed=42.
DEFAULT_CONFIG = ForageConfig()
