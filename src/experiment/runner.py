"""Sweeps of Lévy and straight foodwalks over exponents and initial directions.

A single RandomSource seeded from config.seed is shared by every walk of
an experiment. Combinations run in a fixed order (exponents outer,
directions inner), and the source state is captured before each
combination so its walks can be replayed in isolation.
"""

import logging

from src.config.experiment import ForageConfig
from src.config.hashing import full_config_hash
from src.distributions.powerlaw import PowerLaw
from src.distributions.source import RandomSource
from src.experiment.types import ComboResult, ExperimentResult, combo_key
from src.search.detectors import TargetSetDetector, centerless_rectangular_grid
from src.search.scanner import LookFn
from src.search.strategies import levy_foodwalk, straight_foodwalk
from src.search.summary import (
    count_all_segments_in_foodwalks,
    count_found_foodspots,
    path_until_found_length,
)

log = logging.getLogger(__name__)


def make_look_fn(config: ForageConfig) -> LookFn:
    """Detector over a centerless foodspot grid described by config.environment."""
    env = config.environment
    if config.walk.look_eps > 2 * env.perc_radius:
        log.warning(
            "look_eps=%g exceeds the perception diameter %g; "
            "walks can pass foodspots without perceiving them",
            config.walk.look_eps,
            2 * env.perc_radius,
        )
    foodspots = centerless_rectangular_grid(
        env.food_distance, env.env_size, env.env_size
    )
    return TargetSetDetector(foodspots, env.perc_radius)


def levy_experiments(
    config: ForageConfig,
    look_fn: LookFn | None = None,
) -> ExperimentResult:
    """Run walks_per_combo Lévy foodwalks for every (exponent, direction) pair.

    Args:
        config: Experiment configuration.
        look_fn: Detector; defaults to make_look_fn(config).

    Returns:
        ExperimentResult with one ComboResult per combination.
    """
    if look_fn is None:
        look_fn = make_look_fn(config)
    sweep = config.sweep
    init_dirs = sweep.init_dirs()
    init_loc = config.environment.start_location()
    source = RandomSource(config.seed)

    log.info(
        "Performing %d Levy runs (%d exponents x %d directions x %d walks)",
        len(sweep.exponents) * len(init_dirs) * sweep.walks_per_combo,
        len(sweep.exponents),
        len(init_dirs),
        sweep.walks_per_combo,
    )

    combos: list[ComboResult] = []
    rng_states = {}
    for exponent in sweep.exponents:
        len_dist = PowerLaw(source, sweep.powerlaw_scale, exponent)
        for init_dir in init_dirs:
            rng_states[combo_key(exponent, init_dir)] = source.get_state()
            outcomes = [
                levy_foodwalk(
                    look_fn, config.walk, source, len_dist, init_loc, init_dir
                )
                for _ in range(sweep.walks_per_combo)
            ]
            combo = ComboResult(
                exponent=exponent,
                init_dir=init_dir,
                found=count_found_foodspots(outcomes),
                segments=count_all_segments_in_foodwalks(outcomes),
                lengths=tuple(path_until_found_length(o) for o in outcomes),
            )
            combos.append(combo)
            log.info(
                "mu=%g dir=%s: %d foodspots found in %d walks",
                exponent,
                "random" if init_dir is None else f"{init_dir:.4f}",
                combo.found,
                sweep.walks_per_combo,
            )

    return ExperimentResult(
        kind="levy",
        seed=config.seed,
        config_hash=full_config_hash(config),
        combos=combos,
        rng_states=rng_states,
    )


def straight_experiments(
    config: ForageConfig,
    look_fn: LookFn | None = None,
) -> ExperimentResult:
    """Run one straight foodwalk per initial direction of the sweep.

    With num_dirs unset, a single walk in a random direction is run.
    """
    if look_fn is None:
        look_fn = make_look_fn(config)
    init_dirs = config.sweep.init_dirs()
    init_loc = config.environment.start_location()
    source = RandomSource(config.seed)

    log.info("Performing %d straight runs", len(init_dirs))

    combos: list[ComboResult] = []
    rng_states = {}
    for init_dir in init_dirs:
        rng_states[combo_key(None, init_dir)] = source.get_state()
        outcome = straight_foodwalk(look_fn, config.walk, source, init_loc, init_dir)
        combos.append(
            ComboResult(
                exponent=None,
                init_dir=init_dir,
                found=count_found_foodspots([outcome]),
                segments=count_all_segments_in_foodwalks([outcome]),
                lengths=(path_until_found_length(outcome),),
            )
        )

    log.info(
        "Straight runs: %d of %d found food",
        sum(1 for c in combos if c.found),
        len(combos),
    )
    return ExperimentResult(
        kind="straight",
        seed=config.seed,
        config_hash=full_config_hash(config),
        combos=combos,
        rng_states=rng_states,
    )
