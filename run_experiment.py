#!/usr/bin/env python3
"""Entry point for running foraging walk experiments.

Chains the experiment stages into a single executable command:
config loading -> seeding -> foodspot environment -> walk sweep ->
result storage.

Usage:
    python run_experiment.py --config config.json --kind levy
    python run_experiment.py --config config.json --kind straight
    python run_experiment.py --config config.json --dry-run
    python run_experiment.py --kind levy --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from src.config import (
    DEFAULT_CONFIG,
    ForageConfig,
    config_from_json,
    environment_config_hash,
    full_config_hash,
)

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def run_pipeline(
    config: ForageConfig, kind: str, results_dir: str = "results"
) -> Path:
    """Execute an experiment and store its results.

    Args:
        config: Experiment configuration.
        kind: "levy" or "straight".
        results_dir: Base directory for results output.

    Returns:
        Path to the written result.json.
    """
    # Lazy imports to keep --dry-run fast
    from src.experiment import (
        levy_experiments,
        make_look_fn,
        save_experiment_result,
        straight_experiments,
    )
    from src.reproducibility import set_seed

    pipeline_start = time.monotonic()

    with stage_timer("Reproducibility Seeding"):
        set_seed(config.seed)
        log.info("Seed set: %d", config.seed)

    with stage_timer("Foodspot Environment"):
        look_fn = make_look_fn(config)
        log.info(
            "Environment: %d foodspots, perc_radius=%g",
            len(look_fn.foodspots),
            look_fn.perc_radius,
        )

    with stage_timer(f"{kind.capitalize()} Walks"):
        if kind == "levy":
            result = levy_experiments(config, look_fn)
        else:
            result = straight_experiments(config, look_fn)

    with stage_timer("Save Results"):
        result_path = save_experiment_result(result, config, Path(results_dir))

    total_elapsed = time.monotonic() - pipeline_start
    n_walks = sum(len(c.lengths) for c in result.combos)
    n_found = sum(c.found for c in result.combos)
    print(f"\n{'=' * 60}")
    print(f"Experiment complete in {total_elapsed:.1f}s")
    print(f"  Walks:      {n_walks}")
    print(f"  Foodspots:  {n_found}")
    print(f"  Result:     {result_path}")
    print(f"{'=' * 60}")

    return result_path


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Run a Levy or straight foodwalk experiment"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to experiment config JSON file (defaults built in if omitted)",
    )
    parser.add_argument(
        "--kind",
        choices=("levy", "straight"),
        default="levy",
        help="Search strategy to run",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="results",
        help="Base directory for results",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show experiment plan without running it",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is None:
        config = DEFAULT_CONFIG
    else:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = config_from_json(config_path.read_text())

    env = config.environment
    walk = config.walk
    sweep = config.sweep
    init_dirs = sweep.init_dirs()
    print(f"Config hash:      {full_config_hash(config)}")
    print(f"Environment hash: {environment_config_hash(config)}")
    print()
    print(f"Environment: size={env.env_size}, food_distance={env.food_distance}, "
          f"perc_radius={env.perc_radius}, start={env.start_location()}")
    print(f"Walk:        look_eps={walk.look_eps}, maxpathlen={walk.maxpathlen}, "
          f"steps in [{walk.min_step_len}, {walk.trunclen}], init_pad={walk.init_pad}")
    print(f"Sweep:       exponents={sweep.exponents}, directions={len(init_dirs)}, "
          f"walks_per_combo={sweep.walks_per_combo}")
    print(f"Seed:        {config.seed}")

    if args.dry_run:
        if args.kind == "levy":
            n_runs = len(sweep.exponents) * len(init_dirs) * sweep.walks_per_combo
        else:
            n_runs = len(init_dirs)
        print(f"\nPlan: {n_runs} {args.kind} walks -> {args.output}/")
        print(f"\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run_pipeline(config, args.kind, args.output)
    except Exception:
        log.exception("Experiment failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
