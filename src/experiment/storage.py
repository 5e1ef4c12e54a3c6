"""JSON storage of experiment results and random source state snapshots.

Each experiment gets its own directory:

    <results_dir>/<experiment_id>/result.json
    <results_dir>/<experiment_id>/rng_states/<combo_key>.json

The state files can be loaded with RandomSource.read_state() to rerun a
single combination by hand.
"""

import json
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from src.config.experiment import ForageConfig
from src.config.hashing import environment_config_hash, full_config_hash
from src.config.serialization import config_to_dict
from src.experiment.types import ComboResult, ExperimentResult

log = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def generate_experiment_id(config: ForageConfig, kind: str) -> str:
    """Experiment id like "levy_a1b2c3d4_20260101T120000Z"."""
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return f"{kind}_{full_config_hash(config)[:8]}_{stamp}"


def save_experiment_result(
    result: ExperimentResult,
    config: ForageConfig,
    results_dir: Path = Path("results"),
) -> Path:
    """Write result.json and one RNG state file per combination.

    Args:
        result: Experiment results.
        config: Configuration the experiment ran with.
        results_dir: Base directory for experiment directories.

    Returns:
        Path to the written result.json.
    """
    experiment_id = generate_experiment_id(config, result.kind)
    out_dir = Path(results_dir) / experiment_id
    state_dir = out_dir / "rng_states"
    state_dir.mkdir(parents=True, exist_ok=True)

    for key, state in result.rng_states.items():
        (state_dir / f"{key}.json").write_text(json.dumps(state, sort_keys=True))

    data: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "experiment_id": experiment_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "kind": result.kind,
        "seed": result.seed,
        "description": config.description,
        "tags": list(config.tags),
        "config": config_to_dict(config),
        "combos": [asdict(c) for c in result.combos],
        "metadata": {
            "config_hash": result.config_hash,
            "environment_config_hash": environment_config_hash(config),
        },
    }
    result_path = out_dir / "result.json"
    result_path.write_text(json.dumps(data, indent=2))
    log.info("Experiment result written to %s (%d combos)", result_path, len(result.combos))
    return result_path


def load_experiment_result(result_path: Path) -> ExperimentResult:
    """Load an ExperimentResult written by save_experiment_result()."""
    result_path = Path(result_path)
    data = json.loads(result_path.read_text())
    if data.get("schema_version") != SCHEMA_VERSION:
        raise ValueError(
            f"Unsupported schema_version {data.get('schema_version')!r} "
            f"in {result_path}"
        )

    rng_states = {
        p.stem: json.loads(p.read_text())
        for p in sorted((result_path.parent / "rng_states").glob("*.json"))
    }
    combos = [
        ComboResult(
            exponent=c["exponent"],
            init_dir=c["init_dir"],
            found=c["found"],
            segments=c["segments"],
            lengths=tuple(c["lengths"]),
        )
        for c in data["combos"]
    ]
    log.info("Experiment result loaded from %s", result_path)
    return ExperimentResult(
        kind=data["kind"],
        seed=data["seed"],
        config_hash=data["metadata"]["config_hash"],
        combos=combos,
        rng_states=rng_states,
    )
