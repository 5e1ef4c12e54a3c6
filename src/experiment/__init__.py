"""Experiment sweeps over foodwalk strategies, with JSON result storage."""

from src.experiment.runner import levy_experiments, make_look_fn, straight_experiments
from src.experiment.storage import (
    generate_experiment_id,
    load_experiment_result,
    save_experiment_result,
)
from src.experiment.types import ComboResult, ExperimentResult, combo_key

__all__ = [
    "ComboResult",
    "ExperimentResult",
    "combo_key",
    "generate_experiment_id",
    "levy_experiments",
    "load_experiment_result",
    "make_look_fn",
    "save_experiment_result",
    "straight_experiments",
]
