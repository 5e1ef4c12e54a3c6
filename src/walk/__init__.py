"""Walk module: step-vector generation, composite scheduling, trimming and accumulation."""

from src.walk.generator import (
    CompositeWalkScheduler,
    incremental_composite_vecs,
    make_levy_vecs,
    step_vector_fn,
    switch_after_n_steps,
)
from src.walk.paths import (
    composite_walk_stops,
    count_vecs_upto_len,
    next_walk_stop,
    stops_path_len,
    subst_init_dir,
    vecs_path_len,
    vecs_upto_len,
    walk_stops,
)
from src.walk.spiral import (
    archimedean_spiral,
    archimedean_spiral_pt,
    unit_archimedean_spiral,
)
from src.walk.types import Detection, StepVector, Stop, WalkOutcome

__all__ = [
    "CompositeWalkScheduler",
    "Detection",
    "StepVector",
    "Stop",
    "WalkOutcome",
    "archimedean_spiral",
    "archimedean_spiral_pt",
    "composite_walk_stops",
    "count_vecs_upto_len",
    "incremental_composite_vecs",
    "make_levy_vecs",
    "next_walk_stop",
    "step_vector_fn",
    "stops_path_len",
    "subst_init_dir",
    "switch_after_n_steps",
    "unit_archimedean_spiral",
    "vecs_path_len",
    "vecs_upto_len",
    "walk_stops",
]
