"""Tests for experiment sweeps and result storage."""

import json
import math

import pytest

from src.config import EnvironmentConfig, ForageConfig, SweepConfig, WalkConfig, full_config_hash
from src.distributions import PowerLaw, RandomSource
from src.experiment import (
    ComboResult,
    combo_key,
    generate_experiment_id,
    levy_experiments,
    load_experiment_result,
    make_look_fn,
    save_experiment_result,
    straight_experiments,
)
from src.search import levy_foodwalk, never_found


@pytest.fixture
def small_config() -> ForageConfig:
    return ForageConfig(
        environment=EnvironmentConfig(env_size=1000.0, food_distance=100.0, perc_radius=1.0),
        walk=WalkConfig(look_eps=1.0, maxpathlen=500.0, trunclen=100.0),
        sweep=SweepConfig(exponents=(1.5, 3.0), walks_per_combo=2, num_dirs=2),
        seed=7,
    )


class TestComboKey:
    def test_keys(self):
        assert combo_key(2.0, 0.5) == "mu2.0_dir0.5"
        assert combo_key(None, None) == "munone_dirrand"
        assert combo_key(2, None) == "mu2.0_dirrand"


class TestMakeLookFn:
    """Foodspot grid detector built from the environment config."""

    def test_grid_without_centre(self, small_config):
        look = make_look_fn(small_config)
        # 11 x 11 grid on [0, 1000]^2, minus the centre
        assert len(look.foodspots) == 120
        assert look(500.0, 500.0) is None
        assert look(600.5, 500.0) == [(600.0, 500.0)]
        assert look.perc_radius == 1.0


class TestLevyExperiments:
    """Lévy sweeps over exponents and initial directions."""

    def test_combos_in_sweep_order(self, small_config):
        result = levy_experiments(small_config)
        assert result.kind == "levy"
        assert result.seed == 7
        assert result.config_hash == full_config_hash(small_config)
        assert len(result.combos) == 6
        assert [c.exponent for c in result.combos] == [1.5, 1.5, 1.5, 3.0, 3.0, 3.0]
        dirs = [c.init_dir for c in result.combos[:3]]
        assert dirs == pytest.approx([0.0, math.pi / 8, math.pi / 4])

    def test_combo_contents(self, small_config):
        result = levy_experiments(small_config, look_fn=never_found)
        for combo in result.combos:
            assert combo.found == 0
            assert len(combo.lengths) == 2
            assert all(length == pytest.approx(500.0) for length in combo.lengths)
            assert combo.segments >= 2 * 5

    def test_reproducible(self, small_config):
        assert levy_experiments(small_config) == levy_experiments(small_config)

    def test_rng_state_replays_combo(self, small_config):
        result = levy_experiments(small_config, look_fn=never_found)
        combo = result.combos[4]
        source = RandomSource(0)
        source.set_state(result.rng_states[combo_key(combo.exponent, combo.init_dir)])
        len_dist = PowerLaw(source, small_config.sweep.powerlaw_scale, combo.exponent)
        outcomes = [
            levy_foodwalk(
                never_found,
                small_config.walk,
                source,
                len_dist,
                small_config.environment.start_location(),
                combo.init_dir,
            )
            for _ in range(small_config.sweep.walks_per_combo)
        ]
        segments = sum(len(o.path_until_found) - 1 for o in outcomes)
        assert segments == combo.segments


class TestStraightExperiments:
    """One straight walk per initial direction."""

    def test_one_walk_per_direction(self, small_config):
        result = straight_experiments(small_config)
        assert result.kind == "straight"
        assert len(result.combos) == 3
        assert all(c.exponent is None for c in result.combos)
        assert all(len(c.lengths) == 1 for c in result.combos)

    def test_direction_zero_finds_grid_point(self, small_config):
        # heading east from the centre reaches the foodspot at (600, 500)
        result = straight_experiments(small_config)
        east = result.combos[0]
        assert east.init_dir == 0.0
        assert east.found == 1
        assert east.lengths[0] == pytest.approx(99.0)
        assert east.segments == 1

    def test_random_direction(self, small_config):
        cfg = ForageConfig(
            environment=small_config.environment,
            walk=small_config.walk,
            sweep=SweepConfig(exponents=(2.0,), walks_per_combo=1),
            seed=3,
        )
        result = straight_experiments(cfg, look_fn=never_found)
        assert len(result.combos) == 1
        assert result.combos[0].init_dir is None
        assert "munone_dirrand" in result.rng_states


class TestStorage:
    """JSON result files and RNG state snapshots."""

    def test_experiment_id_format(self, small_config):
        eid = generate_experiment_id(small_config, "levy")
        assert eid.startswith(f"levy_{full_config_hash(small_config)[:8]}_")

    def test_save_and_load(self, small_config, tmp_path):
        result = levy_experiments(small_config, look_fn=never_found)
        path = save_experiment_result(result, small_config, tmp_path)
        assert path.name == "result.json"
        assert len(list((path.parent / "rng_states").glob("*.json"))) == 6

        data = json.loads(path.read_text())
        assert data["schema_version"] == "1.0"
        assert data["config"]["seed"] == 7
        assert data["metadata"]["config_hash"] == result.config_hash

        loaded = load_experiment_result(path)
        assert loaded.kind == result.kind
        assert loaded.seed == result.seed
        assert loaded.combos == result.combos
        assert loaded.rng_states == result.rng_states

    def test_saved_state_restores_source(self, small_config, tmp_path):
        result = levy_experiments(small_config, look_fn=never_found)
        path = save_experiment_result(result, small_config, tmp_path)
        key = combo_key(3.0, 0.0)
        source = RandomSource(0)
        source.read_state(path.parent / "rng_states" / f"{key}.json")
        assert source.get_state() == result.rng_states[key]

    def test_unknown_schema_rejected(self, small_config, tmp_path):
        result = straight_experiments(small_config, look_fn=never_found)
        path = save_experiment_result(result, small_config, tmp_path)
        data = json.loads(path.read_text())
        data["schema_version"] = "0.1"
        path.write_text(json.dumps(data))
        with pytest.raises(ValueError, match="schema_version"):
            load_experiment_result(path)

    def test_combo_result_fields(self):
        combo = ComboResult(exponent=2.0, init_dir=None, found=1, segments=4, lengths=(1.0,))
        assert combo.lengths == (1.0,)
