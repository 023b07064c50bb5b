"""Test YAML configuration loading and merging."""

import pytest
from pydantic import ValidationError

from cantilever.core.config import (
    CantileverConfig,
    default_config,
    load_config,
    merge_config,
    save_config,
)
from cantilever.core.types import BeamParams
from cantilever.core.variants import CONTINUOUS


def test_defaults_match_problem_constants():
    config = default_config()
    assert config.beam.to_params() == BeamParams()
    assert config.ga.pop_size == 150
    assert config.ga.n_gen == 200
    assert config.ga.elite_count == 10
    assert config.ga.ftol == 1e-8
    assert config.ga.seed == 0
    assert config.variant == "discrete"


def test_save_load_roundtrip(tmp_path):
    config = merge_config(default_config(), {"beam": {"load_n": 40000.0}, "ga": {"seed": 5}})
    path = tmp_path / "nested" / "beam.yaml"
    save_config(config, path)

    loaded = load_config(path)
    assert loaded == config
    assert loaded.beam.to_params().load == 40000.0


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == CantileverConfig()


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_merge_keeps_untouched_fields():
    merged = merge_config(default_config(), {"ga": {"pop_size": 40}})
    assert merged.ga.pop_size == 40
    assert merged.ga.n_gen == 200
    assert merged.beam.sigma_max == 14000.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"beam": {"sigma_max": 0}},
        {"ga": {"pop_size": 10, "elite_count": 10}},
        {"variant": "binary"},
        {"discrete": {"width_set": []}},
        {"discrete": {"width_set": [-2.4, 2.6]}},
        {"discrete": {"width_set": [0.0, 2.6]}},
        {"discrete": {"height_set": [45.0, float("inf")]}},
        {"discrete": {"height_set": [45.0, float("nan")]}},
        {"discrete": {"height_set": [45.0, 50.0, 45.0]}},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValidationError):
        merge_config(default_config(), overrides)


def test_to_variant():
    assert merge_config(default_config(), {"variant": "continuous"}).to_variant() is CONTINUOUS

    custom = merge_config(default_config(), {"discrete": {"height_set": [40, 45, 50]}})
    variant = custom.to_variant()
    assert variant.name == "discrete"
    assert variant.xu[3] == 3
    assert variant.encoding_map.slots[3].values == (40.0, 45.0, 50.0)
