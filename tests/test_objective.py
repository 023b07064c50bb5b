"""Test beam volume objective."""

import numpy as np
import pytest

from cantilever.core.errors import DimensionMismatchError, NumericDomainError
from cantilever.core.objective import beam_volume
from cantilever.core.types import BeamParams


def test_volume_unit_design(ones):
    assert beam_volume(ones) == 500.0


def test_volume_formula():
    x = np.array([3, 60, 3.1, 55, 2.6, 50, 2.2, 45, 1.8, 35], dtype=float)
    expected = 100 * (3 * 60 + 3.1 * 55 + 2.6 * 50 + 2.2 * 45 + 1.8 * 35)
    assert beam_volume(x) == pytest.approx(expected)


def test_volume_scales_with_section_length(ones):
    assert beam_volume(ones, BeamParams(section_length=50.0)) == 250.0


def test_volume_monotonic():
    """Increasing any single width or height strictly increases volume."""
    rng = np.random.default_rng(7)
    x = rng.uniform(1.0, 60.0, size=10)
    v0 = beam_volume(x)
    for i in range(10):
        bumped = x.copy()
        bumped[i] += 0.5
        assert beam_volume(bumped) > v0, f"slot {i} did not increase volume"


def test_volume_wrong_length():
    with pytest.raises(DimensionMismatchError):
        beam_volume(np.ones(9))


def test_volume_non_finite():
    x = np.ones(10)
    x[0] = np.inf
    with pytest.raises(NumericDomainError):
        beam_volume(x)
