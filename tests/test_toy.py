"""Test toy fitness functions."""

import numpy as np
import pytest

from cantilever.toy import parameterized_fitness, vectorized_fitness


def test_parameterized_fitness_value():
    assert parameterized_fitness(np.array([1.0, 2.0]), 100, 1) == pytest.approx(100.0)
    assert parameterized_fitness(np.array([0.0, 0.0]), 100, 1) == pytest.approx(1.0)


def test_parameterized_fitness_minimum():
    p2 = 1.5
    assert parameterized_fitness(np.array([p2, p2**2]), 100, p2) == 0.0


def test_vectorized_matches_scalar():
    rng = np.random.default_rng(0)
    X = rng.uniform(-2, 2, size=(20, 2))
    y = vectorized_fitness(X, 100, 1)

    assert y.shape == (20,)
    np.testing.assert_allclose(y, [parameterized_fitness(x, 100, 1) for x in X])


def test_vectorized_single_row():
    assert vectorized_fitness([1.0, 1.0], 100, 1).shape == (1,)
