"""Shared fixtures for cantilever tests."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def ones() -> np.ndarray:
    """All-unit design, every section 1 x 1 cm."""
    return np.ones(10)


@pytest.fixture
def coded_discrete() -> np.ndarray:
    """Discrete-variant candidate with codes in slots 2..5."""
    return np.array([3, 50, 2, 3, 2, 3, 3, 55, 3, 55], dtype=np.float64)


@pytest.fixture
def decoded_discrete() -> np.ndarray:
    """Engineering-unit form of coded_discrete (width code 2 -> 2.6, height code 3 -> 55)."""
    return np.array([3, 50, 2.6, 55, 2.6, 55, 3, 55, 3, 55], dtype=np.float64)
