"""Toy fitness functions for quick GA demonstrations.

Both compute p1 * (x1^2 - x2)^2 + (p2 - x1)^2, a Rosenbrock-style
valley with its minimum at x1 = p2, x2 = p2^2.
"""

from __future__ import annotations

import numpy as np


def parameterized_fitness(x: np.ndarray, p1: float, p2: float) -> float:
    """Fitness of a single 2-vector with extra parameters bound by the caller."""
    return float(p1 * (x[0] ** 2 - x[1]) ** 2 + (p2 - x[0]) ** 2)


def vectorized_fitness(X: np.ndarray, p1: float, p2: float) -> np.ndarray:
    """Row-wise fitness of an (n, 2) population, returns shape (n,)."""
    X = np.atleast_2d(np.asarray(X, dtype=np.float64))
    return p1 * (X[:, 0] ** 2 - X[:, 1]) ** 2 + (p2 - X[:, 0]) ** 2
