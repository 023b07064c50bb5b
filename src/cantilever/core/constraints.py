"""Stress, deflection and aspect ratio constraints.

Residual order (11 entries, G <= 0 feasible):
    0-4   bending stress, free end section first
    5     end deflection
    6-10  aspect ratio, support section first
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .constants import DEFLECTION_WEIGHTS, N_SECTIONS
from .encoding import as_design_vector
from .errors import NumericDomainError
from .objective import DEFAULT_PARAMS
from .types import BeamParams

STRESS_CONSTRAINTS = [f"stress_section_{i}" for i in range(N_SECTIONS, 0, -1)]
DEFLECTION_CONSTRAINTS = ["deflection_end"]
ASPECT_CONSTRAINTS = [f"aspect_ratio_section_{i}" for i in range(1, N_SECTIONS + 1)]

def get_constraint_names() -> list[str]:
    """Return ordered constraint names."""
    return STRESS_CONSTRAINTS + DEFLECTION_CONSTRAINTS + ASPECT_CONSTRAINTS


def _split_sections(x: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    x = as_design_vector(x)
    b, h = x[0::2], x[1::2]
    if np.any(b == 0) or np.any(h == 0):
        raise NumericDomainError("Zero section width or height", {"x": x.tolist()})
    return b, h


def stress_residuals(x: np.ndarray, params: BeamParams = DEFAULT_PARAMS) -> np.ndarray:
    """Bending stress minus sigma_max per section, free end section first.

    Section i (1 = support) carries moment P * (n - i + 1) * l, so
    sigma_i = 6 * P * (n - i + 1) * l / (b_i * h_i^2).
    """
    b, h = _split_sections(x)
    arms = np.arange(N_SECTIONS, 0, -1, dtype=np.float64) * params.section_length
    stress = 6.0 * params.load * arms / (b * h**2)
    return stress[::-1] - params.sigma_max


def deflection_residual(x: np.ndarray, params: BeamParams = DEFAULT_PARAMS) -> float:
    """End deflection minus delta_max (Castigliano's second theorem)."""
    b, h = _split_sections(x)
    compliance = float(np.sum(np.asarray(DEFLECTION_WEIGHTS) / (b * h**3)))
    scale = params.load * params.section_length**3 / params.youngs_modulus
    return scale * compliance - params.delta_max


def aspect_ratio_residuals(x: np.ndarray, params: BeamParams = DEFAULT_PARAMS) -> np.ndarray:
    """h - a_max * b per section, support section first."""
    x = as_design_vector(x)
    return x[1::2] - params.aspect_max * x[0::2]


def beam_constraints(
    x: np.ndarray, params: BeamParams = DEFAULT_PARAMS
) -> tuple[np.ndarray, np.ndarray]:
    """All nonlinear constraints of the stepped cantilever.

    Args:
        x: Fully decoded design vector.
        params: Beam constants.

    Returns:
        (c, ceq): 11 inequality residuals (c <= 0 feasible) and an empty
        equality array.
    """
    c = np.concatenate(
        [
            stress_residuals(x, params),
            [deflection_residual(x, params)],
            aspect_ratio_residuals(x, params),
        ]
    )
    if not np.all(np.isfinite(c)):
        raise NumericDomainError("Non-finite constraint residual", {"c": c.tolist()})
    return c, np.zeros(0, dtype=np.float64)


@dataclass
class ConstraintRecord:
    name: str
    raw: float

    @property
    def feasible(self) -> bool:
        return self.raw <= 0.0


def constraint_records(c: Sequence[float]) -> list[dict]:
    """Pair residuals with their names for diagnostics."""
    names = get_constraint_names()
    if len(names) != len(c):
        raise ValueError(
            f"Constraint name/value length mismatch: {len(names)} names vs {len(c)} values"
        )
    records = [ConstraintRecord(name=n, raw=float(v)) for n, v in zip(names, c)]
    return [{"name": r.name, "raw": r.raw, "feasible": r.feasible} for r in records]
