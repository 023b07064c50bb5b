"""Core types for beam parameters, designs and evaluation results.

This module defines the canonical types that form the interface
between the beam model and optimizers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .constants import (
    ASPECT_MAX,
    DELTA_MAX_CM,
    END_LOAD_N,
    N_SECTIONS,
    N_VARS,
    SECTION_LENGTH_CM,
    SIGMA_MAX,
    YOUNGS_MODULUS,
)
from .errors import DimensionMismatchError


@dataclass(frozen=True)
class BeamParams:
    """Fixed physical constants of a stepped cantilever.

    Attributes:
        load: End load P (N).
        section_length: Length l of every section (cm).
        youngs_modulus: E (N/cm^2).
        sigma_max: Maximum allowed bending stress per section (N/cm^2).
        delta_max: Maximum allowed end deflection (cm).
        aspect_max: Maximum allowed height/width ratio per section.
    """

    load: float = END_LOAD_N
    section_length: float = SECTION_LENGTH_CM
    youngs_modulus: float = YOUNGS_MODULUS
    sigma_max: float = SIGMA_MAX
    delta_max: float = DELTA_MAX_CM
    aspect_max: float = ASPECT_MAX
    n_sections: int = N_SECTIONS

    def __post_init__(self) -> None:
        for name in (
            "load",
            "section_length",
            "youngs_modulus",
            "sigma_max",
            "delta_max",
            "aspect_max",
        ):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.n_sections != N_SECTIONS:
            raise ValueError(f"n_sections must be {N_SECTIONS}, got {self.n_sections}")

    @property
    def total_length(self) -> float:
        """Total beam length L = n_sections * l."""
        return self.n_sections * self.section_length


@dataclass(frozen=True)
class Section:
    """One rectangular beam section.

    Attributes:
        width: Section width b (cm).
        height: Section height h (cm).
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def second_moment(self) -> float:
        """Area moment of inertia b*h^3/12."""
        return self.width * self.height**3 / 12.0

    @property
    def aspect_ratio(self) -> float:
        return self.height / self.width


@dataclass(frozen=True)
class BeamDesign:
    """Complete beam design, support section first.

    Layout of the flat design vector:
        x[0:2]  - section 1 (b1, h1), at the support
        x[2:4]  - section 2 (b2, h2)
        ...
        x[8:10] - section 5 (b5, h5), carries the end load
    """

    sections: tuple[Section, ...]

    def to_array(self) -> np.ndarray:
        """Convert to flat array (b1, h1, ..., b5, h5)."""
        return np.array(
            [v for s in self.sections for v in (s.width, s.height)],
            dtype=np.float64,
        )

    @classmethod
    def from_array(cls, arr: np.ndarray) -> BeamDesign:
        """Create from flat array."""
        if len(arr) != N_VARS:
            raise DimensionMismatchError(f"Expected {N_VARS} variables, got {len(arr)}")
        return cls(
            sections=tuple(
                Section(width=float(arr[2 * i]), height=float(arr[2 * i + 1]))
                for i in range(N_SECTIONS)
            )
        )


@dataclass
class EvalResult:
    """Result from candidate evaluation.

    Attributes:
        F: Objective value (volume, minimize). Shape: (1,)
        G: Inequality constraint residuals. Convention: G <= 0 is feasible. Shape: (11,)
        H: Equality constraint residuals. Always empty for this problem.
        diag: Diagnostics dictionary (decoded x, constraint records, timings).
    """

    F: np.ndarray
    G: np.ndarray
    H: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64))
    diag: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Enforce float64
        self.F = np.atleast_1d(np.asarray(self.F, dtype=np.float64))
        self.G = np.asarray(self.G, dtype=np.float64)
        self.H = np.asarray(self.H, dtype=np.float64)

    @property
    def volume(self) -> float:
        return float(self.F[0])

    @property
    def is_feasible(self) -> bool:
        """Check if all constraints are satisfied (G <= 0)."""
        return bool(np.all(self.G <= 0))

    @property
    def max_violation(self) -> float:
        """Return maximum constraint violation (0 if feasible)."""
        return float(np.maximum(self.G, 0).max()) if len(self.G) > 0 else 0.0
