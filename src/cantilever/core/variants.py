"""Problem variants: bounds, integer positions and encoding maps.

continuous: x[0], x[1] integer (machined to the nearest cm), rest real.
discrete:   additionally x[2..5] drawn from standard width/height sets,
            optimized as integer codes in [1, 4].
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .constants import N_VARS
from .encoding import (
    HEIGHT_SET,
    IDENTITY_MAP,
    WIDTH_SET,
    EncodingMap,
    ValueSet,
    as_design_vector,
)
from .errors import DimensionMismatchError


@dataclass(frozen=True)
class ProblemVariant:
    """Solver-facing description of one formulation of the beam problem.

    Attributes:
        name: Variant identifier.
        xl: Lower bounds (coded space).
        xu: Upper bounds (coded space).
        integer_vars: 0-based positions the solver must keep integral.
        encoding_map: Coded positions and their value sets.
    """

    name: str
    xl: tuple[float, ...]
    xu: tuple[float, ...]
    integer_vars: tuple[int, ...] = ()
    encoding_map: EncodingMap = field(default_factory=EncodingMap)

    def __post_init__(self) -> None:
        if len(self.xl) != N_VARS or len(self.xu) != N_VARS:
            raise DimensionMismatchError(
                f"Bounds must have {N_VARS} entries, got {len(self.xl)} and {len(self.xu)}"
            )
        if any(lo > hi for lo, hi in zip(self.xl, self.xu)):
            raise ValueError(f"Lower bounds exceed upper bounds in variant {self.name!r}")
        for pos in self.integer_vars:
            if not 0 <= pos < N_VARS:
                raise DimensionMismatchError(f"Integer position {pos} outside [0, {N_VARS - 1}]")
        for pos, value_set in self.encoding_map.items():
            if pos not in self.integer_vars:
                raise ValueError(f"Coded position {pos} must be an integer variable")
            if self.xl[pos] != 1 or self.xu[pos] != len(value_set):
                raise ValueError(
                    f"Coded position {pos} must be bounded by [1, {len(value_set)}], "
                    f"got [{self.xl[pos]}, {self.xu[pos]}]"
                )

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (xl, xu) as float arrays."""
        return np.array(self.xl, dtype=np.float64), np.array(self.xu, dtype=np.float64)

    @property
    def integer_mask(self) -> np.ndarray:
        mask = np.zeros(N_VARS, dtype=bool)
        mask[list(self.integer_vars)] = True
        return mask


CONTINUOUS = ProblemVariant(
    name="continuous",
    xl=(1, 30, 2.4, 45, 2.4, 45, 1, 30, 1, 30),
    xu=(5, 65, 3.1, 60, 3.1, 60, 5, 65, 5, 65),
    integer_vars=(0, 1),
    encoding_map=IDENTITY_MAP,
)


def discrete_variant(
    width_set: ValueSet = WIDTH_SET, height_set: ValueSet = HEIGHT_SET
) -> ProblemVariant:
    """Variant with sections 2 and 3 drawn from standard sizes.

    Code bounds follow the set sizes, so a 4-member set is searched over [1, 4].
    """
    kw, kh = len(width_set), len(height_set)
    return ProblemVariant(
        name="discrete",
        xl=(1, 30, 1, 1, 1, 1, 1, 30, 1, 30),
        xu=(5, 65, kw, kh, kw, kh, 5, 65, 5, 65),
        integer_vars=(0, 1, 2, 3, 4, 5),
        encoding_map=EncodingMap(slots={2: width_set, 3: height_set, 4: width_set, 5: height_set}),
    )


DISCRETE = discrete_variant()

VARIANTS: dict[str, ProblemVariant] = {v.name: v for v in (CONTINUOUS, DISCRETE)}


def get_variant(name: str) -> ProblemVariant:
    """Look up a built-in variant by name."""
    try:
        return VARIANTS[name]
    except KeyError:
        raise ValueError(f"Unknown variant {name!r}, expected one of {sorted(VARIANTS)}") from None


def check_bounds(x: np.ndarray, variant: ProblemVariant) -> dict[str, list[int]]:
    """Report positions of x that violate the variant's solver-side domain.

    Returns:
        {"below": [...], "above": [...], "non_integer": [...]} of 0-based positions.
        All lists empty means x is a valid solver candidate.
    """
    x = as_design_vector(x)
    xl, xu = variant.bounds()
    ints = np.array(variant.integer_vars, dtype=int)
    non_integer = [int(i) for i in ints if not float(x[i]).is_integer()]
    return {
        "below": np.flatnonzero(x < xl).tolist(),
        "above": np.flatnonzero(x > xu).tolist(),
        "non_integer": non_integer,
    }


def mid_bounds_candidate(variant: ProblemVariant) -> np.ndarray:
    """Midpoint of bounds, rounded at integer positions."""
    xl, xu = variant.bounds()
    x = (xl + xu) / 2
    x[variant.integer_mask] = np.round(x[variant.integer_mask])
    return x


def random_candidate(
    variant: ProblemVariant, rng: np.random.Generator | None = None
) -> np.ndarray:
    """Generate a random solver candidate within bounds.

    Args:
        variant: Variant supplying bounds and integer positions.
        rng: Random number generator (uses default if None).
    """
    if rng is None:
        rng = np.random.default_rng()

    xl, xu = variant.bounds()
    x = rng.uniform(xl, xu)
    mask = variant.integer_mask
    x[mask] = rng.integers(xl[mask].astype(int), xu[mask].astype(int), endpoint=True)
    return x
