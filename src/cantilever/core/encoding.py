"""Discrete variable encoding and decoding.

A slot that must take values from a fixed set S = (v_1, ..., v_k) is
optimized as an integer code c in [1, k]; the engineering value is S[c].
The solver only ever sees codes, the evaluators only ever see values.

Layout (ENCODING_VERSION = "1.0"):
    x[0:10] - (b1, h1, b2, h2, b3, h3, b4, h4, b5, h5)
    discrete variant: x[2], x[4] coded by WIDTH_SET; x[3], x[5] by HEIGHT_SET
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import numpy as np

from .constants import HEIGHT_SET_CM, N_VARS, WIDTH_SET_CM
from .errors import DimensionMismatchError, IndexOutOfRangeError


@dataclass(frozen=True)
class ValueSet:
    """Ordered, immutable set of allowed values for a discrete slot.

    Attributes:
        values: Allowed engineering values, addressed by 1-based codes.
    """

    values: tuple[float, ...]

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if not values:
            raise ValueError("ValueSet must contain at least one value")
        bad = [v for v in values if not (np.isfinite(v) and v > 0)]
        if bad:
            raise ValueError(f"ValueSet values must be finite and positive, got {bad}")
        if len(set(values)) != len(values):
            raise ValueError(f"ValueSet values must be unique, got {values}")
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return len(self.values)

    def decode(self, code: float) -> float:
        """Return the value addressed by a 1-based integer code.

        Float codes with an integral value (3.0) are accepted since solvers
        hand over float vectors. Anything else raises IndexOutOfRangeError.
        """
        try:
            c = float(code)
        except (OverflowError, TypeError):
            raise IndexOutOfRangeError(code, len(self.values)) from None
        if not c.is_integer() or not 1 <= c <= len(self.values):
            raise IndexOutOfRangeError(code, len(self.values))
        return self.values[int(c) - 1]

    def encode(self, value: float) -> int:
        """Return the 1-based code of an exact member value."""
        try:
            return self.values.index(float(value)) + 1
        except ValueError:
            raise ValueError(f"{value!r} is not a member of {self.values}") from None

    @classmethod
    def from_range(cls, start: float, stop: float, step: float) -> ValueSet:
        """Build an inclusive arithmetic set, e.g. from_range(45, 60, 5) -> (45, 50, 55, 60)."""
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        n = int(np.floor((stop - start) / step + 1e-9)) + 1
        return cls(values=tuple(start + i * step for i in range(n)))


@dataclass(frozen=True)
class EncodingMap:
    """Association of design vector positions to the ValueSet decoding them.

    Positions are 0-based. An empty map decodes nothing (identity).
    """

    slots: Mapping[int, ValueSet] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for pos in self.slots:
            if not 0 <= int(pos) < N_VARS:
                raise DimensionMismatchError(
                    f"Slot position {pos} outside design vector [0, {N_VARS - 1}]",
                    {"position": pos},
                )
        object.__setattr__(
            self, "slots", MappingProxyType({int(k): v for k, v in sorted(self.slots.items())})
        )

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[int]:
        return iter(self.slots)

    def items(self) -> Iterable[tuple[int, ValueSet]]:
        return self.slots.items()

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(self.slots)

    @property
    def is_identity(self) -> bool:
        return not self.slots


WIDTH_SET = ValueSet(values=WIDTH_SET_CM)
HEIGHT_SET = ValueSet.from_range(HEIGHT_SET_CM[0], HEIGHT_SET_CM[-1], 5.0)

IDENTITY_MAP = EncodingMap()
DISCRETE_MAP = EncodingMap(slots={2: WIDTH_SET, 3: HEIGHT_SET, 4: WIDTH_SET, 5: HEIGHT_SET})


def as_design_vector(x: np.ndarray) -> np.ndarray:
    """Return x as a 1-D float64 array of length N_VARS.

    Raises:
        DimensionMismatchError: x is not a flat vector of N_VARS slots.
    """
    arr = np.asarray(x, dtype=np.float64)
    if arr.ndim != 1 or arr.shape[0] != N_VARS:
        raise DimensionMismatchError(
            f"Expected {N_VARS} variables, got shape {arr.shape}", {"shape": arr.shape}
        )
    return arr


def map_variables(x: np.ndarray, encoding_map: EncodingMap) -> np.ndarray:
    """Decode coded slots of x into engineering values.

    Args:
        x: Design vector of length N_VARS, coded slots holding integer codes.
        encoding_map: Which slots are coded and their value sets.

    Returns:
        New decoded vector; uncoded slots pass through unchanged.
    """
    decoded = as_design_vector(x).copy()
    for pos, value_set in encoding_map.items():
        decoded[pos] = value_set.decode(decoded[pos])
    return decoded


def unmap_variables(x: np.ndarray, encoding_map: EncodingMap) -> np.ndarray:
    """Inverse of map_variables: replace engineering values by their codes."""
    coded = as_design_vector(x).copy()
    for pos, value_set in encoding_map.items():
        coded[pos] = float(value_set.encode(coded[pos]))
    return coded
