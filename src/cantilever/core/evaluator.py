"""Candidate evaluation: the interface between the beam model and solvers.

Interface:
    evaluate_candidate(x, variant, params) -> EvalResult(F, G, H, diag)

Flow:
    1. map_variables(x, variant.encoding_map) -> decoded x
    2. beam_volume(decoded) -> F
    3. beam_constraints(decoded) -> G, H
    4. Return EvalResult with diagnostics

Every function here is pure: no caching, no module state, safe to call
from any number of threads or processes at once.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import partial, wraps
from typing import TypeVar

import numpy as np

from .constraints import beam_constraints, constraint_records, get_constraint_names
from .encoding import EncodingMap, map_variables
from .objective import DEFAULT_PARAMS, beam_volume
from .types import BeamDesign, BeamParams, EvalResult
from .variants import CONTINUOUS, ProblemVariant

T = TypeVar("T")


def with_decoding(
    fn: Callable[[np.ndarray], T], encoding_map: EncodingMap
) -> Callable[[np.ndarray], T]:
    """Wrap fn so it receives x already passed through map_variables."""

    @wraps(fn)
    def decoded_fn(x: np.ndarray) -> T:
        return fn(map_variables(x, encoding_map))

    return decoded_fn


@dataclass(frozen=True)
class DiscreteProblemAdapter:
    """Objective and constraint entry points operating on coded vectors.

    Both entry points keep the signatures of the undecoded evaluators
    (vector in, scalar or (c, ceq) out), so the solver cannot tell
    whether decoding happens.
    """

    encoding_map: EncodingMap
    params: BeamParams = DEFAULT_PARAMS
    volume: Callable[[np.ndarray], float] = field(init=False, repr=False, compare=False)
    constraints: Callable[[np.ndarray], tuple[np.ndarray, np.ndarray]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "volume", with_decoding(partial(beam_volume, params=self.params), self.encoding_map)
        )
        object.__setattr__(
            self,
            "constraints",
            with_decoding(partial(beam_constraints, params=self.params), self.encoding_map),
        )

    @classmethod
    def for_variant(
        cls, variant: ProblemVariant, params: BeamParams = DEFAULT_PARAMS
    ) -> DiscreteProblemAdapter:
        return cls(encoding_map=variant.encoding_map, params=params)

    def decode(self, x: np.ndarray) -> np.ndarray:
        """Reverse the transform on a solver result (codes -> engineering units)."""
        return map_variables(x, self.encoding_map)


def evaluate_candidate(
    x: np.ndarray,
    variant: ProblemVariant = CONTINUOUS,
    params: BeamParams = DEFAULT_PARAMS,
) -> EvalResult:
    """Evaluate candidate solution.

    Args:
        x: Design vector in the variant's coded space (length N_VARS).
        variant: Problem variant whose encoding map decodes x.
        params: Beam constants.

    Returns:
        EvalResult with:
            F: [volume]
            G: 11 inequality residuals (G <= 0 feasible)
            H: empty
            diag: decoded x, sections, per-constraint records and timings
    """
    t0 = time.perf_counter()

    decoded = map_variables(x, variant.encoding_map)
    volume = beam_volume(decoded, params)
    c, ceq = beam_constraints(decoded, params)

    diag = {
        "variant": variant.name,
        "x_decoded": decoded.tolist(),
        "sections": [
            {"width": s.width, "height": s.height, "aspect_ratio": s.aspect_ratio}
            for s in BeamDesign.from_array(decoded).sections
        ],
        "constraints": constraint_records(c),
        "timings": {"total_ms": (time.perf_counter() - t0) * 1000},
    }
    return EvalResult(F=np.array([volume]), G=c, H=ceq, diag=diag)


def evaluate_candidate_batch(
    X: np.ndarray | Sequence[np.ndarray],
    variant: ProblemVariant = CONTINUOUS,
    params: BeamParams = DEFAULT_PARAMS,
) -> tuple[np.ndarray, np.ndarray, list[dict]]:
    """Evaluate a batch of candidates.

    Args:
        X: Array-like of shape (n, N_VARS) or iterable of 1-D arrays.
        variant: Shared problem variant.
        params: Shared beam constants.

    Returns:
        F_all: (n, 1) objective array
        G_all: (n, n_constr) constraint array
        diags: list of diagnostics dicts
    """
    X_arr = np.atleast_2d(np.asarray(list(X)) if not isinstance(X, np.ndarray) else X)
    if X_arr.shape[0] == 0:
        return np.zeros((0, 1)), np.zeros((0, len(get_constraint_names()))), []
    results = [evaluate_candidate(x, variant, params) for x in X_arr]
    F_all = np.stack([r.F for r in results], axis=0)
    G_all = np.stack([r.G for r in results], axis=0)
    diags = [r.diag for r in results]
    return F_all, G_all, diags
