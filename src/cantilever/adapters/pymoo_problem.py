"""PyMoo adapter for mixed integer GA optimization.

This module wraps the DiscreteProblemAdapter entry points for use with
pymoo. The genetic algorithm, its operators and its constraint handling
all stay in pymoo; only problem formulation lives here.
"""

from __future__ import annotations

import logging

import numpy as np
from pymoo.core.problem import Problem
from pymoo.core.repair import Repair

from ..core.constants import N_VARS
from ..core.constraints import get_constraint_names
from ..core.evaluator import DiscreteProblemAdapter
from ..core.objective import DEFAULT_PARAMS
from ..core.types import BeamParams
from ..core.variants import ProblemVariant, get_variant

logger = logging.getLogger(__name__)


class IntegerRepair(Repair):
    """Round and clip the variant's integer positions.

    This is how the integer index set reaches pymoo: every sampled or
    mated individual is snapped back onto the integer lattice in bounds.
    """

    def __init__(self, integer_vars: tuple[int, ...]) -> None:
        super().__init__()
        self.integer_vars = np.array(integer_vars, dtype=int)

    def _do(self, problem, X, **kwargs):
        if self.integer_vars.size == 0:
            return X
        cols = self.integer_vars
        X[:, cols] = np.clip(np.rint(X[:, cols]), problem.xl[cols], problem.xu[cols])
        return X


class CantileverProblem(Problem):
    """PyMoo Problem wrapper for the stepped cantilever.

    Solver candidates live in the variant's coded space; decoding happens
    inside the adapter so pymoo never sees engineering values.
    """

    N_OBJ = 1
    N_CONSTR = len(get_constraint_names())

    def __init__(
        self,
        variant: ProblemVariant,
        params: BeamParams = DEFAULT_PARAMS,
        **kwargs,
    ) -> None:
        """Initialize cantilever problem.

        Args:
            variant: Bounds, integer positions and encoding map.
            params: Beam constants.
            **kwargs: Additional arguments passed to pymoo Problem.
        """
        xl, xu = variant.bounds()

        super().__init__(
            n_var=N_VARS,
            n_obj=self.N_OBJ,
            n_ieq_constr=self.N_CONSTR,
            xl=xl,
            xu=xu,
            **kwargs,
        )

        self.variant = variant
        self.adapter = DiscreteProblemAdapter.for_variant(variant, params)
        self._n_evals = 0

    def _evaluate(
        self,
        X: np.ndarray,
        out: dict,
        *args,
        **kwargs,
    ) -> None:
        """Evaluate population.

        Args:
            X: Decision matrix of shape (pop_size, n_var).
            out: Output dict for F and G.
        """
        n_pop = X.shape[0]
        F = np.zeros((n_pop, self.N_OBJ), dtype=np.float64)
        G = np.zeros((n_pop, self.N_CONSTR), dtype=np.float64)

        for i, x in enumerate(X):
            F[i, 0] = self.adapter.volume(x)
            G[i], _ = self.adapter.constraints(x)
            self._n_evals += 1

        logger.debug("Evaluated %d candidates (%s)", n_pop, self.variant.name)

        out["F"] = F
        out["G"] = G

    @property
    def n_evals(self) -> int:
        """Total number of evaluations performed."""
        return self._n_evals

    def make_repair(self) -> IntegerRepair:
        return IntegerRepair(self.variant.integer_vars)


def create_problem(
    variant: str = "discrete",
    params: BeamParams | None = None,
) -> CantileverProblem:
    """Create CantileverProblem for a built-in variant.

    Args:
        variant: "continuous" or "discrete".
        params: Beam constants (defaults if None).

    Returns:
        Configured CantileverProblem.
    """
    return CantileverProblem(variant=get_variant(variant), params=params or DEFAULT_PARAMS)
