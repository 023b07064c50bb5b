"""Core module: types, encoding, evaluators, utilities."""

from .constraints import beam_constraints, get_constraint_names
from .encoding import (
    DISCRETE_MAP,
    HEIGHT_SET,
    IDENTITY_MAP,
    WIDTH_SET,
    EncodingMap,
    ValueSet,
    map_variables,
    unmap_variables,
)
from .errors import (
    CantileverError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    NumericDomainError,
)
from .evaluator import (
    DiscreteProblemAdapter,
    evaluate_candidate,
    evaluate_candidate_batch,
    with_decoding,
)
from .objective import beam_volume
from .types import BeamDesign, BeamParams, EvalResult, Section
from .variants import CONTINUOUS, DISCRETE, ProblemVariant, get_variant

__all__ = [
    "BeamParams",
    "BeamDesign",
    "Section",
    "EvalResult",
    "ValueSet",
    "EncodingMap",
    "WIDTH_SET",
    "HEIGHT_SET",
    "IDENTITY_MAP",
    "DISCRETE_MAP",
    "map_variables",
    "unmap_variables",
    "beam_volume",
    "beam_constraints",
    "get_constraint_names",
    "with_decoding",
    "DiscreteProblemAdapter",
    "evaluate_candidate",
    "evaluate_candidate_batch",
    "ProblemVariant",
    "CONTINUOUS",
    "DISCRETE",
    "get_variant",
    "CantileverError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "NumericDomainError",
]
