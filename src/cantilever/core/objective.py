"""Beam volume objective."""

from __future__ import annotations

import numpy as np

from .encoding import as_design_vector
from .errors import NumericDomainError
from .types import BeamParams

DEFAULT_PARAMS = BeamParams()


def beam_volume(x: np.ndarray, params: BeamParams = DEFAULT_PARAMS) -> float:
    """Volume of a stepped cantilever.

    V = l * (b1*h1 + b2*h2 + b3*h3 + b4*h4 + b5*h5)

    Args:
        x: Fully decoded design vector (b1, h1, ..., b5, h5).
        params: Beam constants; only the section length is used.

    Returns:
        Volume in cm^3.
    """
    x = as_design_vector(x)
    volume = params.section_length * float(np.dot(x[0::2], x[1::2]))
    if not np.isfinite(volume):
        raise NumericDomainError(f"Non-finite volume {volume}", {"x": x.tolist()})
    return volume
