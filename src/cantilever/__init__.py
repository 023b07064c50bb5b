"""Stepped cantilever beam design for genetic-algorithm solvers.

Objective, constraints and discrete-variable decoding for the mixed
integer cantilever problem; pymoo supplies the genetic algorithm.
"""

__version__ = "0.1.0"
