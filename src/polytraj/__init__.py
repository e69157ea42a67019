"""polytraj: Exact extremum analysis for polynomial trajectory segments.

Provides the :class:`Polynomial` class for single-variable polynomial
segments in time, with derivative coefficients taken from a shared
precomputed table (:func:`compute_base_coefficients`), and exact
minimum/maximum bounds of any derivative over a time interval via the real
roots of the next-higher derivative (:meth:`Polynomial.find_min_max`).
Root finding is pluggable: pass any :class:`RootSolver` callable, or use
the default companion-matrix solver :func:`find_roots`.

Example
-------
>>> from polytraj import Polynomial
>>> p = Polynomial([0.0, 0.0, 0.0, 1.0])   # p(t) = t^3
>>> p.find_min_max(-1.0, 1.0, derivative=1)
MinMax(minimum=0.0, maximum=3.0)
"""

from polytraj._algebra import convolve
from polytraj._calculus import MinMax, select_min_max_candidates_from_roots
from polytraj._coefficients import (
    BASE_COEFFICIENTS,
    K_MAX_N,
    base_coeffs_with_time,
    compute_base_coefficients,
)
from polytraj._version import __version__
from polytraj.polynomial import Polynomial
from polytraj.roots import RootFindingError, RootSolver, find_roots

__all__ = [
    "BASE_COEFFICIENTS",
    "K_MAX_N",
    "MinMax",
    "Polynomial",
    "RootFindingError",
    "RootSolver",
    "__version__",
    "base_coeffs_with_time",
    "compute_base_coefficients",
    "convolve",
    "find_roots",
    "select_min_max_candidates_from_roots",
]
