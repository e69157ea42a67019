"""Shared helpers for extremum analysis (critical points, min/max folding).

The extrema of a differentiable function on a closed interval lie either at
a critical point inside the interval or at one of its endpoints.  For the
``d``-th derivative of a polynomial the critical points are the real roots
of the ``(d + 1)``-th derivative, so the candidates are those roots that
fall in the interval plus the two endpoints.

References
----------
- Trefethen (2013), "Approximation Theory and Approximation Practice",
  SIAM, Chapter 18.
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Tuple

import numpy as np

from polytraj.logger import polytraj_logger


class MinMax(NamedTuple):
    """Minimum and maximum of a derivative over an interval."""

    minimum: float
    maximum: float


class _MinMaxAccumulator:
    """Running min/max that stays empty until the first value arrives."""

    def __init__(self):
        self._minimum: float | None = None
        self._maximum: float | None = None

    def add(self, value: float) -> None:
        if self._minimum is None:
            self._minimum = value
            self._maximum = value
            return
        self._minimum = min(self._minimum, value)
        self._maximum = max(self._maximum, value)

    def result(self) -> MinMax:
        if self._minimum is None:
            raise ValueError("No candidate values were accumulated")
        return MinMax(self._minimum, self._maximum)


def _normalize_interval(t_1: float, t_2: float) -> Tuple[float, float]:
    """Return the interval bounds in ascending order."""
    if t_1 > t_2:
        t_1, t_2 = t_2, t_1
    return float(t_1), float(t_2)


def _critical_points(t_1: float, t_2: float, roots, imag_tol: float) -> np.ndarray:
    """Real parts of the real roots lying in ``[t_1, t_2]``.

    A root counts as real when ``|imag| <= imag_tol``; the default tolerance
    of zero accepts exactly real roots only.  *t_1* <= *t_2* is assumed.
    """
    roots = np.asarray(roots, dtype=complex).ravel()
    if roots.size == 0:
        return np.array([], dtype=float)

    is_real = np.abs(roots.imag) <= imag_tol
    in_domain = (roots.real >= t_1) & (roots.real <= t_2)
    keep = is_real & in_domain

    n_discarded = roots.size - int(np.count_nonzero(keep))
    if n_discarded:
        polytraj_logger.debug(
            "Discarded %d of %d roots (%d complex, %d outside [%g, %g]).",
            n_discarded, roots.size,
            roots.size - int(np.count_nonzero(is_real)),
            int(np.count_nonzero(is_real & ~in_domain)),
            t_1, t_2,
        )
    return roots.real[keep]


def select_min_max_candidates_from_roots(t_1: float, t_2: float, roots,
                                         imag_tol: float = 0.0) -> np.ndarray:
    """Select candidate extremum locations from critical-point roots.

    Parameters
    ----------
    t_1, t_2 : float
        Interval bounds, in any order.
    roots : array_like of complex
        Roots of the derivative whose zeros are the critical points.
    imag_tol : float, optional
        Largest imaginary part magnitude for a root to count as real.
        Default is 0.0 (exactly real roots only).

    Returns
    -------
    ndarray
        Sorted candidate times: both endpoints plus every real root
        inside the closed interval.
    """
    t_1, t_2 = _normalize_interval(t_1, t_2)
    critical = _critical_points(t_1, t_2, roots, imag_tol)
    return np.sort(np.concatenate([[t_1], critical, [t_2]]))


def _find_min_max_from_roots(evaluate: Callable[[float, int], float],
                             t_1: float, t_2: float, derivative: int,
                             roots, imag_tol: float = 0.0) -> MinMax:
    """Min and max of the *derivative*-th derivative over ``[t_1, t_2]``.

    Parameters
    ----------
    evaluate : callable
        ``evaluate(t, derivative) -> float`` of the analysed polynomial.
    t_1, t_2 : float
        Interval bounds, in any order.
    derivative : int
        Derivative order to bound.
    roots : array_like of complex
        Roots of the ``(derivative + 1)``-th derivative.
    imag_tol : float, optional
        See :func:`select_min_max_candidates_from_roots`.

    Returns
    -------
    MinMax
    """
    t_1, t_2 = _normalize_interval(t_1, t_2)
    acc = _MinMaxAccumulator()

    for t in _critical_points(t_1, t_2, roots, imag_tol):
        acc.add(evaluate(float(t), derivative))

    # Endpoints are always candidates.
    acc.add(evaluate(t_1, derivative))
    acc.add(evaluate(t_2, derivative))
    return acc.result()


def _select_from_candidates(evaluate: Callable[[float, int], float],
                            candidates, derivative: int) -> tuple:
    """Evaluate *candidates* and return ``((t_min, v_min), (t_max, v_max))``.

    Raises
    ------
    ValueError
        If *candidates* is empty.
    """
    candidates = np.asarray(candidates, dtype=float).ravel()
    if candidates.size == 0:
        raise ValueError("Cannot find extrema from an empty candidate list")

    vals = np.array([evaluate(float(t), derivative) for t in candidates])
    i_min = int(np.argmin(vals))
    i_max = int(np.argmax(vals))
    return (
        (float(candidates[i_min]), float(vals[i_min])),
        (float(candidates[i_max]), float(vals[i_max])),
    )
