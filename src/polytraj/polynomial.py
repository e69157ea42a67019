"""Single-variable polynomial segment with exact extremum analysis.

This module implements the polynomial used for one segment of a
piecewise-polynomial trajectory.  Coefficients are stored lowest order
first; derivatives are obtained from a precomputed table of falling
factorial multipliers shared by all instances, so differentiating is an
element-wise product and a shift.

Bounding a derivative (velocity, acceleration, jerk, ...) over a time
interval evaluates it at every real root of the next-higher derivative
inside the interval and at both endpoints.

References
----------
- Richter, Bry & Roy (2016), "Polynomial Trajectory Planning for Aggressive
  Quadrotor Flight in Dense Indoor Environments", Robotics Research,
  Springer Tracts in Advanced Robotics 114:649-666.
"""

from __future__ import annotations

import warnings
from typing import Tuple

import numpy as np

from polytraj._calculus import (
    MinMax,
    _find_min_max_from_roots,
    _select_from_candidates,
    select_min_max_candidates_from_roots,
)
from polytraj._coefficients import BASE_COEFFICIENTS, K_MAX_N
from polytraj._jit import horner_derivative_jit
from polytraj.roots import RootSolver, find_roots


class Polynomial:
    """Real polynomial in time with a fixed number of coefficients.

    Instances are immutable: the coefficient array is read-only and all
    arithmetic returns new polynomials.

    Parameters
    ----------
    coefficients : array_like of shape (N,)
        Coefficients ``[c_0, c_1, ..., c_{N-1}]`` of
        ``p(t) = c_0 + c_1 t + ... + c_{N-1} t^{N-1}``.
        ``1 <= N <= K_MAX_N``.

    Examples
    --------
    >>> p = Polynomial([0.0, 0.0, 0.0, 1.0])   # t^3
    >>> p.evaluate(2.0, 1)
    12.0
    >>> p.find_min_max(-1.0, 1.0, 1)
    MinMax(minimum=0.0, maximum=3.0)
    """

    def __init__(self, coefficients):
        coeffs = np.array(coefficients, dtype=float)
        if coeffs.ndim != 1:
            raise ValueError(
                f"coefficients must be 1-D, got shape {coeffs.shape}"
            )
        if coeffs.size < 1 or coeffs.size > K_MAX_N:
            raise ValueError(
                f"Number of coefficients must be in [1, {K_MAX_N}], "
                f"got {coeffs.size}"
            )
        if not np.all(np.isfinite(coeffs)):
            raise ValueError(f"coefficients must be finite, got {coeffs}")
        coeffs.flags.writeable = False
        self._coefficients = coeffs

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def N(self) -> int:
        """Number of coefficients (degree + 1)."""
        return self._coefficients.size

    @property
    def degree(self) -> int:
        return self._coefficients.size - 1

    @property
    def coefficients(self) -> np.ndarray:
        """Read-only view of the coefficients, lowest order first."""
        return self._coefficients

    @staticmethod
    def _check_derivative(derivative: int) -> None:
        if not isinstance(derivative, (int, np.integer)) or isinstance(derivative, bool):
            raise TypeError(
                f"derivative must be int, got {type(derivative).__name__}"
            )
        if derivative < 0:
            raise ValueError(f"derivative must be >= 0, got {derivative}")

    # ------------------------------------------------------------------
    # Coefficients and evaluation
    # ------------------------------------------------------------------

    def get_coefficients(self, derivative: int = 0) -> np.ndarray:
        """Return the coefficients of the *derivative*-th derivative.

        Parameters
        ----------
        derivative : int, optional
            Derivative order (0 = the polynomial itself).  Default is 0.

        Returns
        -------
        ndarray of shape (N,)
            Coefficients, lowest order first.  The top *derivative*
            entries are zero; all entries are zero if *derivative* >= N.

        Raises
        ------
        ValueError
            If *derivative* is negative.
        """
        self._check_derivative(derivative)
        n = self.N
        if derivative == 0:
            return self._coefficients.copy()

        result = np.zeros(n)
        if derivative >= n:
            return result
        result[: n - derivative] = (
            self._coefficients[derivative:] * BASE_COEFFICIENTS[derivative, derivative:n]
        )
        return result

    def evaluate(self, t: float, derivative: int = 0) -> float:
        """Evaluate the *derivative*-th derivative at time *t*.

        Parameters
        ----------
        t : float
            Evaluation time.
        derivative : int, optional
            Derivative order.  Default is 0.

        Returns
        -------
        float
            Derivative value; 0.0 if *derivative* >= N.
        """
        self._check_derivative(derivative)
        if derivative >= self.N:
            return 0.0
        return float(horner_derivative_jit(
            float(t), self._coefficients, BASE_COEFFICIENTS[derivative], derivative
        ))

    def evaluate_derivatives(self, t: float, n_derivatives: int) -> np.ndarray:
        """Evaluate derivatives ``0 .. n_derivatives - 1`` at time *t*.

        Parameters
        ----------
        t : float
            Evaluation time.
        n_derivatives : int
            Number of derivative orders to evaluate.

        Returns
        -------
        ndarray of shape (n_derivatives,)
        """
        if n_derivatives < 0:
            raise ValueError(f"n_derivatives must be >= 0, got {n_derivatives}")
        return np.array([self.evaluate(t, d) for d in range(n_derivatives)], dtype=float)

    def evaluate_batch(self, ts, derivative: int = 0) -> np.ndarray:
        """Evaluate the *derivative*-th derivative at many times at once.

        Parameters
        ----------
        ts : array_like
            Evaluation times (any shape).
        derivative : int, optional
            Derivative order.  Default is 0.

        Returns
        -------
        ndarray
            Values with the same shape as *ts*.
        """
        from numpy.polynomial import polynomial as P

        return P.polyval(np.asarray(ts, dtype=float), self.get_coefficients(derivative))

    def derivative(self, order: int = 1) -> "Polynomial":
        """Return the *order*-th derivative as a polynomial with the same N."""
        return Polynomial(self.get_coefficients(order))

    # ------------------------------------------------------------------
    # Roots and extrema
    # ------------------------------------------------------------------

    def get_roots(self, derivative: int = 0, solver: RootSolver | None = None) -> np.ndarray:
        """Find all complex roots of the *derivative*-th derivative.

        Parameters
        ----------
        derivative : int, optional
            Derivative order.  Default is 0.
        solver : callable, optional
            Root solver; defaults to :func:`~polytraj.find_roots`.

        Returns
        -------
        ndarray of complex

        Raises
        ------
        RootFindingError
            If the solver cannot produce roots.
        """
        if solver is None:
            solver = find_roots
        return np.asarray(solver(self.get_coefficients(derivative)), dtype=complex)

    def find_min_max(self, t_1: float, t_2: float, derivative: int,
                     roots=None, solver: RootSolver | None = None,
                     imag_tol: float = 0.0) -> MinMax:
        """Find the minimum and maximum of a derivative over ``[t_1, t_2]``.

        Candidates are the real roots of the ``(derivative + 1)``-th
        derivative inside the interval and both endpoints.  The roots are
        computed with *solver* unless they are passed in via *roots*.

        Parameters
        ----------
        t_1, t_2 : float
            Interval bounds, in any order.
        derivative : int
            Derivative order to bound (0 = position, 1 = velocity, ...).
        roots : array_like of complex, optional
            Precomputed roots of the ``(derivative + 1)``-th derivative.
            When given, no root solve is performed.
        solver : callable, optional
            Root solver used when *roots* is None; defaults to
            :func:`~polytraj.find_roots`.
        imag_tol : float, optional
            Largest imaginary part magnitude for a root to count as real.
            Default is 0.0.

        Returns
        -------
        MinMax
            ``(minimum, maximum)`` with ``minimum <= maximum``.

        Raises
        ------
        RootFindingError
            If the solver cannot produce roots.  No partial result is
            returned.
        ValueError
            If both *roots* and *solver* are given, or *derivative* < 0.
        """
        self._check_derivative(derivative)
        if roots is None:
            roots = self.get_roots(derivative + 1, solver=solver)
        elif solver is not None:
            raise ValueError("Pass either roots or solver, not both")
        return _find_min_max_from_roots(
            self.evaluate, t_1, t_2, derivative, roots, imag_tol=imag_tol
        )

    def compute_min_max_candidates(self, t_1: float, t_2: float, derivative: int,
                                   solver: RootSolver | None = None,
                                   imag_tol: float = 0.0) -> np.ndarray:
        """Return the sorted times at which a derivative can attain an extremum.

        These are both endpoints of ``[t_1, t_2]`` and the real roots of
        the ``(derivative + 1)``-th derivative between them.

        Raises
        ------
        RootFindingError
            If the solver cannot produce roots.
        """
        self._check_derivative(derivative)
        roots = self.get_roots(derivative + 1, solver=solver)
        return select_min_max_candidates_from_roots(t_1, t_2, roots, imag_tol=imag_tol)

    def select_min_max_from_candidates(self, candidates, derivative: int = 0) -> tuple:
        """Evaluate a derivative at *candidates* and pick the extremes.

        Parameters
        ----------
        candidates : array_like of float
            Candidate times, e.g. from :meth:`compute_min_max_candidates`.
        derivative : int, optional
            Derivative order.  Default is 0.

        Returns
        -------
        ((t_min, v_min), (t_max, v_max)) : tuple of (float, float)

        Raises
        ------
        ValueError
            If *candidates* is empty.
        """
        self._check_derivative(derivative)
        return _select_from_candidates(self.evaluate, candidates, derivative)

    def minimize(self, t_1: float, t_2: float, derivative: int = 0,
                 solver: RootSolver | None = None) -> Tuple[float, float]:
        """Find the minimum of a derivative over ``[t_1, t_2]``.

        Returns
        -------
        (value, location) : (float, float)
        """
        candidates = self.compute_min_max_candidates(t_1, t_2, derivative, solver=solver)
        (t_min, v_min), _ = self.select_min_max_from_candidates(candidates, derivative)
        return v_min, t_min

    def maximize(self, t_1: float, t_2: float, derivative: int = 0,
                 solver: RootSolver | None = None) -> Tuple[float, float]:
        """Find the maximum of a derivative over ``[t_1, t_2]``.

        Returns
        -------
        (value, location) : (float, float)
        """
        candidates = self.compute_min_max_candidates(t_1, t_2, derivative, solver=solver)
        _, (t_max, v_max) = self.select_min_max_from_candidates(candidates, derivative)
        return v_max, t_max

    # ------------------------------------------------------------------
    # Coefficient manipulation
    # ------------------------------------------------------------------

    def with_appended_coefficients(self, new_n: int) -> "Polynomial":
        """Return the same polynomial stored with *new_n* coefficients.

        Raises
        ------
        ValueError
            If *new_n* is smaller than N or larger than ``K_MAX_N``.
        """
        from polytraj._algebra import _pad_coefficients

        if new_n < self.N:
            raise ValueError(
                f"new_n ({new_n}) must be >= the current N ({self.N})"
            )
        if new_n > K_MAX_N:
            raise ValueError(f"new_n must be <= {K_MAX_N}, got {new_n}")
        return Polynomial(_pad_coefficients(self._coefficients, new_n))

    def scale_in_time(self, factor: float) -> "Polynomial":
        """Return ``q`` with ``q(t) = p(factor * t)``.

        Used to re-time a segment: stretching its duration by ``k`` is
        ``scale_in_time(1 / k)``.
        """
        powers = float(factor) ** np.arange(self.N)
        return Polynomial(self._coefficients * powers)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def __getstate__(self) -> dict:
        from polytraj._version import __version__

        state = self.__dict__.copy()
        state["_polytraj_version"] = __version__
        return state

    def __setstate__(self, state: dict) -> None:
        """Restore state and re-freeze the coefficient array."""
        from polytraj._version import __version__

        saved_version = state.pop("_polytraj_version", None)
        if saved_version is not None and saved_version != __version__:
            warnings.warn(
                f"This object was saved with polytraj {saved_version}, "
                f"but you are loading it with {__version__}.",
                UserWarning,
                stacklevel=2,
            )

        self.__dict__.update(state)
        coeffs = np.array(self._coefficients, dtype=float)
        coeffs.flags.writeable = False
        self._coefficients = coeffs

    # ------------------------------------------------------------------
    # Arithmetic operators
    # ------------------------------------------------------------------

    def _padded_pair(self, other: "Polynomial") -> Tuple[np.ndarray, np.ndarray]:
        from polytraj._algebra import _pad_coefficients

        n = max(self.N, other.N)
        return (
            _pad_coefficients(self._coefficients, n),
            _pad_coefficients(other._coefficients, n),
        )

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        a, b = self._padded_pair(other)
        return Polynomial(a + b)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        a, b = self._padded_pair(other)
        return Polynomial(a - b)

    def __mul__(self, other):
        from polytraj._algebra import _is_scalar, convolve

        if _is_scalar(other):
            return Polynomial(self._coefficients * float(other))
        if not isinstance(other, Polynomial):
            return NotImplemented
        n = self.N + other.N - 1
        if n > K_MAX_N:
            raise ValueError(
                f"Product needs {n} coefficients, more than K_MAX_N={K_MAX_N}. "
                f"Use polytraj.convolve() for the raw coefficient vector."
            )
        return Polynomial(convolve(self._coefficients, other._coefficients))

    def __rmul__(self, scalar):
        from polytraj._algebra import _is_scalar

        if not _is_scalar(scalar):
            return NotImplemented
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        from polytraj._algebra import _is_scalar

        if not _is_scalar(scalar):
            return NotImplemented
        return self.__mul__(1.0 / float(scalar))

    def __neg__(self):
        return self.__mul__(-1.0)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        a, b = self._padded_pair(other)
        return bool(np.array_equal(a, b))

    __hash__ = None

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Polynomial({self._coefficients.tolist()})"

    def __str__(self) -> str:
        terms = []
        for i, c in enumerate(self._coefficients):
            if c == 0.0:
                continue
            if i == 0:
                terms.append(f"{c:g}")
            elif i == 1:
                terms.append(f"{c:g}*t")
            else:
                terms.append(f"{c:g}*t^{i}")
        body = " + ".join(terms) if terms else "0"
        return f"Polynomial (degree {self.degree}): {body}"
