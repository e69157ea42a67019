"""Root solvers for real polynomial coefficient vectors.

A root solver is any callable that takes the coefficients of a real
polynomial (lowest order first) and returns all of its complex roots.  It
signals that no roots can be produced by raising :class:`RootFindingError`.
Extremum analysis only relies on this contract, so a deterministic stub can
stand in for the numerical solver.

The default solver, :func:`find_roots`, computes the eigenvalues of the
companion matrix.

References
----------
- Edelman & Murakami (1995), "Polynomial Roots from Companion Matrix
  Eigenvalues", Mathematics of Computation 64(210):763-776.
"""

from __future__ import annotations

from typing import Protocol

import numpy as np

from polytraj.logger import polytraj_logger


class RootFindingError(RuntimeError):
    """A root solver could not produce roots for the given coefficients."""


class RootSolver(Protocol):
    """Callable returning the complex roots of a real coefficient vector."""

    def __call__(self, coefficients: np.ndarray) -> np.ndarray:
        ...


def _trim_high_order_zeros(coefficients: np.ndarray) -> np.ndarray:
    """Drop zero coefficients of the highest powers."""
    nonzero = np.flatnonzero(coefficients)
    if nonzero.size == 0:
        return coefficients[:0]
    return coefficients[: nonzero[-1] + 1]


def find_roots(coefficients) -> np.ndarray:
    """Find all complex roots of a real polynomial.

    Vanishing high-order coefficients are removed first, so a vector with a
    zero leading term is solved as the lower-degree polynomial it really
    is.  A constant or identically zero polynomial has no roots.

    Parameters
    ----------
    coefficients : array_like of shape (n,)
        Polynomial coefficients, lowest order first.

    Returns
    -------
    ndarray of complex
        The roots, in no particular order.  Empty for constant polynomials.

    Raises
    ------
    RootFindingError
        If *coefficients* is empty, not 1-D, or not finite, or if the
        eigenvalue computation fails.
    """
    from scipy.linalg import LinAlgError, companion, eigvals

    coeffs = np.asarray(coefficients, dtype=float)
    if coeffs.ndim != 1:
        raise RootFindingError(
            f"coefficients must be 1-D, got shape {coeffs.shape}"
        )
    if coeffs.size == 0:
        raise RootFindingError("Cannot find roots of an empty coefficient vector")
    if not np.all(np.isfinite(coeffs)):
        raise RootFindingError(f"coefficients must be finite, got {coeffs}")

    trimmed = _trim_high_order_zeros(coeffs)
    if trimmed.size <= 1:
        polytraj_logger.debug(
            "Root solve on a constant polynomial (%d coefficients); no roots.",
            coeffs.size,
        )
        return np.array([], dtype=complex)

    try:
        # companion() expects the highest power first.
        roots = eigvals(companion(trimmed[::-1]))
    except (LinAlgError, ValueError) as exc:
        raise RootFindingError(f"Eigenvalue computation failed: {exc}") from exc

    if not np.all(np.isfinite(roots)):
        raise RootFindingError(f"Root solver produced non-finite roots: {roots}")
    return roots.astype(complex)
