"""Derivative coefficient table shared by every :class:`~polytraj.Polynomial`.

Differentiating ``t**i`` ``n`` times multiplies its coefficient by the
falling factorial ``i! / (i - n)!`` and lowers the power by ``n``.  The
table stores these multipliers for all ``(n, i)`` pairs up to
:data:`K_MAX_N`, so the coefficients of any derivative are one element-wise
product and a shift away.

The table is built once, when this module is imported, and is read-only
afterwards.  It can therefore be read from any thread without locking.
"""

from __future__ import annotations

import numpy as np

#: Maximum number of coefficients (degree + 1) of a supported polynomial.
K_MAX_N = 12


def compute_base_coefficients(n: int) -> np.ndarray:
    """Compute the derivative coefficient table for polynomials with *n* coefficients.

    Row ``k`` holds the multipliers that turn the coefficients of ``p`` into
    the (unshifted) coefficients of its ``k``-th derivative.  Row 0 is all
    ones; entries left of the diagonal are zero.

    Parameters
    ----------
    n : int
        Number of coefficients (maximum degree + 1).  Must be >= 1.

    Returns
    -------
    ndarray of shape (n, n)
        Lower-triangular table with ``table[k, i] = i! / (i - k)!`` for
        ``i >= k``.

    Raises
    ------
    ValueError
        If *n* < 1.

    Examples
    --------
    >>> compute_base_coefficients(4)
    array([[1., 1., 1., 1.],
           [0., 1., 2., 3.],
           [0., 0., 2., 6.],
           [0., 0., 0., 6.]])
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    base = np.zeros((n, n))
    base[0, :] = 1.0

    deg = n - 1
    order = deg
    for row in range(1, n):
        for i in range(deg - order, n):
            base[row, i] = (order - deg + i) * base[row - 1, i]
        order -= 1
    return base


BASE_COEFFICIENTS = compute_base_coefficients(K_MAX_N)
BASE_COEFFICIENTS.flags.writeable = False


def base_coeffs_with_time(n: int, derivative: int, t: float) -> np.ndarray:
    """Return the row vector mapping coefficients to a derivative value at *t*.

    The result ``b`` satisfies ``b @ coefficients == p^(derivative)(t)`` for
    any polynomial ``p`` with *n* coefficients, which makes it the building
    block for linear constraints on trajectory coefficients.

    Parameters
    ----------
    n : int
        Number of polynomial coefficients, ``1 <= n <= K_MAX_N``.
    derivative : int
        Derivative order, ``0 <= derivative < n``.
    t : float
        Evaluation time.

    Returns
    -------
    ndarray of shape (n,)

    Raises
    ------
    ValueError
        If *n* or *derivative* is out of range.
    """
    if n < 1 or n > K_MAX_N:
        raise ValueError(f"n must be in [1, {K_MAX_N}], got {n}")
    if derivative < 0 or derivative >= n:
        raise ValueError(
            f"derivative must be in [0, {n - 1}] for n={n}, got {derivative}"
        )

    coeffs = np.zeros(n)
    powers = float(t) ** np.arange(n - derivative)
    coeffs[derivative:] = BASE_COEFFICIENTS[derivative, derivative:n] * powers
    return coeffs
