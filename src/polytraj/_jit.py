"""Numba JIT-compiled kernels for polynomial evaluation."""

import numpy as np
from numba import njit


@njit(cache=True)
def horner_derivative_jit(t: float, coefficients: np.ndarray, base_row: np.ndarray,
                          derivative: int) -> float:
    """JIT-compiled Horner evaluation of a polynomial derivative.

    Parameters
    ----------
    t : float
        Evaluation point.
    coefficients : ndarray
        Polynomial coefficients, lowest order first.
    base_row : ndarray
        Row *derivative* of the derivative coefficient table.  Must be at
        least as long as *coefficients*.
    derivative : int
        Derivative order, smaller than ``len(coefficients)``.

    Returns
    -------
    float
        Value of the *derivative*-th derivative at *t*.
    """
    result = 0.0
    for i in range(len(coefficients) - 1, derivative - 1, -1):
        result = result * t + coefficients[i] * base_row[i]
    return result
