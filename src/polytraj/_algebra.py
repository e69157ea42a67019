"""Shared helpers for polynomial arithmetic operators."""

from __future__ import annotations

import numpy as np


def _is_scalar(value) -> bool:
    """Return True if *value* is a real numeric scalar (int, float, or numpy scalar)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def _pad_coefficients(coefficients: np.ndarray, n: int) -> np.ndarray:
    """Zero-pad *coefficients* at the high-order end to length *n*."""
    padded = np.zeros(n)
    padded[: len(coefficients)] = coefficients
    return padded


def convolve(data, kernel) -> np.ndarray:
    """Multiply two polynomials given by their coefficient vectors.

    Parameters
    ----------
    data, kernel : array_like of shape (n,) and (m,)
        Coefficients, lowest order first.

    Returns
    -------
    ndarray of shape (n + m - 1,)
        Coefficients of the product polynomial.

    Raises
    ------
    ValueError
        If either input is empty or not 1-D.
    """
    data = np.asarray(data, dtype=float)
    kernel = np.asarray(kernel, dtype=float)
    for name, arr in (("data", data), ("kernel", kernel)):
        if arr.ndim != 1 or arr.size == 0:
            raise ValueError(
                f"{name} must be a non-empty 1-D coefficient vector, "
                f"got shape {arr.shape}"
            )
    return np.convolve(data, kernel)
