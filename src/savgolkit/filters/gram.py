"""Savitzky-Golay convolution weights from Gram polynomials.

The weights are the least-squares polynomial-fit coefficients expressed in
terms of discrete orthogonal (Gram) polynomials, which avoids solving a
linear system for every window and every evaluation offset. The method was
published by Gorry in:
Peter A. Gorry, *General Least-Squares Smoothing and Differentiation by the
Convolution (Savitzky-Golay) Method*, Analytical Chemistry, vol. 62, No. 6,
pp. 570–573, 1990

Examples:
=========

The classic 5-point quadratic/cubic smoothing coefficients sit in the
central row of the table::
>>> import numpy as np
>>> from savgolkit.filters.gram import compute_weights
>>> weights = compute_weights(5, 3, 0)
>>> weights.shape
(5, 5)
>>> bool(np.allclose(weights[2] * 35, [-3, 12, 17, 12, -3]))
True
"""

from __future__ import annotations

import math
from functools import lru_cache

import numpy as np

from savgolkit.logger import savgolkit_logger
from savgolkit.utils.types import WeightTable

__all__ = [
    "gram_polynomial",
    "product_of_range",
    "poly_weight",
    "compute_weights",
]


@lru_cache(maxsize=4096)
def gram_polynomial(i: int, m: int, k: int, s: int) -> float:
    """Evaluates the ``s``-th derivative of the Gram polynomial of order ``k``.

    The polynomials are orthogonal over the ``2m + 1`` integer points
    ``-m, ..., m`` and follow the three-term recurrence

    .. math::

        G_k^{(s)}(i) = \\frac{4k-2}{k(2m-k+1)}
            \\left(i\\,G_{k-1}^{(s)}(i) + s\\,G_{k-1}^{(s-1)}(i)\\right)
            - \\frac{(k-1)(2m+k)}{k(2m-k+1)} G_{k-2}^{(s)}(i)

    with :math:`G_0^{(0)} = 1` and :math:`G_0^{(s)} = 0` for ``s > 0``.

    Args:
        i: Data point offset from the window center.
        m: Half-window.
        k: Polynomial order. Must not exceed ``2m``.
        s: Derivative order.

    Returns:
        The value of the derivative at ``i``.
    """
    if k < 0:
        return 0.0
    if k == 0:
        return 1.0 if s == 0 else 0.0

    denom = k * (2 * m - k + 1)
    recurse = i * gram_polynomial(i, m, k - 1, s)
    if s > 0:
        recurse += s * gram_polynomial(i, m, k - 1, s - 1)
    return (
        (4 * k - 2) / denom * recurse
        - ((k - 1) * (2 * m + k)) / denom * gram_polynomial(i, m, k - 2, s)
    )


def product_of_range(a: int, b: int) -> int:
    """Returns the product of the ``b`` consecutive integers ending at ``a``.

    This is the falling factorial ``a * (a-1) * ... * (a-b+1)``. By
    convention it is ``1`` when ``a < b``.
    """
    if a < b:
        return 1
    return math.prod(range(a - b + 1, a + 1))


def poly_weight(i: int, t: int, m: int, polynomial: int, derivative: int) -> float:
    """Computes the weight of data point ``i`` for the fit evaluated at ``t``.

    Args:
        i: Offset of the data point from the window center, in ``[-m, m]``.
        t: Offset of the evaluation point from the window center, in ``[-m, m]``.
        m: Half-window.
        polynomial: Order of the fitted polynomial.
        derivative: Derivative order of the fit to evaluate.

    Returns:
        The convolution weight.
    """
    total = 0.0
    for k in range(polynomial + 1):
        norm = product_of_range(2 * m, k) / product_of_range(2 * m + k + 1, k + 1)
        total += (
            (2 * k + 1)
            * norm
            * gram_polynomial(i, m, k, 0)
            * gram_polynomial(t, m, k, derivative)
        )
    return total


@lru_cache(maxsize=64)
def compute_weights(window_size: int, polynomial: int, derivative: int) -> WeightTable:
    """Builds the ``window_size x window_size`` table of convolution weights.

    Row ``r`` holds the weights that evaluate the fit at offset
    ``r - window_size // 2`` from the window center, column ``c`` the weight
    of the ``c``-th sample in the window. The central row is used for every
    interior point, the others only at the boundaries.

    Tables are cached per configuration and returned read-only, so filters
    with the same configuration share a single table.

    Args:
        window_size: Number of points in the window. Assumed to be validated.
        polynomial: Order of the fitted polynomial.
        derivative: Derivative order.

    Returns:
        Read-only array of shape ``(window_size, window_size)``.
    """
    m = window_size // 2
    if polynomial >= window_size:
        savgolkit_logger.warning(
            "polynomial order %d is not smaller than window_size %d; "
            "fitting with order %d instead.",
            polynomial,
            window_size,
            window_size - 1,
        )
        polynomial = window_size - 1
    if derivative > polynomial:
        savgolkit_logger.warning(
            "derivative order %d exceeds polynomial order %d; "
            "all weights are zero.",
            derivative,
            polynomial,
        )

    savgolkit_logger.debug(
        "computing weight table (window_size=%d, polynomial=%d, derivative=%d)",
        window_size,
        polynomial,
        derivative,
    )
    weights = np.empty((window_size, window_size), dtype=np.float64)
    for row in range(-m, m + 1):
        for col in range(-m, m + 1):
            weights[row + m, col + m] = poly_weight(col, row, m, polynomial, derivative)

    weights.setflags(write=False)
    return weights
