"""Provides :func:`savgol_filter`, a one-shot entry point.

Typical usage example:

>>> import numpy as np
>>> from savgolkit import savgol_filter
>>> y = np.full(50, np.pi)
>>> bool(np.allclose(savgol_filter(y, window_size=5), np.pi))
True

Reuse a :class:`~savgolkit.filters.savitzky_golay.SavitzkyGolayFilter` when
filtering many sequences with the same configuration.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from savgolkit.filters.savitzky_golay import SavitzkyGolayFilter

__all__ = ["savgol_filter"]


def savgol_filter(
    data: ArrayLike,
    x: ArrayLike | None = None,
    *,
    window_size: int,
    derivative: int = 0,
    polynomial: int = 3,
) -> NDArray[np.float64]:
    """Filters ``data`` with a freshly built Savitzky-Golay filter.

    Args:
        data: 1D array-like of samples.
        x: Sample positions. Defaults to ``0, 1, ..., len(data) - 1``.
        window_size: Number of points in the window. Must be odd and at least 5.
        derivative: Order of the derivative to estimate.
        polynomial: Order of the polynomial fitted in each window.

    Returns:
        The filtered values, one per sample.

    Raises:
        InvalidConfigError: If the filter configuration is out of range.
        InsufficientDataError: If ``data`` is shorter than the window.
    """
    sg = SavitzkyGolayFilter(window_size, derivative, polynomial)
    if x is None:
        data = np.asarray(data, dtype=float)
        if data.ndim != 1:
            raise ValueError(f"data must be 1D, got shape {data.shape}.")
        x = np.arange(data.shape[0], dtype=float)
    return sg.process(data, x)
