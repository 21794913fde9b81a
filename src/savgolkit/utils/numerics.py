"""Numerical helpers for comparing filter output against other smoothers."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "moving_average",
    "deviation",
]


def moving_average(window_size: int, values: ArrayLike) -> NDArray[np.float64]:
    """Computes a trailing moving average.

    The value at index ``j`` is the mean of the last ``window_size`` samples
    up to and including ``j``. The first ``window_size - 1`` entries average
    over the shorter run of samples that is available.

    Unlike a Savitzky-Golay filter the trailing average lags the signal by
    about half the window length.

    Args:
        window_size: Number of samples in the averaging window.
        values: 1D array-like of samples.

    Returns:
        Array of averages with the same length as ``values``.

    Raises:
        ValueError: If ``window_size`` is smaller than 1 or ``values`` is not 1D.
    """
    if window_size < 1:
        raise ValueError(f"window_size must be at least 1; got {window_size}.")
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"values must be 1D, got shape {arr.shape}.")

    csum = np.concatenate(([0.0], np.cumsum(arr)))
    hi = np.arange(1, arr.size + 1)
    lo = np.maximum(hi - window_size, 0)
    return (csum[hi] - csum[lo]) / (hi - lo)


def deviation(reference: ArrayLike, other: ArrayLike) -> tuple[float, float]:
    """Computes the maximum and mean absolute difference of two sequences.

    Args:
        reference: 1D array-like of reference values.
        other: 1D array-like of the same length.

    Returns:
        Tuple ``(max_abs_diff, mean_abs_diff)``.

    Raises:
        ValueError: If the inputs have different shapes or are empty.
    """
    a = np.asarray(reference, dtype=float)
    b = np.asarray(other, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} != {b.shape}.")
    if a.size == 0:
        raise ValueError("deviation requires at least one value.")
    diff = np.abs(b - a)
    return float(np.max(diff)), float(np.mean(diff))
