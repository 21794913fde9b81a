"""Savitzky-Golay smoothing and differentiation of sampled data.

A Savitzky-Golay filter fits a low-order polynomial to every window of
``window_size`` consecutive samples by least squares and evaluates the fit
(or one of its derivatives) at the window center. Because the fit is linear
in the data this is a convolution with precomputed weights, see
:mod:`savgolkit.filters.gram`. Unlike a moving average it does not delay the
signal by half a window.

The first and last ``window_size // 2`` outputs have no centered window.
They are evaluated off-center on the first and last full window instead.

Derivatives are estimated with respect to the sample positions ``x``, which
do not need to be uniformly spaced: every output is rescaled by the local
mean spacing raised to the derivative order.

Examples:
=========

Smoothing a noisy sine::
>>> import numpy as np
>>> from savgolkit.filters.savitzky_golay import new_filter_window
>>> rng = np.random.default_rng(7)
>>> x = np.arange(500, dtype=float)
>>> truth = 20 * np.sin(x / np.pi / 6)
>>> noisy = truth + rng.uniform(-2.5, 2.5, x.size)
>>> smoothed = new_filter_window(21).process(noisy, x)
>>> smoothed.shape
(500,)
>>> bool(np.mean(np.abs(smoothed - truth)) < np.mean(np.abs(noisy - truth)))
True
"""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import ArrayLike, NDArray

from savgolkit.exceptions import InsufficientDataError
from savgolkit.filters.filter_config import FilterConfig
from savgolkit.filters.gram import compute_weights
from savgolkit.utils.types import WeightTable
from savgolkit.utils.validate import validate_sequence_pair

__all__ = [
    "SavitzkyGolayFilter",
    "new_filter",
    "new_filter_window",
    "local_spacing",
    "local_spacings",
]


class SavitzkyGolayFilter:
    """Applies a Savitzky-Golay filter to sampled data.

    The filter is immutable: the configuration and the weight table are
    fixed at construction, so one instance can be shared between threads
    and reused for any number of :meth:`process` calls. The table holds
    ``window_size**2`` values.

    Attributes:
        config: The validated :class:`FilterConfig`.
        weights: Read-only ``(window_size, window_size)`` weight table.
    """

    __slots__ = ("_config", "_weights")

    def __init__(self, window_size: int, derivative: int = 0, polynomial: int = 3) -> None:
        """Initialises the filter and computes its weight table.

        Args:
            window_size: Number of points in the window. Must be odd and at
                least 5.
            derivative: Order of the derivative to estimate. ``0`` smooths.
            polynomial: Order of the polynomial fitted in each window.

        Raises:
            InvalidConfigError: If any of the arguments is out of range.
        """
        config = FilterConfig(
            window_size=window_size, derivative=derivative, polynomial=polynomial
        )
        object.__setattr__(self, "_config", config)
        object.__setattr__(
            self,
            "_weights",
            compute_weights(config.window_size, config.polynomial, config.derivative),
        )

    @classmethod
    def from_config(cls, config: FilterConfig) -> SavitzkyGolayFilter:
        """Builds a filter from an existing configuration."""
        return cls(config.window_size, config.derivative, config.polynomial)

    def __setattr__(self, name: str, value: object) -> None:
        """Refuses attribute assignment; filters are immutable."""
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __delattr__(self, name: str) -> None:
        """Refuses attribute deletion; filters are immutable."""
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __repr__(self) -> str:
        c = self._config
        return (
            f"{type(self).__name__}(window_size={c.window_size}, "
            f"derivative={c.derivative}, polynomial={c.polynomial})"
        )

    @property
    def config(self) -> FilterConfig:
        return self._config

    @property
    def window_size(self) -> int:
        return self._config.window_size

    @property
    def derivative(self) -> int:
        return self._config.derivative

    @property
    def polynomial(self) -> int:
        return self._config.polynomial

    @property
    def weights(self) -> WeightTable:
        return self._weights

    def process(self, data: ArrayLike, x: ArrayLike) -> NDArray[np.float64]:
        """Filters ``data`` sampled at positions ``x``.

        Args:
            data: 1D array-like of samples. Must hold at least
                ``window_size`` values.
            x: 1D array-like of sample positions, same length as ``data``.

        Returns:
            A new array with one filtered value per sample.

        Raises:
            InsufficientDataError: If ``data`` is shorter than the window.
            ValueError: If ``data`` and ``x`` are not 1D or differ in length.
        """
        w = self._config.window_size
        half = self._config.half_window
        data_arr, x_arr = validate_sequence_pair(data, x, w)
        n = data_arr.shape[0]
        weights = self._weights

        results = np.empty(n, dtype=np.float64)
        # Off-center rows evaluate the first and last full window.
        results[:half] = weights[:half] @ data_arr[:w]
        results[n - half:] = weights[half + 1:] @ data_arr[n - w:]
        results[half:n - half] = sliding_window_view(data_arr, w) @ weights[half]

        return results / local_spacings(x_arr, half, self._config.derivative)


def new_filter(window_size: int, derivative: int, polynomial: int) -> SavitzkyGolayFilter:
    """Creates a Savitzky-Golay filter.

    Args:
        window_size: Number of points in the window. Must be odd and at least 5.
        derivative: Order of the derivative to estimate.
        polynomial: Order of the polynomial fitted in each window.

    Returns:
        The filter.

    Raises:
        InvalidConfigError: If any of the arguments is out of range.
    """
    return SavitzkyGolayFilter(window_size, derivative, polynomial)


def new_filter_window(window_size: int) -> SavitzkyGolayFilter:
    """Creates a smoothing filter fitting a cubic polynomial."""
    return new_filter(window_size, 0, 3)


def local_spacing(x: ArrayLike, center: int, half: int, derivative: int) -> float:
    """Computes the spacing normalization for a single output.

    Averages the forward differences ``x[i+1] - x[i]`` for ``i`` in
    ``[center - half, center + half)``, skipping indices that fall outside
    ``x``, and raises the mean to the power ``derivative``.

    Args:
        x: 1D array-like of sample positions.
        center: Index of the output being normalized.
        half: Half-window.
        derivative: Derivative order.

    Returns:
        The normalization factor. Always ``1.0`` when ``derivative == 0``.

    Raises:
        InsufficientDataError: If no difference falls inside ``x`` and
            ``derivative > 0``.
    """
    if derivative == 0:
        return 1.0
    x_arr = np.asarray(x, dtype=float)
    lo = max(center - half, 0)
    hi = min(center + half, x_arr.shape[0] - 1)
    if hi <= lo:
        raise InsufficientDataError(
            f"no sample spacing available around index {center}."
        )
    return float(np.mean(np.diff(x_arr[lo:hi + 1])) ** derivative)


def local_spacings(x: NDArray[np.float64], half: int, derivative: int) -> NDArray[np.float64]:
    """Computes :func:`local_spacing` for every index of ``x`` at once."""
    n = x.shape[0]
    if derivative == 0:
        return np.ones(n, dtype=np.float64)

    csum = np.concatenate(([0.0], np.cumsum(np.diff(x))))
    centers = np.arange(n)
    lo = np.clip(centers - half, 0, n - 1)
    hi = np.clip(centers + half, 0, n - 1)
    count = hi - lo
    if np.any(count <= 0):
        raise InsufficientDataError("no sample spacing available around some indices.")
    return ((csum[hi] - csum[lo]) / count) ** derivative
