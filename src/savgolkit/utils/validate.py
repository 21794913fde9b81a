"""Validation utilities for SavGolKit."""

from __future__ import annotations

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from savgolkit.exceptions import InsufficientDataError, InvalidConfigError

__all__ = [
    "validate_window_size",
    "validate_order",
    "validate_sequence_pair",
]


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_window_size(window_size: int) -> int:
    """Validates the number of points in a filter window.

    Args:
        window_size: Number of points in the window.

    Returns:
        The window size as a plain ``int``.

    Raises:
        InvalidConfigError: If ``window_size`` is not an integer, is even or
            is smaller than 5.
    """
    if not _is_integer(window_size):
        raise InvalidConfigError(
            f"window_size must be an integer; got {window_size!r}."
        )
    if window_size % 2 == 0 or window_size < 5:
        raise InvalidConfigError(
            f"window_size [{window_size}] must be odd and equal to or greater than 5."
        )
    return int(window_size)


def validate_order(value: int, *, name: str) -> int:
    """Validates a derivative or polynomial order.

    Args:
        value: The order to check.
        name: Name used in error messages.

    Returns:
        The order as a plain ``int``.

    Raises:
        InvalidConfigError: If ``value`` is not a non-negative integer.
    """
    if not _is_integer(value):
        raise InvalidConfigError(f"{name} must be an integer; got {value!r}.")
    if value < 0:
        raise InvalidConfigError(
            f"{name} [{value}] must be equal to or greater than 0."
        )
    return int(value)


def validate_sequence_pair(
    data: ArrayLike,
    x: ArrayLike,
    window_size: int,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Validates and converts the sampled data and its positions.

    Requirements:
      - ``data`` and ``x`` are 1D.
      - ``len(x) == len(data)``.
      - ``len(data) >= window_size``.

    ``x`` does not need to be uniformly spaced.

    Args:
        data: Sampled values.
        x: Positions of the samples on the independent axis.
        window_size: Number of points in the filter window.

    Returns:
        Tuple of (data_array, x_array) as float NumPy arrays.

    Raises:
        ValueError: If ``data`` or ``x`` is not 1D or their lengths differ.
        InsufficientDataError: If ``data`` is shorter than the window.
    """
    data_arr = np.asarray(data, dtype=float)
    x_arr = np.asarray(x, dtype=float)

    if data_arr.ndim != 1:
        raise ValueError(f"data must be 1D, got shape {data_arr.shape}.")
    if x_arr.ndim != 1:
        raise ValueError(f"x must be 1D, got shape {x_arr.shape}.")
    if data_arr.shape[0] < window_size:
        raise InsufficientDataError(
            f"data length [{data_arr.shape[0]}] must be equal to or larger "
            f"than window_size [{window_size}]."
        )
    if x_arr.shape[0] != data_arr.shape[0]:
        raise ValueError(
            f"x and data must have the same length; got {x_arr.shape[0]} "
            f"and {data_arr.shape[0]}."
        )

    return data_arr, x_arr
