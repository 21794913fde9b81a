"""Tests for savgolkit.utils.numerics."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from savgolkit.utils.numerics import deviation, moving_average


def test_moving_average_trailing_window():
    """Each value averages the last window_size samples."""
    out = moving_average(3, [1.0, 2.0, 3.0, 4.0, 5.0])
    assert_allclose(out, [1.0, 1.5, 2.0, 3.0, 4.0])


def test_moving_average_window_one_is_identity():
    """A window of one sample returns the input."""
    values = np.array([3.0, -1.0, 2.5])
    assert_allclose(moving_average(1, values), values)


def test_moving_average_window_longer_than_data():
    """A window longer than the data averages everything seen so far."""
    out = moving_average(10, [2.0, 4.0, 6.0])
    assert_allclose(out, [2.0, 3.0, 4.0])


def test_moving_average_rejects_bad_input():
    """Non-positive windows and 2D values are rejected."""
    with pytest.raises(ValueError, match="at least 1"):
        moving_average(0, [1.0, 2.0])
    with pytest.raises(ValueError, match="1D"):
        moving_average(2, np.zeros((2, 2)))


def test_moving_average_lags_a_ramp():
    """The trailing average of a ramp lags by half the window."""
    ramp = np.arange(50, dtype=float)
    out = moving_average(11, ramp)
    assert_allclose(out[10:], ramp[10:] - 5.0)


def test_deviation():
    """Returns max and mean absolute differences."""
    max_diff, avg_diff = deviation([0.0, 0.0, 0.0], [1.0, -2.0, 0.0])
    assert max_diff == 2.0
    assert avg_diff == 1.0


def test_deviation_rejects_bad_input():
    """Mismatched and empty inputs are rejected."""
    with pytest.raises(ValueError, match="shape mismatch"):
        deviation([1.0, 2.0], [1.0])
    with pytest.raises(ValueError, match="at least one"):
        deviation([], [])
