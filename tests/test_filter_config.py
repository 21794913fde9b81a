"""Tests for FilterConfig and filter construction."""

import dataclasses

import pytest

from savgolkit import (
    FilterConfig,
    InvalidConfigError,
    SavitzkyGolayFilter,
    new_filter,
    new_filter_window,
)


@pytest.mark.parametrize("window_size", [0, 3, 4, 6, -5, 10])
def test_bad_window_size_raises(window_size):
    """Even windows and windows below 5 are rejected."""
    with pytest.raises(InvalidConfigError, match="odd and equal to or greater than 5"):
        new_filter_window(window_size)


def test_negative_derivative_raises():
    """A negative derivative order is rejected."""
    with pytest.raises(InvalidConfigError, match="derivative"):
        new_filter(7, -1, 3)


def test_negative_polynomial_raises():
    """A negative polynomial order is rejected."""
    with pytest.raises(InvalidConfigError, match="polynomial"):
        new_filter(7, 0, -1)


@pytest.mark.parametrize("window_size", [7.0, "7", None])
def test_non_integer_window_size_raises(window_size):
    """Non-integer window sizes are rejected."""
    with pytest.raises(InvalidConfigError, match="integer"):
        FilterConfig(window_size=window_size)


def test_invalid_config_is_a_value_error():
    """InvalidConfigError can be caught as ValueError."""
    with pytest.raises(ValueError):
        new_filter(6, 0, 3)


@pytest.mark.parametrize(
    "window_size, derivative, polynomial",
    [(5, 0, 0), (5, 0, 3), (7, 2, 3), (21, 0, 3), (9, 4, 2), (5, 0, 12)],
)
def test_valid_configurations_construct(window_size, derivative, polynomial):
    """Odd windows >= 5 with non-negative orders are accepted."""
    sg = new_filter(window_size, derivative, polynomial)
    assert sg.window_size == window_size
    assert sg.derivative == derivative
    assert sg.polynomial == polynomial
    assert sg.weights.shape == (window_size, window_size)


def test_new_filter_window_defaults():
    """new_filter_window smooths with a cubic fit."""
    sg = new_filter_window(11)
    assert sg.config == FilterConfig(window_size=11, derivative=0, polynomial=3)
    assert sg.config.half_window == 5


def test_from_config_roundtrip():
    """A filter built from a config carries that config."""
    config = FilterConfig(window_size=9, derivative=1, polynomial=2)
    sg = SavitzkyGolayFilter.from_config(config)
    assert sg.config == config
    assert repr(sg) == "SavitzkyGolayFilter(window_size=9, derivative=1, polynomial=2)"


def test_config_is_frozen():
    """FilterConfig cannot be changed after construction."""
    config = FilterConfig(window_size=5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.window_size = 7


def test_filter_is_immutable():
    """Filter attributes cannot be assigned or deleted."""
    sg = new_filter_window(5)
    with pytest.raises(AttributeError):
        sg.window_size = 7
    with pytest.raises(AttributeError):
        sg._weights = None
    with pytest.raises(AttributeError):
        del sg._config
    assert not sg.weights.flags.writeable
