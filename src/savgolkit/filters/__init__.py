"""Savitzky-Golay filter and its weight computation."""

from savgolkit.filters.filter_config import FilterConfig
from savgolkit.filters.gram import compute_weights
from savgolkit.filters.savitzky_golay import (
    SavitzkyGolayFilter,
    local_spacing,
    new_filter,
    new_filter_window,
)

__all__ = [
    "FilterConfig",
    "SavitzkyGolayFilter",
    "compute_weights",
    "local_spacing",
    "new_filter",
    "new_filter_window",
]
