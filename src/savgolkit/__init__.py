"""Provides all savgolkit methods."""

from importlib.metadata import PackageNotFoundError, version

from savgolkit.exceptions import (
    InsufficientDataError,
    InvalidConfigError,
    SavGolError,
)
from savgolkit.filter_kit import savgol_filter
from savgolkit.filters.filter_config import FilterConfig
from savgolkit.filters.savitzky_golay import (
    SavitzkyGolayFilter,
    new_filter,
    new_filter_window,
)

try:
    __version__ = version("savgolkit")
except PackageNotFoundError:
    pass

__all__ = [
    "FilterConfig",
    "SavitzkyGolayFilter",
    "new_filter",
    "new_filter_window",
    "savgol_filter",
    "SavGolError",
    "InvalidConfigError",
    "InsufficientDataError",
]
