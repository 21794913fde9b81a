"""Utility functions for SavGolKit package."""

from .numerics import deviation, moving_average

__all__ = [
    "moving_average",
    "deviation",
]
