"""Exceptions raised by SavGolKit."""

__all__ = ["SavGolError", "InvalidConfigError", "InsufficientDataError"]


class SavGolError(Exception):
    """Base class for all SavGolKit errors."""


class InvalidConfigError(SavGolError, ValueError):
    """Raised when a filter is constructed with an invalid configuration.

    This covers an even window size, a window size smaller than 5 and a
    negative derivative or polynomial order.
    """


class InsufficientDataError(SavGolError, ValueError):
    """Raised when there are too few samples to apply the filter."""
