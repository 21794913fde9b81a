"""Configuration of a Savitzky-Golay filter."""

from __future__ import annotations

from dataclasses import dataclass

from savgolkit.utils.validate import validate_order, validate_window_size

__all__ = ["FilterConfig"]


@dataclass(frozen=True)
class FilterConfig:
    """Configuration for SavitzkyGolayFilter.

    Attributes:
        window_size: Number of points in the window. Must be odd and at least 5.
        derivative: Order of the derivative to estimate. ``0`` smooths the data.
        polynomial: Order of the polynomial fitted in each window.
    """

    window_size: int
    derivative: int = 0
    polynomial: int = 3

    def __post_init__(self) -> None:
        object.__setattr__(self, "window_size", validate_window_size(self.window_size))
        object.__setattr__(
            self, "derivative", validate_order(self.derivative, name="derivative")
        )
        object.__setattr__(
            self, "polynomial", validate_order(self.polynomial, name="polynomial")
        )

    @property
    def half_window(self) -> int:
        """Offset from the window center to its edge."""
        return self.window_size // 2
