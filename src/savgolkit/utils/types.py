"""Shared typing aliases for SavGolKit."""

from __future__ import annotations

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

WeightTable: TypeAlias = NDArray[np.float64]
