"""
Pearson chi-squared statistic over paired observed/expected vectors.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pychisq.core.exceptions import DimensionError, ZeroExpectedError


def chi_squared_statistic(observed: ArrayLike, expected: ArrayLike) -> float:
    """
    Σ (oᵢ − eᵢ)² / eᵢ.

    Works on vectors or tables of matching shape.

    Raises:
        DimensionError: If shapes differ
        ZeroExpectedError: If any expected value is <= 0 (the statistic
            would be infinite or undefined)
    """
    o: NDArray[np.floating[Any]] = np.asarray(observed, dtype=np.float64)
    e: NDArray[np.floating[Any]] = np.asarray(expected, dtype=np.float64)
    if o.shape != e.shape:
        raise DimensionError(
            f"observed and expected must have the same shape, got {o.shape} and {e.shape}"
        )
    bad = np.argwhere(~(e > 0))
    if len(bad) > 0:
        index = tuple(int(i) for i in bad[0])
        where = index[0] if len(index) == 1 else index
        raise ZeroExpectedError(
            f"expected value at {where} is {e[index]:g}; "
            f"every expected value must be positive",
            index=where, value=float(e[index]),
        )
    return float(np.sum((o - e) ** 2 / e))
