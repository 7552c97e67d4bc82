"""
Common types for goodness-of-fit computations.

Defines FitParams, the payload every fit returns, and the model names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


VALID_MODELS = ("observed_expected", "binomial", "poisson", "contingency")

SMALL_EXPECTED_WARNING = "Chi-squared approximation may be incorrect"
COLLAPSED_WARNING = (
    "All categories were merged into a single bin; "
    "too few bins remain for a meaningful test"
)


@dataclass(frozen=True)
class FitParams:
    """
    Parameter payload for a chi-squared fit.

    Attributes
    ----------
    statistic : float
        Pearson chi-squared statistic Σ (O−E)²/E.
    observed : ndarray
        Observed counts as compared: grouped for binomial/Poisson, the
        input vector for O vs E, the r x c table for contingency.
    expected : ndarray
        Expected counts paired with `observed`.
    model : str
        One of VALID_MODELS.
    method : str
        Human-readable description, e.g. "Binomial goodness-of-fit test".
    parameter : dict or None
        Fitted distribution parameters, e.g. {"n": 10, "p": 0.3}.
        None for O vs E and contingency.
    group_start, group_end : int
        Original-index boundaries absorbed into the first/last merged bin.
        For ungrouped models these span the whole range (0, k-1).
    extras : dict or None
        Model-specific outputs: ungrouped vectors, whether each parameter
        was estimated, marginal totals for contingency tables.
    """
    statistic: float
    observed: NDArray[np.floating[Any]]
    expected: NDArray[np.floating[Any]]
    model: str
    method: str
    parameter: dict[str, float] | None
    group_start: int
    group_end: int
    extras: dict[str, Any] | None = None
