"""
Goodness-of-fit for the observed-vs-expected, binomial and Poisson models.

Binomial and Poisson fits run the same pipeline: resolve the parameter
(given or estimated), build the expected vector, group low-expected
head/tail bins, merge the observed vector with the same boundaries and
evaluate the statistic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pychisq.fit._common import FitParams, COLLAPSED_WARNING
from pychisq.fit.backends._distributions import (
    binomial_expected, estimate_binomial_p, estimate_poisson_mean, poisson_expected,
    total_frequency,
)
from pychisq.fit.backends._grouping import group_expected, group_vector
from pychisq.fit.backends._statistic import chi_squared_statistic

if TYPE_CHECKING:
    from pychisq.fit.design import FitDesign


def observed_expected(design: FitDesign) -> tuple[FitParams, list[str]]:
    """O vs E: both vectors come from the user, no estimation or grouping."""
    observed = design.observed.copy()
    expected = design.expected.copy()
    statistic = chi_squared_statistic(observed, expected)
    return FitParams(
        statistic=statistic,
        observed=observed,
        expected=expected,
        model="observed_expected",
        method="Observed vs expected goodness-of-fit test",
        parameter=None,
        group_start=0,
        group_end=len(observed) - 1,
    ), []


def binomial(design: FitDesign) -> tuple[FitParams, list[str]]:
    """Fit X ~ B(n, p) to counts for categories 0..n."""
    observed = design.observed.copy()
    n = design.n_trials
    total = total_frequency(observed)
    p = design.parameter.resolve(
        lambda: estimate_binomial_p(observed, design.categories, n)
    )
    raw_expected = binomial_expected(n, p, total, design.config)
    return _grouped_fit(
        design, observed, raw_expected,
        method="Binomial goodness-of-fit test",
        parameter={"n": float(n), "p": p},
    )


def poisson(design: FitDesign) -> tuple[FitParams, list[str]]:
    """Fit X ~ Po(λ) to counts for categories 0..k-1 (last is open-ended)."""
    observed = design.observed.copy()
    total = total_frequency(observed)
    mean = design.parameter.resolve(
        lambda: estimate_poisson_mean(observed, design.categories)
    )
    raw_expected = poisson_expected(mean, total, len(observed), design.config)
    return _grouped_fit(
        design, observed, raw_expected,
        method="Poisson goodness-of-fit test",
        parameter={"lambda": mean},
    )


def _grouped_fit(
    design: FitDesign,
    observed: np.ndarray,
    raw_expected: np.ndarray,
    method: str,
    parameter: dict[str, float],
) -> tuple[FitParams, list[str]]:
    warnings_list: list[str] = []
    grouping = group_expected(raw_expected, design.config.min_expected)
    grouped_observed = group_vector(observed, grouping.group_start, grouping.group_end)
    if grouping.collapsed:
        warnings_list.append(COLLAPSED_WARNING)

    statistic = chi_squared_statistic(grouped_observed, grouping.grouped_expected)
    return FitParams(
        statistic=statistic,
        observed=grouped_observed,
        expected=grouping.grouped_expected,
        model=design.model,
        method=method,
        parameter=parameter,
        group_start=grouping.group_start,
        group_end=grouping.group_end,
        extras={
            "raw_observed": observed,
            "raw_expected": raw_expected,
            "estimated": design.parameter.is_estimate,
        },
    ), warnings_list
