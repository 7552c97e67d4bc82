"""
Chi-squared goodness-of-fit and independence tests.

Public API:
    observed_expected(o, e)     - statistic for user-supplied O and E
    binomial_fit(o, n, p=)      - fit to B(n, p), p optionally estimated
    poisson_fit(o, mean=)       - fit to Po(λ), λ optionally estimated
    contingency_test(table)     - independence test for an r x c table
    chi_squared_statistic(o, e) - Σ (O−E)²/E with zero-expected guard
    group_expected(e, t)        - head/tail bin grouping
"""

from pychisq.fit.solvers import (
    observed_expected, binomial_fit, poisson_fit, contingency_test,
)
from pychisq.fit.design import FitDesign
from pychisq.fit._common import FitParams
from pychisq.fit.solution import FitSolution
from pychisq.fit.backends._statistic import chi_squared_statistic
from pychisq.fit.backends._grouping import GroupingResult, group_expected, group_vector

__all__ = [
    "observed_expected",
    "binomial_fit",
    "poisson_fit",
    "contingency_test",
    "chi_squared_statistic",
    "group_expected",
    "group_vector",
    "GroupingResult",
    "FitDesign",
    "FitParams",
    "FitSolution",
]
