"""
pychisq: interactive chi-squared goodness-of-fit calculator.

Build a small table in the terminal, fit it and report the Pearson
chi-squared statistic.

Submodules:
    table: NumericTable, grid editor and parameter collector
    fit: observed-vs-expected, binomial, Poisson and contingency fits
    session: interactive flows tying the two together
"""

__version__ = "0.1.0"

from pychisq import table
from pychisq import fit
from pychisq.fit import (
    observed_expected, binomial_fit, poisson_fit, contingency_test,
)

__all__ = [
    "__version__",
    "table",
    "fit",
    "observed_expected",
    "binomial_fit",
    "poisson_fit",
    "contingency_test",
]
