"""
Solver dispatch for chi-squared fits.

Public functions: observed_expected(), binomial_fit(), poisson_fit(),
contingency_test(). Each accepts raw arrays or a pre-built FitDesign.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pychisq.core.config import FitConfig
from pychisq.core.exceptions import ValidationError
from pychisq.core.parameter import ModelParameter
from pychisq.fit.design import FitDesign
from pychisq.fit.solution import FitSolution
from pychisq.fit.backends.cpu import CPUFitBackend


def _get_backend(backend: str = 'cpu'):
    """Select backend. Only the CPU backend exists."""
    if backend in ('cpu', 'auto'):
        return CPUFitBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'cpu'.")


def _solve(design: FitDesign, backend: str) -> FitSolution:
    result = _get_backend(backend).solve(design)
    return FitSolution(_result=result, _design=design)


def observed_expected(
    observed: ArrayLike | FitDesign,
    expected: ArrayLike | None = None,
    *,
    config: FitConfig | None = None,
    backend: str = 'cpu',
) -> FitSolution:
    """
    Chi-squared statistic for user-supplied observed and expected values.

    Parameters
    ----------
    observed : array-like or FitDesign
        Observed frequencies, 1D.
    expected : array-like
        Expected frequencies, same length. Every value must be positive;
        a zero raises ZeroExpectedError rather than returning inf.
    config : FitConfig or None
        Engine configuration (unused by this model beyond validation).

    Returns
    -------
    FitSolution
    """
    if isinstance(observed, FitDesign):
        design = observed
    else:
        if expected is None:
            raise ValidationError("expected: required when observed is not a FitDesign")
        design = FitDesign.for_observed_expected(observed, expected, config=config)
    return _solve(design, backend)


def binomial_fit(
    observed: ArrayLike | FitDesign,
    n: int | None = None,
    *,
    p: ModelParameter | float | None = None,
    categories: ArrayLike | None = None,
    config: FitConfig | None = None,
    backend: str = 'cpu',
) -> FitSolution:
    """
    Fit observed counts to X ~ B(n, p).

    Parameters
    ----------
    observed : array-like or FitDesign
        Counts for categories 0..n (length n + 1).
    n : int or None
        Number of trials. Defaults to len(observed) - 1.
    p : float, ModelParameter or None
        Success probability. None (or ModelParameter.estimate()) estimates
        p̂ = Σ i·oᵢ / (N·n).
    categories : array-like or None
        Category values used in the estimate; defaults to 0..n.
    config : FitConfig or None
        Grouping threshold and exact-arithmetic bound.

    Returns
    -------
    FitSolution
        Statistic over the grouped bins, with group_start/group_end.
    """
    if isinstance(observed, FitDesign):
        design = observed
    else:
        design = FitDesign.for_binomial(
            observed, n, p=p, categories=categories, config=config,
        )
    return _solve(design, backend)


def poisson_fit(
    observed: ArrayLike | FitDesign,
    *,
    mean: ModelParameter | float | None = None,
    categories: ArrayLike | None = None,
    config: FitConfig | None = None,
    backend: str = 'cpu',
) -> FitSolution:
    """
    Fit observed counts to X ~ Po(λ).

    Parameters
    ----------
    observed : array-like or FitDesign
        Counts for categories 0..k-1. The last category is "k-1 or more"
        and its expected count absorbs the remaining probability mass.
    mean : float, ModelParameter or None
        λ. None estimates λ̂ = Σ i·oᵢ / N.
    categories : array-like or None
        Category values used in the estimate; defaults to 0..k-1.
    config : FitConfig or None
        Grouping threshold and exact-arithmetic bound.

    Returns
    -------
    FitSolution
    """
    if isinstance(observed, FitDesign):
        design = observed
    else:
        design = FitDesign.for_poisson(
            observed, mean=mean, categories=categories, config=config,
        )
    return _solve(design, backend)


def contingency_test(
    table: ArrayLike | FitDesign,
    *,
    config: FitConfig | None = None,
    backend: str = 'cpu',
) -> FitSolution:
    """
    Chi-squared test of independence for an r x c count table.

    Expected cells are R_i·C_j/T; no bin grouping and no continuity
    correction. A grand total of zero raises EmptyTableError; an empty
    row or column raises ZeroExpectedError.

    Returns
    -------
    FitSolution
        extras carry row_totals, col_totals and grand_total.
    """
    if isinstance(table, FitDesign):
        design = table
    else:
        design = FitDesign.for_contingency(table, config=config)
    return _solve(design, backend)
