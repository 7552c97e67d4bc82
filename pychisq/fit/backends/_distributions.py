"""
Expected frequencies for the binomial and Poisson models.

Coefficients and factorials use exact Python integers while the
category count stays within FitConfig.exact_arithmetic_max (170 by
default, the largest n with n! representable as float64). Above that
bound, or once a Poisson power λ^i leaves the float64 range, the PMF is
evaluated in log space with scipy.special.gammaln and xlogy.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import special

from pychisq.core.config import FitConfig
from pychisq.core.exceptions import (
    CoefficientOverflowError, EmptyTableError, PreconditionError,
)


def factorial(n: int, limit: int | None = None) -> int:
    """
    Exact n!.

    Args:
        n: Non-negative integer
        limit: If given, refuse n > limit (its float conversion would overflow)

    Raises:
        PreconditionError: If n is negative
        CoefficientOverflowError: If n exceeds limit
    """
    if n < 0:
        raise PreconditionError(f"factorial: n must be non-negative, got {n}")
    if limit is not None and n > limit:
        raise CoefficientOverflowError(
            f"factorial: {n}! exceeds the exact-arithmetic limit {limit}",
            n=n, limit=limit,
        )
    return math.factorial(n)


def choose(n: int, r: int, limit: int | None = None) -> int:
    """
    Exact binomial coefficient C(n, r).

    Raises:
        PreconditionError: If r > n or either argument is negative
        CoefficientOverflowError: If n exceeds limit
    """
    if n < 0 or r < 0:
        raise PreconditionError(f"choose: arguments must be non-negative, got n={n}, r={r}")
    if r > n:
        raise PreconditionError(f"choose: cannot choose {r} items from {n}")
    if limit is not None and n > limit:
        raise CoefficientOverflowError(
            f"choose: n={n} exceeds the exact-arithmetic limit {limit}",
            n=n, limit=limit,
        )
    return math.comb(n, r)


def binomial_pmf(n: int, p: float, config: FitConfig) -> NDArray[np.floating[Any]]:
    """P(X = i) for X ~ B(n, p), i = 0..n. 0**0 is taken as 1."""
    if n <= config.exact_arithmetic_max:
        limit = config.exact_arithmetic_max
        return np.array(
            [choose(n, i, limit) * p ** i * (1.0 - p) ** (n - i) for i in range(n + 1)],
            dtype=np.float64,
        )
    i = np.arange(n + 1, dtype=np.float64)
    log_coef = special.gammaln(n + 1) - special.gammaln(i + 1) - special.gammaln(n - i + 1)
    # xlogy/xlog1py give 0 * log(0) = 0, matching 0**0 = 1
    return np.exp(log_coef + special.xlogy(i, p) + special.xlog1py(n - i, -p))


def poisson_pmf(mean: float, k: int, config: FitConfig) -> NDArray[np.floating[Any]]:
    """P(X = i) for X ~ Po(mean), i = 0..k-1."""
    mean = float(mean)
    pmf = np.empty(k, dtype=np.float64)
    exact = min(k, config.exact_arithmetic_max + 1)
    for i in range(exact):
        try:
            pmf[i] = math.exp(-mean) * mean ** i / factorial(i, config.exact_arithmetic_max)
        except OverflowError:
            # λ^i left the float64 range; the rest goes through log space
            exact = i
            break
    if exact < k:
        i = np.arange(exact, k, dtype=np.float64)
        pmf[exact:] = np.exp(special.xlogy(i, mean) - mean - special.gammaln(i + 1))
    return pmf


def total_frequency(observed: NDArray[np.floating[Any]]) -> float:
    """Total observed frequency N; raises EmptyTableError when N <= 0."""
    total = float(np.sum(observed))
    if total <= 0:
        raise EmptyTableError(
            f"no observations: total observed frequency is {total:g}"
        )
    return total


def estimate_binomial_p(
    observed: NDArray[np.floating[Any]],
    categories: NDArray[np.floating[Any]],
    n: int,
) -> float:
    """
    p̂ = Σ i·oᵢ / (N·n), with i the category values.

    Raises:
        EmptyTableError: If N == 0
        PreconditionError: If n == 0 or the estimate falls outside [0, 1]
            (category labels larger than n)
    """
    total = total_frequency(observed)
    if n == 0:
        raise PreconditionError("cannot estimate p with n = 0 trials")
    p_hat = float(np.dot(categories, observed)) / (total * n)
    if not 0.0 <= p_hat <= 1.0:
        raise PreconditionError(
            f"estimated p = {p_hat:g} is outside [0, 1]; "
            f"category labels must lie in 0..{n}"
        )
    return p_hat


def estimate_poisson_mean(
    observed: NDArray[np.floating[Any]],
    categories: NDArray[np.floating[Any]],
) -> float:
    """
    λ̂ = Σ i·oᵢ / N, with i the category values.

    Raises:
        EmptyTableError: If N == 0
    """
    total = total_frequency(observed)
    return float(np.dot(categories, observed)) / total


def binomial_expected(
    n: int, p: float, total: float, config: FitConfig,
) -> NDArray[np.floating[Any]]:
    """Expected counts C(n,i)·p^i·(1-p)^(n-i)·N for i = 0..n."""
    return binomial_pmf(n, p, config) * total


def poisson_expected(
    mean: float, total: float, k: int, config: FitConfig,
) -> NDArray[np.floating[Any]]:
    """
    Expected counts N·e^-λ·λ^i/i! for i < k-1; category k-1 is "≥ k-1".

    The last category takes the remainder N - Σ previous, so the vector
    sums to N exactly rather than losing the truncated tail.
    """
    expected = np.empty(k, dtype=np.float64)
    if k > 1:
        expected[:-1] = poisson_pmf(mean, k - 1, config) * total
    # rounding can leave a remainder of -1e-13 when λ is tiny
    expected[-1] = max(total - float(np.sum(expected[:-1])), 0.0)
    return expected
