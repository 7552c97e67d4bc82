"""
FitDesign: tagged union for goodness-of-fit inputs.

Uses factory classmethods per model. The `model` field identifies
which fields are populated. Immutable after construction; arrays are
private float64 copies, never views of caller data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pychisq.core.config import FitConfig, resolve_config
from pychisq.core.exceptions import DimensionError, ValidationError
from pychisq.core.parameter import ModelParameter
from pychisq.core.validation import (
    check_1d, check_2d, check_array, check_consistent_length, check_finite,
    check_non_empty, check_non_negative,
)


ParameterLike = ModelParameter | float | None


def _to_parameter(value: ParameterLike, name: str) -> ModelParameter:
    """None means estimate; numbers become ModelParameter.given()."""
    if value is None:
        return ModelParameter.estimate()
    if isinstance(value, ModelParameter):
        return value
    try:
        return ModelParameter.given(float(value))
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a number or None, got {value!r}") from e


def _counts_1d(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(x, name)
    check_1d(arr, name)
    check_non_empty(arr, name)
    check_finite(arr, name)
    check_non_negative(arr, name)
    return arr


def _categories(
    categories: ArrayLike | None, k: int, name: str = "categories",
) -> NDArray[np.floating[Any]]:
    if categories is None:
        return np.arange(k, dtype=np.float64)
    arr = check_array(categories, name)
    check_1d(arr, name)
    check_finite(arr, name)
    if len(arr) != k:
        raise DimensionError(f"{name}: expected {k} category values, got {len(arr)}")
    return arr


@dataclass(frozen=True)
class FitDesign:
    """
    Design for a chi-squared fit.

    Do not construct directly; use factory classmethods.
    """
    model: str

    _observed: NDArray[np.floating[Any]] | None = None
    _expected: NDArray[np.floating[Any]] | None = None
    _table: NDArray[np.floating[Any]] | None = None
    _categories: NDArray[np.floating[Any]] | None = None
    _n_trials: int | None = None
    _parameter: ModelParameter = field(default_factory=ModelParameter.estimate)
    _config: FitConfig = field(default_factory=FitConfig)

    # --- Properties ---

    @property
    def observed(self) -> NDArray[np.floating[Any]] | None:
        return self._observed

    @property
    def expected(self) -> NDArray[np.floating[Any]] | None:
        return self._expected

    @property
    def table(self) -> NDArray[np.floating[Any]] | None:
        return self._table

    @property
    def categories(self) -> NDArray[np.floating[Any]] | None:
        return self._categories

    @property
    def n_trials(self) -> int | None:
        return self._n_trials

    @property
    def parameter(self) -> ModelParameter:
        return self._parameter

    @property
    def config(self) -> FitConfig:
        return self._config

    @property
    def n_categories(self) -> int:
        if self._table is not None:
            return int(self._table.size)
        return len(self._observed)

    # --- Factory classmethods ---

    @classmethod
    def for_observed_expected(
        cls,
        observed: ArrayLike,
        expected: ArrayLike,
        *,
        config: FitConfig | None = None,
    ) -> FitDesign:
        """Build design for observed_expected()."""
        obs = check_array(observed, "observed")
        exp = check_array(expected, "expected")
        check_1d(obs, "observed")
        check_1d(exp, "expected")
        check_non_empty(obs, "observed")
        check_consistent_length(obs, exp, names=("observed", "expected"))
        check_finite(obs, "observed")
        check_finite(exp, "expected")
        return cls(
            model="observed_expected",
            _observed=obs,
            _expected=exp,
            _config=resolve_config(config),
        )

    @classmethod
    def for_binomial(
        cls,
        observed: ArrayLike,
        n: int | None = None,
        *,
        p: ParameterLike = None,
        categories: ArrayLike | None = None,
        config: FitConfig | None = None,
    ) -> FitDesign:
        """
        Build design for binomial_fit().

        observed holds counts for categories 0..n, so len(observed) must
        be n + 1; n defaults to len(observed) - 1. categories are the
        values used for estimating p (defaults to 0..n).
        """
        obs = _counts_1d(observed, "observed")
        if n is None:
            n = len(obs) - 1
        if int(n) != n or n < 0:
            raise ValidationError(f"n must be a non-negative integer, got {n!r}")
        n = int(n)
        if len(obs) != n + 1:
            raise DimensionError(
                f"observed: B({n}, p) has {n + 1} categories, got {len(obs)} counts"
            )
        cats = _categories(categories, n + 1)
        outside = np.flatnonzero((cats < 0) | (cats > n) | (cats != np.round(cats)))
        if len(outside) > 0:
            raise ValidationError(
                f"categories: B({n}, p) categories are integers in 0..{n}, "
                f"got {cats[outside].tolist()}"
            )
        parameter = _to_parameter(p, "p")
        if not parameter.is_estimate and not 0.0 <= parameter.value <= 1.0:
            raise ValidationError(f"p must be in [0, 1], got {parameter.value}")
        return cls(
            model="binomial",
            _observed=obs,
            _categories=cats,
            _n_trials=n,
            _parameter=parameter,
            _config=resolve_config(config),
        )

    @classmethod
    def for_poisson(
        cls,
        observed: ArrayLike,
        *,
        mean: ParameterLike = None,
        categories: ArrayLike | None = None,
        config: FitConfig | None = None,
    ) -> FitDesign:
        """
        Build design for poisson_fit().

        observed holds counts for categories 0..k-1; the last category
        is open-ended ("k-1 or more").
        """
        obs = _counts_1d(observed, "observed")
        parameter = _to_parameter(mean, "mean")
        if not parameter.is_estimate and not (
            np.isfinite(parameter.value) and parameter.value >= 0.0
        ):
            raise ValidationError(f"mean must be finite and >= 0, got {parameter.value}")
        return cls(
            model="poisson",
            _observed=obs,
            _categories=_categories(categories, len(obs)),
            _parameter=parameter,
            _config=resolve_config(config),
        )

    @classmethod
    def for_contingency(
        cls,
        table: ArrayLike,
        *,
        config: FitConfig | None = None,
    ) -> FitDesign:
        """Build design for contingency_test()."""
        arr = check_array(table, "table")
        check_2d(arr, "table")
        check_non_empty(arr, "table")
        check_finite(arr, "table")
        check_non_negative(arr, "table")
        return cls(
            model="contingency",
            _table=arr,
            _config=resolve_config(config),
        )

    def __repr__(self) -> str:
        if self._table is not None:
            shape = f"table={self._table.shape}"
        else:
            shape = f"k={len(self._observed)}"
        return f"FitDesign(model={self.model!r}, {shape}, parameter={self._parameter!r})"
