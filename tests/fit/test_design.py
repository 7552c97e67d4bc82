"""
Tests for FitDesign factories and input validation.
"""

import numpy as np
import pytest

from pychisq.core.config import DEFAULT_CONFIG, FitConfig
from pychisq.core.exceptions import DimensionError, ValidationError
from pychisq.core.parameter import ModelParameter
from pychisq.fit import FitDesign


class TestObservedExpectedDesign:

    def test_basic(self):
        design = FitDesign.for_observed_expected([1, 2, 3], [2, 2, 2])
        assert design.model == "observed_expected"
        assert design.observed.dtype == np.float64
        assert design.n_categories == 3
        assert design.config is DEFAULT_CONFIG

    def test_copies_input(self):
        obs = np.array([1.0, 2.0, 3.0])
        design = FitDesign.for_observed_expected(obs, [2, 2, 2])
        obs[0] = 99.0
        assert design.observed[0] == 1.0

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            FitDesign.for_observed_expected([1, 2, 3], [1, 2])

    def test_non_finite(self):
        with pytest.raises(ValidationError):
            FitDesign.for_observed_expected([1, np.nan], [1, 2])

    def test_empty(self):
        with pytest.raises(DimensionError):
            FitDesign.for_observed_expected([], [])


class TestBinomialDesign:

    def test_n_defaults_to_length(self):
        design = FitDesign.for_binomial([1, 2, 3, 4])
        assert design.n_trials == 3
        assert design.parameter.is_estimate
        assert list(design.categories) == [0, 1, 2, 3]

    def test_float_p_is_given(self):
        design = FitDesign.for_binomial([1, 2, 3], 2, p=0.4)
        assert design.parameter == ModelParameter.given(0.4)

    def test_length_must_match_n(self):
        with pytest.raises(DimensionError, match="3 categories"):
            FitDesign.for_binomial([1, 2, 3, 4], 2)

    def test_p_out_of_range(self):
        with pytest.raises(ValidationError):
            FitDesign.for_binomial([1, 2, 3], 2, p=1.5)

    def test_p_not_a_number(self):
        with pytest.raises(ValidationError):
            FitDesign.for_binomial([1, 2, 3], 2, p="half")

    def test_negative_counts(self):
        with pytest.raises(ValidationError):
            FitDesign.for_binomial([1, -2, 3], 2)

    def test_non_integer_n(self):
        with pytest.raises(ValidationError):
            FitDesign.for_binomial([1, 2, 3], 2.5)

    def test_categories_length(self):
        with pytest.raises(DimensionError):
            FitDesign.for_binomial([1, 2, 3], 2, categories=[0, 1])

    def test_categories_above_n(self):
        with pytest.raises(ValidationError, match="0..2"):
            FitDesign.for_binomial([10, 30, 60], 2, categories=[0, 1, 5])

    def test_fractional_categories(self):
        with pytest.raises(ValidationError):
            FitDesign.for_binomial([10, 30, 60], 2, categories=[0, 0.5, 2])

    def test_relabelled_categories_within_range(self):
        design = FitDesign.for_binomial([10, 30, 60], 2, categories=[2, 1, 0])
        assert list(design.categories) == [2.0, 1.0, 0.0]

    def test_config_is_kept(self):
        config = FitConfig(min_expected=1.0)
        assert FitDesign.for_binomial([1, 2, 3], config=config).config is config


class TestPoissonDesign:

    def test_mean_none_estimates(self):
        assert FitDesign.for_poisson([5, 5, 5]).parameter.is_estimate

    def test_negative_mean(self):
        with pytest.raises(ValidationError):
            FitDesign.for_poisson([5, 5, 5], mean=-1.0)

    def test_infinite_mean(self):
        with pytest.raises(ValidationError):
            FitDesign.for_poisson([5, 5, 5], mean=np.inf)

    def test_custom_categories(self):
        design = FitDesign.for_poisson([5, 5], categories=[2, 3])
        assert list(design.categories) == [2.0, 3.0]


class TestContingencyDesign:

    def test_basic(self):
        design = FitDesign.for_contingency([[1, 2], [3, 4]])
        assert design.table.shape == (2, 2)
        assert design.n_categories == 4
        assert "table=(2, 2)" in repr(design)

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            FitDesign.for_contingency([["a", "b"], ["c", "d"]])
