"""
Tests for engine configuration.
"""

import pytest

from pychisq.core.config import (
    DEFAULT_CONFIG, EXACT_ARITHMETIC_MAX, MIN_EXPECTED, FitConfig, resolve_config,
)
from pychisq.core.exceptions import ValidationError


class TestFitConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.min_expected == MIN_EXPECTED == 5.0
        assert DEFAULT_CONFIG.exact_arithmetic_max == EXACT_ARITHMETIC_MAX == 170

    @pytest.mark.parametrize("value", [0.0, -1.0])
    def test_min_expected_must_be_positive(self, value):
        with pytest.raises(ValidationError, match="min_expected"):
            FitConfig(min_expected=value)

    def test_exact_bound_cannot_exceed_float_limit(self):
        with pytest.raises(ValidationError, match="exact_arithmetic_max"):
            FitConfig(exact_arithmetic_max=171)

    def test_resolve_none_gives_defaults(self):
        assert resolve_config(None) is DEFAULT_CONFIG

    def test_resolve_passes_through(self):
        config = FitConfig(min_expected=1.0)
        assert resolve_config(config) is config
