"""
Tests for ModelParameter (given value vs. estimate marker).
"""

import pytest

from pychisq.core.parameter import ModelParameter


class TestModelParameter:

    def test_given(self):
        p = ModelParameter.given(0.25)
        assert not p.is_estimate
        assert p.value == 0.25

    def test_estimate(self):
        p = ModelParameter.estimate()
        assert p.is_estimate
        with pytest.raises(ValueError):
            p.value

    def test_resolve_given_ignores_estimator(self):
        def estimator():
            raise AssertionError("estimator must not be called")
        assert ModelParameter.given(2.0).resolve(estimator) == 2.0

    def test_resolve_estimate_calls_estimator(self):
        assert ModelParameter.estimate().resolve(lambda: 1.5) == 1.5

    def test_equality(self):
        assert ModelParameter.given(1) == ModelParameter.given(1.0)
        assert ModelParameter.estimate() == ModelParameter.estimate()
        assert ModelParameter.estimate() != ModelParameter.given(0.0)
