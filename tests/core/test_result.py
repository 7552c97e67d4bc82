"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pychisq.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"model": "binomial"},
            backend_name="cpu_fit",
        )
        assert result.params.value == 42.0
        assert result.info["model"] == "binomial"
        assert result.backend_name == "cpu_fit"

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(value=1.0), info={}, backend_name="cpu")
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)


class TestImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(value=1.0), info={}, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(value=1.0),
            info={},
            backend_name="cpu",
            warnings=("Chi-squared approximation may be incorrect",),
        )
        assert result.has_warning("approximation")
        assert not result.has_warning("converge")
