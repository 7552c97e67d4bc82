"""
ModelParameter: a distribution parameter that is either supplied or estimated.

Used for binomial p and Poisson lambda. The user leaves the field blank
to request estimation from the observed data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class ModelParameter:
    """
    Tagged parameter value.

    Do not construct directly; use ModelParameter.given() or
    ModelParameter.estimate().
    """
    _value: float | None = None

    @classmethod
    def given(cls, value: float) -> ModelParameter:
        """An explicit parameter value."""
        return cls(_value=float(value))

    @classmethod
    def estimate(cls) -> ModelParameter:
        """Marker requesting estimation from the data."""
        return cls(_value=None)

    @property
    def is_estimate(self) -> bool:
        return self._value is None

    @property
    def value(self) -> float:
        if self._value is None:
            raise ValueError("parameter is marked for estimation and has no value")
        return self._value

    def resolve(self, estimator: Callable[[], float]) -> float:
        """Return the given value, or call estimator() in estimate mode."""
        if self._value is None:
            return float(estimator())
        return self._value

    def __repr__(self) -> str:
        if self._value is None:
            return "ModelParameter(estimate)"
        return f"ModelParameter({self._value!r})"
