"""
Core infrastructure for pychisq.

Shared abstractions used by the table editor and the fitting engine.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Numeric parsing and input validators
    config: Engine configuration (grouping threshold, exact-arithmetic bound)
"""

from pychisq.core.result import Result
from pychisq.core.config import FitConfig, DEFAULT_CONFIG
from pychisq.core.exceptions import (
    ChiSquaredError,
    ValidationError,
    DimensionError,
    TableParseError,
    PreconditionError,
    ZeroExpectedError,
    EmptyTableError,
    CoefficientOverflowError,
)

__all__ = [
    # Result
    "Result",
    # Config
    "FitConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "ChiSquaredError",
    "ValidationError",
    "DimensionError",
    "TableParseError",
    "PreconditionError",
    "ZeroExpectedError",
    "EmptyTableError",
    "CoefficientOverflowError",
]
