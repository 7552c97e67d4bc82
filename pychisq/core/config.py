"""
Configuration for the statistical engine.

All tunables live here as frozen dataclasses and module constants.
There are no config files or environment variables; solvers take an
optional FitConfig and fall back to DEFAULT_CONFIG.
"""

from dataclasses import dataclass

from pychisq.core.exceptions import ValidationError


# Minimum expected count per bin for the chi-squared approximation.
MIN_EXPECTED = 5.0

# 170! is the largest factorial representable as float64 (171! > 1.8e308).
# Up to this many trials/categories the PMF uses exact integer
# coefficients; above it, log-gamma.
EXACT_ARITHMETIC_MAX = 170


@dataclass(frozen=True)
class FitConfig:
    """
    Engine configuration.

    Attributes:
        min_expected: Bin grouping threshold. Head/tail bins whose
            expected count falls below this are merged.
        exact_arithmetic_max: Largest n for exact-integer coefficients.
    """
    min_expected: float = MIN_EXPECTED
    exact_arithmetic_max: int = EXACT_ARITHMETIC_MAX

    def __post_init__(self) -> None:
        if not self.min_expected > 0:
            raise ValidationError(
                f"min_expected must be positive, got {self.min_expected}"
            )
        if not 0 <= self.exact_arithmetic_max <= EXACT_ARITHMETIC_MAX:
            raise ValidationError(
                f"exact_arithmetic_max must be in [0, {EXACT_ARITHMETIC_MAX}], "
                f"got {self.exact_arithmetic_max}"
            )


DEFAULT_CONFIG = FitConfig()


def resolve_config(config: FitConfig | None) -> FitConfig:
    """Return config, or the defaults when None."""
    return DEFAULT_CONFIG if config is None else config
