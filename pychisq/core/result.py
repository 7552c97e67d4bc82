"""
Generic result container for pychisq computations.

Every fit produces a Result[P] whose payload P is the model-specific
parameter structure. The envelope carries the shared metadata: which
backend ran, what it did, and any non-fatal warnings.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (model, grouping boundaries)
    - Immutable (frozen=True) so a reported result cannot drift from
      the table that produced it
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The model-specific parameter payload type

    Attributes:
        params: Model-specific payload (statistic, observed, expected, ...)
        info: Structured metadata (model, group_start, group_end, ...)
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=FitParams(statistic=3.33, ...),
        ...     info={'model': 'observed_expected'},
        ...     backend_name='cpu_fit',
        ... )
    """
    params: P
    info: dict[str, Any]
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
