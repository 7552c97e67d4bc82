"""
Exception hierarchy for pychisq.

All exceptions inherit from ChiSquaredError so callers can catch any
library-specific error. Two branches:

    ValidationError    - the user's input is malformed; interactive loops
                         recover from these by re-entering the editor
    PreconditionError  - the input is well-formed but the computation is
                         undefined for it (zero expected count, empty table,
                         coefficient with r > n); fatal for the run

Exceptions carry diagnostic information as attributes, and messages
state the actual offending values.
"""


class ChiSquaredError(Exception):
    """Base exception for all pychisq errors."""
    pass


class ValidationError(ChiSquaredError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Table or vector dimensions are incorrect or inconsistent.

    Raised when label sequences don't match the cell grid, when rows
    are ragged, or when paired vectors have different lengths.
    """
    pass


class TableParseError(ValidationError):
    """
    One or more table entries failed to parse as numbers.

    Attributes:
        positions: (row, col) cursor positions of the entries that failed,
            using the editor's addressing (row 0 = column labels,
            col 0 = row labels)
    """

    def __init__(self, message: str, positions: list[tuple[int, int]] | None = None):
        super().__init__(message)
        self.positions = list(positions) if positions is not None else []


class PreconditionError(ChiSquaredError):
    """
    The computation is undefined for the given (valid) inputs.

    Raised instead of silently producing NaN, Inf or a wrapped integer.
    """
    pass


class ZeroExpectedError(PreconditionError):
    """
    An expected frequency is zero or negative.

    Attributes:
        index: Position of the offending expected value (flat index for
            vectors, (row, col) tuple for contingency tables)
        value: The offending expected value
    """

    def __init__(
        self,
        message: str,
        index: int | tuple[int, int] | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.value = value


class EmptyTableError(PreconditionError):
    """
    The table has no observations (total frequency of zero).
    """
    pass


class CoefficientOverflowError(PreconditionError):
    """
    Exact factorial/binomial-coefficient arithmetic would overflow float64.

    Attributes:
        n: Requested size
        limit: Largest size the exact path supports
    """

    def __init__(self, message: str, n: int | None = None, limit: int | None = None):
        super().__init__(message)
        self.n = n
        self.limit = limit
