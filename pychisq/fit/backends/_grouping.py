"""
Head/tail bin grouping for the chi-squared approximation.

Every expected count should be at least FitConfig.min_expected (5).
Low-expected categories at either end of the range are merged into the
adjacent boundary bin; the observed vector is merged with the same
boundaries so the two stay paired bin-for-bin.

A grouped vector is [head] + middle + [tail] where

    head   = sum(v[0 .. group_start])          (inclusive)
    middle = v[group_start+1 .. group_end]     (inclusive, may be empty)
    tail   = sum(v[group_end+1 ..])            (omitted when empty)
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

import numpy as np
from numpy.typing import NDArray

from pychisq.core.exceptions import DimensionError

logger = logging.getLogger(__name__)


class GroupingResult(NamedTuple):
    grouped_expected: NDArray[np.floating[Any]]
    group_start: int
    group_end: int

    @property
    def collapsed(self) -> bool:
        """True if everything was merged into a single bin."""
        return len(self.grouped_expected) < 2


def group_vector(
    values: NDArray[np.floating[Any]], group_start: int, group_end: int,
) -> NDArray[np.floating[Any]]:
    """Merge values with the given boundaries (sums, never re-derived)."""
    values = np.asarray(values, dtype=np.float64)
    parts = [[values[:group_start + 1].sum()], values[group_start + 1:group_end + 1]]
    if group_end + 1 < len(values):
        parts.append([values[group_end + 1:].sum()])
    return np.concatenate(parts).astype(np.float64)


def group_expected(
    expected: NDArray[np.floating[Any]], min_expected: float,
) -> GroupingResult:
    """
    Find head/tail boundaries and merge the expected vector.

    1. group_start is the first index with expected >= min_expected; if
       the head sum up to it is still short, one more index is absorbed.
    2. group_end mirrors this from the high end: the last index with
       expected >= min_expected, moved down one if the tail after it is
       short.
    3. Short categories bordering the head or tail group are absorbed
       into it, until the boundary categories reach min_expected.
    4. If no index reaches min_expected, or the head and tail overlap
       (group_start > group_end), everything collapses into one bin
       covering 0..len-1.

    Args:
        expected: Expected-frequency vector (1D, non-empty)
        min_expected: Grouping threshold

    Returns:
        GroupingResult(grouped_expected, group_start, group_end)
    """
    expected = np.asarray(expected, dtype=np.float64)
    if expected.ndim != 1 or len(expected) == 0:
        raise DimensionError(
            f"expected: need a non-empty 1D vector, got shape {expected.shape}"
        )
    last = len(expected) - 1

    large = np.flatnonzero(expected >= min_expected)
    if len(large) == 0:
        return _collapse(expected, "no category reaches the threshold")

    group_start = int(large[0])
    if expected[:group_start + 1].sum() < min_expected:
        group_start += 1

    group_end = int(large[-1])
    if expected[group_end + 1:].sum() < min_expected:
        group_end -= 1
    # short categories bordering either group join it
    while group_end > group_start and expected[group_end] < min_expected:
        group_end -= 1
    while group_start < group_end and expected[group_start + 1] < min_expected:
        group_start += 1

    if group_start > group_end or group_start > last:
        return _collapse(expected, "head and tail groups overlap")

    grouped = group_vector(expected, group_start, group_end)
    logger.debug(
        "grouped %d categories into %d bins (start=%d, end=%d)",
        len(expected), len(grouped), group_start, group_end,
    )
    return GroupingResult(grouped, group_start, group_end)


def _collapse(expected: NDArray[np.floating[Any]], reason: str) -> GroupingResult:
    last = len(expected) - 1
    if last > 0:
        logger.warning("collapsing %d categories into a single bin: %s", last + 1, reason)
    return GroupingResult(np.array([expected.sum()], dtype=np.float64), last, last)
