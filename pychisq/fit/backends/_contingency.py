"""
Chi-squared test of independence for a two-way contingency table.

No bin grouping is applied; small expected cells only produce a warning.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pychisq.core.exceptions import EmptyTableError
from pychisq.fit._common import FitParams, SMALL_EXPECTED_WARNING
from pychisq.fit.backends._statistic import chi_squared_statistic

if TYPE_CHECKING:
    from pychisq.fit.design import FitDesign


def contingency(design: FitDesign) -> tuple[FitParams, list[str]]:
    """Expected cells R_i·C_j/T and the cell-by-cell statistic."""
    table = design.table.copy()
    warnings_list: list[str] = []

    row_totals = table.sum(axis=1)
    col_totals = table.sum(axis=0)
    total = float(table.sum())
    if total <= 0:
        raise EmptyTableError(
            f"contingency table has no observations (grand total {total:g})"
        )

    expected = np.outer(row_totals, col_totals) / total
    statistic = chi_squared_statistic(table, expected)

    if np.any(expected < design.config.min_expected):
        warnings_list.append(SMALL_EXPECTED_WARNING)

    return FitParams(
        statistic=statistic,
        observed=table,
        expected=expected,
        model="contingency",
        method="Chi-squared test of independence",
        parameter=None,
        group_start=0,
        group_end=table.shape[1] - 1,
        extras={
            "row_totals": row_totals,
            "col_totals": col_totals,
            "grand_total": total,
        },
    ), warnings_list
