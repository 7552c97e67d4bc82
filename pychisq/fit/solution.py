"""
Fit solution types.

FitSolution wraps Result[FitParams] and produces the reported output:
the statistic plus the grouped table that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pychisq.core.result import Result
from pychisq.fit._common import FitParams
from pychisq.table.model import NumericTable
from pychisq.table.render import format_table

if TYPE_CHECKING:
    from pychisq.fit.design import FitDesign


@dataclass
class FitSolution:
    """
    User-facing chi-squared fit results.

    All FitParams fields are available as properties; display_table()
    and summary() give the reported form.
    """
    _result: Result[FitParams]
    _design: 'FitDesign | None'

    @property
    def statistic(self) -> float:
        """Pearson chi-squared statistic."""
        return self._result.params.statistic

    @property
    def observed(self) -> NDArray[np.floating[Any]]:
        """Observed counts as compared (grouped where grouping applies)."""
        return self._result.params.observed

    @property
    def expected(self) -> NDArray[np.floating[Any]]:
        """Expected counts paired with observed."""
        return self._result.params.expected

    @property
    def model(self) -> str:
        return self._result.params.model

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def parameter(self) -> dict[str, float] | None:
        """Fitted parameters, e.g. {'n': 10.0, 'p': 0.31}."""
        return self._result.params.parameter

    @property
    def group_start(self) -> int:
        return self._result.params.group_start

    @property
    def group_end(self) -> int:
        return self._result.params.group_end

    @property
    def extras(self) -> dict[str, Any] | None:
        return self._result.params.extras

    @property
    def n_bins(self) -> int:
        return int(self._result.params.expected.size)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def model_label(self) -> str:
        """Corner label for the display table, e.g. 'X ~ B(10, 0.3)'."""
        p = self.parameter
        if self.model == "binomial":
            return f"X ~ B({p['n']:g}, {p['p']:.4g})"
        if self.model == "poisson":
            return f"X ~ Po({p['lambda']:.4g})"
        return "type"

    def bin_labels(self) -> list[str]:
        """Column labels for grouped bins: '<= a', a+1, ..., '>= b'."""
        k = self.info['n_categories']
        start = self.group_start
        n_bins = self.n_bins
        if n_bins == 1 and k > 1:
            return ["all"]
        labels = [str(start + i) for i in range(n_bins)]
        if start > 0:
            labels[0] = f"<= {labels[0]}"
        has_tail = self.group_end + 1 < k
        # the last Poisson category is open-ended; a binomial tail is only
        # a range when it absorbed more than one category
        if has_tail and (self.model == "poisson" or self.group_end + 1 < k - 1):
            labels[-1] = f">= {labels[-1]}"
        return labels

    def display_table(
        self,
        row_labels: Sequence[str] | None = None,
        column_labels: Sequence[str] | None = None,
    ) -> NumericTable:
        """
        Table of the compared values.

        For vector models: rows Observed/Expected, one column per bin.
        For contingency tables: each cell reads "o, e".

        Args:
            row_labels: Override (corner first). Defaults depend on model.
            column_labels: Override. Defaults to bin labels or 1..c.
        """
        if self.model == "contingency":
            observed = self.observed
            nrow, ncol = observed.shape
            cells = [
                [f"{observed[i, j]:g}, {self.expected[i, j]:.2f}" for j in range(ncol)]
                for i in range(nrow)
            ]
            return NumericTable(
                cells=cells,
                row_labels=list(row_labels) if row_labels is not None
                else ["type"] + [str(i + 1) for i in range(nrow)],
                column_labels=list(column_labels) if column_labels is not None
                else [str(j + 1) for j in range(ncol)],
            )

        if self.model == "observed_expected":
            default_columns = [str(i + 1) for i in range(self.n_bins)]
        else:
            default_columns = self.bin_labels()
        return NumericTable(
            cells=[
                [f"{v:g}" for v in self.observed],
                [f"{v:.6g}" for v in self.expected],
            ],
            row_labels=list(row_labels) if row_labels is not None
            else [self.model_label(), "Observed", "Expected"],
            column_labels=list(column_labels) if column_labels is not None
            else default_columns,
        )

    def summary(
        self,
        row_labels: Sequence[str] | None = None,
        column_labels: Sequence[str] | None = None,
    ) -> str:
        """
        Report block:

                Binomial goodness-of-fit test

            X ~ B(2, 0.5) │ 0     1     2
            ...

            X² = 1.2
        """
        lines = [f"\t{self.method}", ""]
        if self.extras and self.extras.get("estimated"):
            lines.append("(parameter estimated from the data)")
        lines.append(format_table(self.display_table(row_labels, column_labels)))
        lines.append("")
        lines.append(f"X² = {self.statistic:.10g}")
        for w in self.warnings:
            lines.append(f"warning: {w}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FitSolution(model={self.model!r}, statistic={self.statistic:.4g}, "
            f"bins={self.n_bins})"
        )
