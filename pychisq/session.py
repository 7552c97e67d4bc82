"""
Interactive session flows, one per model.

Each flow fills a NumericTable through the editors, turns the accepted
table into numbers and hands them to the matching solver. Terminal I/O
is injected: a KeySource, a Renderer and an ask_int prompt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np

from pychisq.core.config import FitConfig
from pychisq.core.validation import parse_count, parse_float
from pychisq.fit import binomial_fit, contingency_test, observed_expected, poisson_fit
from pychisq.fit.solution import FitSolution
from pychisq.table.editor import collect_binomial, collect_poisson, edit_until_valid
from pychisq.table.keys import KeySource
from pychisq.table.model import NumericTable
from pychisq.table.render import Renderer

logger = logging.getLogger(__name__)

AskInt = Callable[[str], int]

MODELS = {
    "oe": "O vs E",
    "binomial": "Binomial",
    "poisson": "Poisson",
    "contingency": "Contingency Table",
}


@dataclass
class SessionOutcome:
    """A finished fit plus the labels the user typed (None keeps defaults)."""
    solution: FitSolution
    row_labels: list[str] | None = None
    column_labels: list[str] | None = None

    @property
    def statistic(self) -> float:
        return self.solution.statistic

    def report(self) -> str:
        return self.solution.summary(self.row_labels, self.column_labels)


def _ask_size(ask_int: AskInt, prompt: str) -> int:
    while True:
        value = ask_int(prompt)
        if value >= 1:
            return value
        logger.debug("rejected size %d for %r", value, prompt)


def _parse_observed_row(
    table: NumericTable, label_parser: Callable[[str], int | None] = parse_count,
) -> tuple[np.ndarray, list[int]]:
    counts = table.parse_cells(parse_count)[0]
    categories = table.parse_column_labels(label_parser)
    return counts, categories


def _trial_count_parser(n: int) -> Callable[[str], int | None]:
    """Category labels for B(n, p) are success counts 0..n."""
    def parse(text: str) -> int | None:
        value = parse_count(text)
        return value if value is not None and value <= n else None
    return parse


def observed_expected_session(
    keys: KeySource,
    renderer: Renderer,
    ask_int: AskInt,
    config: FitConfig | None = None,
) -> SessionOutcome:
    """O vs E: the user types both rows."""
    columns = _ask_size(ask_int, "enter the number of columns:")
    table = NumericTable.blank(2, columns, row_labels=["type", "Observed", "Expected"])
    values = edit_until_valid(table, keys, renderer, lambda t: t.parse_cells(parse_float))
    solution = observed_expected(values[0], values[1], config=config)
    return SessionOutcome(solution, list(table.row_labels), list(table.column_labels))


def binomial_session(
    keys: KeySource,
    renderer: Renderer,
    ask_int: AskInt,
    config: FitConfig | None = None,
) -> SessionOutcome:
    """Binomial: collect (n, p), then observed counts for 0..n."""
    n, p = collect_binomial(keys, renderer)
    table = NumericTable.blank(
        1, n + 1,
        row_labels=["type", "Observed"],
        column_labels=[str(i) for i in range(n + 1)],
    )
    labels = _trial_count_parser(n)
    counts, categories = edit_until_valid(
        table, keys, renderer, lambda t: _parse_observed_row(t, labels),
    )
    solution = binomial_fit(counts, n, p=p, categories=categories, config=config)
    return SessionOutcome(solution)


def poisson_session(
    keys: KeySource,
    renderer: Renderer,
    ask_int: AskInt,
    config: FitConfig | None = None,
) -> SessionOutcome:
    """Poisson: collect λ, ask for the number of categories, then counts."""
    mean = collect_poisson(keys, renderer)
    columns = _ask_size(ask_int, "enter the number of columns:")
    table = NumericTable.blank(
        1, columns,
        row_labels=["type", "Observed"],
        column_labels=[str(i) for i in range(columns)],
    )
    counts, categories = edit_until_valid(table, keys, renderer, _parse_observed_row)
    solution = poisson_fit(counts, mean=mean, categories=categories, config=config)
    return SessionOutcome(solution)


def contingency_session(
    keys: KeySource,
    renderer: Renderer,
    ask_int: AskInt,
    config: FitConfig | None = None,
) -> SessionOutcome:
    """Contingency table: r x c counts with free-text labels."""
    rows = _ask_size(ask_int, "enter the number of rows:")
    columns = _ask_size(ask_int, "enter the number of columns:")
    table = NumericTable.blank(rows, columns)
    counts = edit_until_valid(table, keys, renderer, lambda t: t.parse_cells(parse_count))
    solution = contingency_test(counts, config=config)
    return SessionOutcome(solution, list(table.row_labels), list(table.column_labels))


SESSIONS: dict[str, Callable[..., SessionOutcome]] = {
    "oe": observed_expected_session,
    "binomial": binomial_session,
    "poisson": poisson_session,
    "contingency": contingency_session,
}


def run_session(
    model: str,
    keys: KeySource,
    renderer: Renderer,
    ask_int: AskInt,
    config: FitConfig | None = None,
) -> SessionOutcome:
    """Run the flow for model (one of MODELS)."""
    try:
        flow = SESSIONS[model]
    except KeyError:
        raise ValueError(f"Unknown model: {model!r}; expected one of {sorted(MODELS)}") from None
    logger.debug("starting %s session", model)
    return flow(keys, renderer, ask_int, config)
