"""
Interactive editors: the grid editor and the parameter collector.

Both are small state machines driven by a KeySource and drawn by a
Renderer. They block only on KeySource.next_key(); the terminate key
is the only way out of an editing loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from pychisq.core.exceptions import ValidationError
from pychisq.core.parameter import ModelParameter
from pychisq.core.validation import parse_count, parse_float, parse_probability
from pychisq.table.keys import MOVES, KeyEvent, KeyKind, KeySource
from pychisq.table.model import CursorPosition, NumericTable
from pychisq.table.render import Renderer

logger = logging.getLogger(__name__)

T = TypeVar('T')


class GridEditor:
    """
    Cursor-driven editor over a NumericTable.

    Mutates the table in place. The cursor starts on the first data
    cell and is clamped to [0, rows] x [0, cols]; row 0 is the column
    label row and column 0 is the row label column.
    """

    def __init__(self, table: NumericTable, keys: KeySource, renderer: Renderer):
        self.table = table
        self.keys = keys
        self.renderer = renderer
        self.cursor = CursorPosition(1, 1)

    def apply(self, key: KeyEvent) -> bool:
        """
        Apply one key event.

        Returns:
            False if the key terminates editing, True otherwise
        """
        kind = key.kind
        if kind is KeyKind.TERMINATE:
            return False
        if kind in MOVES:
            d_row, d_col = MOVES[kind]
            self.cursor = self.cursor.shifted(d_row, d_col, self.table.rows, self.table.cols)
        elif kind is KeyKind.CHAR:
            self.table.set_text_at(self.cursor, self.table.text_at(self.cursor) + key.char)
        elif kind is KeyKind.ERASE:
            text = self.table.text_at(self.cursor)
            if text:
                self.table.set_text_at(self.cursor, text[:-1])
        return True

    def edit(self) -> None:
        """Run until the terminate key, re-rendering after every event."""
        self.renderer.render_table(self.table, self.cursor)
        while True:
            key = self.keys.next_key()
            if not self.apply(key):
                logger.debug("grid editor terminated at %s", self.cursor)
                return
            self.renderer.render_table(self.table, self.cursor)


def edit_until_valid(
    table: NumericTable,
    keys: KeySource,
    renderer: Renderer,
    parse: Callable[[NumericTable], T],
) -> T:
    """
    Edit the table until parse() accepts it.

    Each pass starts a fresh editor (cursor back on the first cell) over
    the same, already-edited table. A ValidationError from parse()
    silently re-enters the editor.

    Returns:
        Whatever parse() returned for the accepted table
    """
    while True:
        GridEditor(table, keys, renderer).edit()
        try:
            return parse(table)
        except ValidationError as e:
            logger.debug("table rejected, re-entering editor: %s", e)


@dataclass
class ParameterField:
    """
    One text field of a ParameterCollector.

    Attributes:
        name: Label shown before the field ("n", "p", "λ")
        parser: Text -> value, or None if the text is invalid
        estimable: If True, empty text means ModelParameter.estimate()
            and parsed values are wrapped in ModelParameter.given()
        text: Current contents
    """
    name: str
    parser: Callable[[str], Any]
    estimable: bool = False
    text: str = ""

    def resolve(self) -> Any:
        """
        Parse the current text.

        Raises:
            ValidationError: If the text is invalid for this field
        """
        if self.estimable and self.text == "":
            return ModelParameter.estimate()
        value = self.parser(self.text)
        if value is None:
            raise ValidationError(f"{self.name}: invalid value {self.text!r}")
        return ModelParameter.given(value) if self.estimable else value


class ParameterCollector:
    """
    Single-line editor for one or two distribution parameters.

    Left/Right switch between fields; character input and erase edit
    the active field. On terminate every field is resolved; if any is
    invalid the collection restarts with the text kept as typed.
    """

    def __init__(
        self,
        title: str,
        fields: list[ParameterField],
        keys: KeySource,
        renderer: Renderer,
        hint: str = "",
    ):
        if not fields:
            raise ValueError("ParameterCollector needs at least one field")
        self.title = title
        self.fields = fields
        self.keys = keys
        self.renderer = renderer
        self.hint = hint
        self.active = 0

    def _render(self) -> None:
        self.renderer.render_fields(
            self.title,
            [(f.name, f.text) for f in self.fields],
            self.active,
            self.hint,
        )

    def apply(self, key: KeyEvent) -> bool:
        """Apply one key event. Returns False on terminate."""
        kind = key.kind
        field = self.fields[self.active]
        if kind is KeyKind.TERMINATE:
            return False
        if kind is KeyKind.LEFT:
            self.active = max(self.active - 1, 0)
        elif kind is KeyKind.RIGHT:
            self.active = min(self.active + 1, len(self.fields) - 1)
        elif kind is KeyKind.CHAR:
            field.text += key.char
        elif kind is KeyKind.ERASE:
            field.text = field.text[:-1]
        return True

    def collect(self) -> list[Any]:
        """Edit until every field resolves; return the resolved values in order."""
        while True:
            self._render()
            while self.apply(self.keys.next_key()):
                self._render()
            try:
                return [f.resolve() for f in self.fields]
            except ValidationError as e:
                logger.debug("parameters rejected, restarting collection: %s", e)


def collect_binomial(keys: KeySource, renderer: Renderer) -> tuple[int, ModelParameter]:
    """Collect X ~ B(n, p); blank p requests estimation."""
    n, p = ParameterCollector(
        "X ~ B",
        [
            ParameterField("n", parse_count),
            ParameterField("p", parse_probability, estimable=True),
        ],
        keys,
        renderer,
        hint="(leave p blank for estimation)",
    ).collect()
    return n, p


def _parse_rate(text: str) -> float | None:
    value = parse_float(text)
    if value is None or value < 0:
        return None
    return value


def collect_poisson(keys: KeySource, renderer: Renderer) -> ModelParameter:
    """Collect X ~ Po(λ); blank λ requests estimation."""
    (mean,) = ParameterCollector(
        "X ~ Po",
        [ParameterField("λ", _parse_rate, estimable=True)],
        keys,
        renderer,
        hint="(leave λ blank for estimation)",
    ).collect()
    return mean
