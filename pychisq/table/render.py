"""
Renderer protocol and plain-text table formatting.

The core never touches the terminal directly. Each frame, the editors
hand the full state to a Renderer, which is responsible for drawing it
(and for any diffing or cursor positioning that requires).
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Protocol, Sequence, runtime_checkable

from pychisq.table.model import CursorPosition, NumericTable

SEPARATOR = " │ "


@runtime_checkable
class Renderer(Protocol):
    """Draws editor state. Purely a side effect."""

    def render_table(self, table: NumericTable, cursor: CursorPosition | None) -> None:
        """Draw the table, highlighting the cell under cursor (if any)."""
        ...

    def render_fields(
        self,
        title: str,
        fields: Sequence[tuple[str, str]],
        active: int,
        hint: str = "",
    ) -> None:
        """Draw a parameter line: title(name: text, ...) with fields[active] highlighted."""
        ...


@dataclass(frozen=True)
class TableLayout:
    """Column widths shared by every renderer."""
    label_width: int
    cell_width: int

    @classmethod
    def of(cls, table: NumericTable) -> TableLayout:
        label_width = max(1, max(len(label) for label in table.row_labels))
        cell_width = max(
            1,
            max(len(text) for row in table.cells for text in row),
            max(len(label) for label in table.column_labels),
        )
        return cls(label_width=label_width, cell_width=cell_width)

    def label(self, text: str) -> str:
        return text.ljust(self.label_width)

    def cell(self, text: str) -> str:
        return text.ljust(self.cell_width)


def format_table(table: NumericTable) -> str:
    """
    Render a table as plain text.

        type     │ 0     1     2
        ─────────┼──────────────────
        Observed │ 10    20    30
    """
    layout = TableLayout.of(table)
    header = layout.label(table.row_labels[0]) + SEPARATOR + " ".join(
        layout.cell(label) for label in table.column_labels
    )
    rule = "─" * (layout.label_width + 1) + "┼" + "─" * ((layout.cell_width + 1) * table.cols)
    lines = [header.rstrip(), rule]
    for label, row in zip(table.row_labels[1:], table.cells):
        line = layout.label(label) + SEPARATOR + " ".join(layout.cell(t) for t in row)
        lines.append(line.rstrip())
    return "\n".join(lines)


class RecordingRenderer:
    """
    Renderer that stores a snapshot of every frame.

    Used by tests and for replaying a session without a terminal.
    """

    def __init__(self) -> None:
        self.frames: list[dict[str, Any]] = []

    def render_table(self, table: NumericTable, cursor: CursorPosition | None) -> None:
        self.frames.append({
            "kind": "table",
            "table": copy.deepcopy(table),
            "cursor": cursor,
        })

    def render_fields(
        self,
        title: str,
        fields: Sequence[tuple[str, str]],
        active: int,
        hint: str = "",
    ) -> None:
        self.frames.append({
            "kind": "fields",
            "title": title,
            "fields": list(fields),
            "active": active,
            "hint": hint,
        })

    @property
    def cursors(self) -> list[CursorPosition | None]:
        return [f["cursor"] for f in self.frames if f["kind"] == "table"]

    @property
    def last(self) -> dict[str, Any]:
        return self.frames[-1]
