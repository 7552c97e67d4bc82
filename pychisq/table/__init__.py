"""
Interactive table editing.

Public API:
    NumericTable          - editable text grid with row/column labels
    CursorPosition        - editor cursor (row, col)
    GridEditor            - key-driven editor over a NumericTable
    edit_until_valid()    - edit until the table parses
    ParameterCollector    - one/two-field parameter editor
    collect_binomial()    - X ~ B(n, p) with optional p estimation
    collect_poisson()     - X ~ Po(λ) with optional λ estimation
    format_table()        - plain-text rendering
"""

from pychisq.table.model import NumericTable, CursorPosition
from pychisq.table.keys import KeyKind, KeyEvent, KeySource, ScriptedKeySource, key_script
from pychisq.table.render import Renderer, RecordingRenderer, format_table
from pychisq.table.editor import (
    GridEditor, ParameterCollector, ParameterField,
    edit_until_valid, collect_binomial, collect_poisson,
)

__all__ = [
    "NumericTable",
    "CursorPosition",
    "KeyKind",
    "KeyEvent",
    "KeySource",
    "ScriptedKeySource",
    "key_script",
    "Renderer",
    "RecordingRenderer",
    "format_table",
    "GridEditor",
    "ParameterCollector",
    "ParameterField",
    "edit_until_valid",
    "collect_binomial",
    "collect_poisson",
]
