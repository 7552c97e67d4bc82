"""
curses terminal: the default KeySource, Renderer and prompts.

CursesTerminal redraws the whole frame from the state it is handed;
it keeps no cursor position between frames other than the title.
"""

from __future__ import annotations

import curses
import logging
from typing import Sequence

from pychisq.core.validation import parse_int
from pychisq.session import MODELS
from pychisq.table.keys import NONE, KeyEvent, key_from_curses
from pychisq.table.model import CursorPosition, NumericTable
from pychisq.table.render import SEPARATOR, TableLayout

logger = logging.getLogger(__name__)

FOOTER = "press [esc] to finish"
MENU_KEYS = {"1": "oe", "2": "binomial", "3": "poisson", "4": "contingency"}


class CursesTerminal:
    """KeySource + Renderer over a curses window."""

    def __init__(self, window: curses.window):
        self.window = window
        self.title = ""
        curses.curs_set(0)
        window.keypad(True)

    # --- KeySource ---

    def next_key(self) -> KeyEvent:
        try:
            ch = self.window.get_wch()
        except curses.error:
            # resize or interrupted read
            return NONE
        return key_from_curses(ch)

    # --- Renderer ---

    def _begin_frame(self) -> int:
        self.window.erase()
        self.window.addstr(0, 0, f" {self.title} ", curses.A_BOLD | curses.A_REVERSE)
        return 2

    def _end_frame(self, y: int) -> None:
        self.window.addstr(y + 1, 0, FOOTER, curses.A_DIM)
        self.window.refresh()

    def render_table(self, table: NumericTable, cursor: CursorPosition | None) -> None:
        top = self._begin_frame()
        layout = TableLayout.of(table)
        cells_x = layout.label_width + len(SEPARATOR)
        for row in range(table.rows + 1):
            y = top + row
            base = curses.A_UNDERLINE if row == 0 else curses.A_NORMAL
            label_pos = CursorPosition(row, 0)
            self.window.addstr(
                y, 0, layout.label(table.text_at(label_pos)),
                base | (curses.A_REVERSE if cursor == label_pos else 0),
            )
            self.window.addstr(y, layout.label_width, SEPARATOR, base)
            for col in range(1, table.cols + 1):
                pos = CursorPosition(row, col)
                attr = base if row == 0 else curses.A_DIM
                if cursor == pos:
                    attr = curses.A_REVERSE | curses.A_BOLD
                x = cells_x + (col - 1) * (layout.cell_width + 1)
                self.window.addstr(y, x, layout.cell(table.text_at(pos)), attr)
        self._end_frame(top + table.rows + 1)

    def render_fields(
        self,
        title: str,
        fields: Sequence[tuple[str, str]],
        active: int,
        hint: str = "",
    ) -> None:
        y = self._begin_frame()
        self.window.move(y, 0)
        self.window.addstr(f"{title}(")
        for i, (name, text) in enumerate(fields):
            if i:
                self.window.addstr(", ")
            self.window.addstr(f"{name}: ")
            attr = curses.A_REVERSE | curses.A_BOLD if i == active else curses.A_DIM
            self.window.addstr(f" {text or ' '} ", attr)
        self.window.addstr(")")
        if hint:
            self.window.addstr(f" {hint}", curses.A_DIM)
        self._end_frame(y + 1)

    # --- Prompts ---

    def ask_int(self, prompt: str) -> int:
        """Read a line until it parses as an integer."""
        curses.echo()
        curses.curs_set(1)
        try:
            while True:
                y = self._begin_frame()
                self.window.addstr(y, 0, prompt)
                self.window.move(y + 1, 0)
                self.window.refresh()
                raw = self.window.getstr(y + 1, 0, 16).decode(errors="replace")
                value = parse_int(raw.strip())
                if value is not None:
                    return value
                logger.debug("rejected integer input %r", raw)
        finally:
            curses.noecho()
            curses.curs_set(0)

    def choose_model(self) -> str:
        """Numbered menu; repeats until 1-4 is pressed."""
        self.title = "Chi-Squared Calculator"
        while True:
            y = self._begin_frame()
            for i, (key, model) in enumerate(MENU_KEYS.items()):
                self.window.addstr(y + i, 0, f" [{key}] {MODELS[model]}")
            self.window.refresh()
            try:
                ch = self.window.get_wch()
            except curses.error:
                continue
            if isinstance(ch, str) and ch in MENU_KEYS:
                return MENU_KEYS[ch]
