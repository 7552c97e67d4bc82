"""
Tests for GridEditor and edit_until_valid().

Covers every transition (move, character, erase, terminate, unrecognized),
cursor clamping, rendering cadence, and the re-edit loop.
"""

import pytest
from numpy.testing import assert_allclose

from pychisq.table.editor import GridEditor, edit_until_valid
from pychisq.table.keys import (
    DOWN, ERASE, LEFT, MOVES, NONE, RIGHT, TERMINATE, UP,
    KeyEvent, ScriptedKeySource, key_script,
)
from pychisq.table.model import CursorPosition, NumericTable
from pychisq.table.render import RecordingRenderer


def _edit(table, renderer, *items):
    editor = GridEditor(table, ScriptedKeySource(key_script(*items)), renderer)
    editor.edit()
    return editor


class TestTransitions:

    def test_cursor_starts_on_first_cell(self, renderer):
        editor = GridEditor(NumericTable.blank(2, 2), ScriptedKeySource([]), renderer)
        assert editor.cursor == CursorPosition(1, 1)

    def test_typing_into_cell(self, renderer):
        table = NumericTable.blank(2, 3)
        _edit(table, renderer, "12", TERMINATE)
        assert table.cells[0][0] == "12"

    def test_navigation_and_typing(self, renderer):
        table = NumericTable.blank(2, 3)
        _edit(table, renderer, "1", RIGHT, "2", DOWN, "3", LEFT, "4", TERMINATE)
        assert table.cells == [["1", "2", ""], ["4", "3", ""]]

    def test_column_label(self, renderer):
        table = NumericTable.blank(1, 2)
        _edit(table, renderer, UP, ERASE, ERASE, ERASE, "A", TERMINATE)
        assert table.column_labels == ["A", "---"]

    def test_row_label(self, renderer):
        table = NumericTable.blank(2, 2)
        _edit(table, renderer, LEFT, "x", TERMINATE)
        assert table.row_labels == ["---", "---x", "---"]

    def test_corner_label(self, renderer):
        table = NumericTable.blank(1, 1, row_labels=["", "Observed"])
        _edit(table, renderer, UP, LEFT, "type", TERMINATE)
        assert table.row_labels[0] == "type"

    def test_erase_removes_last_character(self, renderer):
        table = NumericTable.blank(1, 1)
        _edit(table, renderer, "123", ERASE, TERMINATE)
        assert table.cells[0][0] == "12"

    def test_erase_is_per_character(self, renderer):
        table = NumericTable.blank(1, 1)
        _edit(table, renderer, "aλ", ERASE, TERMINATE)
        assert table.cells[0][0] == "a"

    def test_erase_on_empty_is_noop(self, renderer):
        table = NumericTable.blank(1, 1)
        _edit(table, renderer, ERASE, ERASE, TERMINATE)
        assert table.cells[0][0] == ""

    def test_unrecognized_is_noop(self, renderer):
        table = NumericTable.blank(1, 1)
        editor = _edit(table, renderer, NONE, NONE, TERMINATE)
        assert table.cells[0][0] == ""
        assert editor.cursor == CursorPosition(1, 1)

    def test_apply_returns_false_only_on_terminate(self, renderer):
        editor = GridEditor(NumericTable.blank(1, 1), ScriptedKeySource([]), renderer)
        for key in [UP, DOWN, LEFT, RIGHT, ERASE, NONE, KeyEvent.of_char("1")]:
            assert editor.apply(key) is True
        assert editor.apply(TERMINATE) is False

    def test_keys_after_terminate_are_not_consumed(self, renderer):
        source = ScriptedKeySource(key_script("1", TERMINATE, "2"))
        GridEditor(NumericTable.blank(1, 1), source, renderer).edit()
        assert source.consumed == 2

    def test_unterminated_script_does_not_hang(self, renderer):
        with pytest.raises(EOFError):
            _edit(NumericTable.blank(1, 1), renderer, "1")


class TestClamping:

    def test_clamped_at_origin(self, renderer):
        editor = _edit(NumericTable.blank(2, 3), renderer, *[UP] * 5, *[LEFT] * 5, TERMINATE)
        assert editor.cursor == CursorPosition(0, 0)

    def test_clamped_at_far_corner(self, renderer):
        editor = _edit(NumericTable.blank(2, 3), renderer, *[DOWN] * 5, *[RIGHT] * 5, TERMINATE)
        assert editor.cursor == CursorPosition(2, 3)

    def test_random_walks_stay_in_bounds(self, rng):
        moves = list(MOVES)
        for rows, cols in [(1, 1), (2, 3), (4, 2)]:
            renderer = RecordingRenderer()
            table = NumericTable.blank(rows, cols)
            keys = [KeyEvent(moves[i]) for i in rng.integers(0, 4, size=200)]
            _edit(table, renderer, *keys, TERMINATE)
            for cursor in renderer.cursors:
                assert 0 <= cursor.row <= rows
                assert 0 <= cursor.col <= cols

    def test_text_length_changes_by_one(self, renderer, rng):
        table = NumericTable.blank(1, 1)
        editor = GridEditor(table, ScriptedKeySource([]), renderer)
        for choice in rng.integers(0, 2, size=200):
            before = len(table.cells[0][0])
            if choice:
                editor.apply(KeyEvent.of_char("9"))
                assert len(table.cells[0][0]) == before + 1
            else:
                editor.apply(ERASE)
                assert len(table.cells[0][0]) == max(before - 1, 0)


class TestRendering:

    def test_renders_initially_and_after_each_event(self, renderer):
        _edit(NumericTable.blank(1, 2), renderer, "ab", RIGHT, TERMINATE)
        assert len(renderer.frames) == 4
        assert renderer.cursors == [
            CursorPosition(1, 1), CursorPosition(1, 1),
            CursorPosition(1, 1), CursorPosition(1, 2),
        ]

    def test_frame_shows_state_after_event(self, renderer):
        _edit(NumericTable.blank(1, 1), renderer, "7", TERMINATE)
        assert renderer.frames[0]["table"].cells[0][0] == ""
        assert renderer.frames[1]["table"].cells[0][0] == "7"


class TestEditUntilValid:

    def test_valid_first_time(self, renderer):
        table = NumericTable.blank(1, 2)
        keys = ScriptedKeySource(key_script("1", RIGHT, "2", TERMINATE))
        values = edit_until_valid(table, keys, renderer, lambda t: t.parse_cells())
        assert_allclose(values, [[1.0, 2.0]])

    def test_invalid_reenters_with_cursor_reset(self, renderer):
        table = NumericTable.blank(1, 2)
        keys = ScriptedKeySource(key_script(
            "1", TERMINATE,             # second cell still empty: rejected
            RIGHT, "2", TERMINATE,      # editor restarts at (1, 1)
        ))
        values = edit_until_valid(table, keys, renderer, lambda t: t.parse_cells())
        assert_allclose(values, [[1.0, 2.0]])
        # first frame of the second pass is back on the first cell
        assert renderer.cursors[2] == CursorPosition(1, 1)

    def test_non_validation_errors_propagate(self, renderer):
        def parse(table):
            raise RuntimeError("boom")

        keys = ScriptedKeySource([TERMINATE])
        with pytest.raises(RuntimeError):
            edit_until_valid(NumericTable.blank(1, 1), keys, renderer, parse)
