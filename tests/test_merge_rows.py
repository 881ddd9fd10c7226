"""
Tests for merged (plain-text) rows and their heading levels.
"""

import pytest
from md_grid_editor.api import GridEditor
from md_grid_editor.models import SelectionRange


@pytest.fixture
def editor():
    ed = GridEditor()
    ed.set_data([["a", "b"], ["c", "d"], ["e", "f"]])
    return ed


class TestMergeCells:
    def test_merge_and_heading_round_trip(self, editor):
        editor.set_selection(SelectionRange.span(0, 0, 1, 1))

        editor.merge_cells()
        assert editor.grid.merged_rows[0] == "a b"
        assert editor.grid.merged_rows[1] == "c d"

        editor.apply_merged_row_header(0, 2)
        assert editor.grid.merged_rows[0] == "## a b"
        assert editor.get_merged_row_level(0) == 2

        editor.remove_merged_row_header(0)
        assert editor.grid.merged_rows[0] == "a b"
        assert editor.get_merged_row_level(0) == 0

    def test_merge_blanks_whole_row(self, editor):
        editor.set_selection(SelectionRange.span(0, 0, 0, 0))
        editor.set_selection_end(1, 0)

        editor.merge_cells()

        assert editor.grid.merged_rows == {0: "a", 1: "c"}
        assert editor.grid.data[0] == ["", ""]
        assert editor.grid.data[1] == ["", ""]
        assert editor.selection is None

    def test_merge_skips_blank_and_trims(self, editor):
        editor.set_data([[" x ", "", "y"]])
        editor.set_selection(SelectionRange.span(0, 0, 0, 2))

        editor.merge_cells()

        assert editor.grid.merged_rows == {0: "x y"}

    def test_single_cell_merge_is_noop(self, editor):
        editor.set_selection_start(0, 0)

        result = editor.merge_cells()

        assert not result["changed"]
        assert editor.grid.merged_rows == {}
        assert not editor.is_merged_row(0)


class TestUnmergeCells:
    def test_unmerge_keeps_heading_prefix(self, editor):
        editor.set_selection(SelectionRange.span(2, 0, 2, 1))
        editor.merge_cells()
        editor.apply_merged_row_header(2, 1)

        editor.unmerge_cells(2)

        assert not editor.is_merged_row(2)
        assert editor.grid.data[2] == ["# e f", ""]

    def test_unmerge_normal_row_is_noop(self, editor):
        result = editor.unmerge_cells(0)
        assert not result["changed"]
        assert editor.grid.data[0] == ["a", "b"]


class TestHeaders:
    def test_apply_header_replaces_existing_prefix(self, editor):
        editor.set_data([["### Title"]], merged_rows={0: "### Title"})

        editor.apply_merged_row_header(0, 1)

        assert editor.grid.merged_rows[0] == "# Title"

    def test_header_on_normal_row_is_noop(self, editor):
        result = editor.apply_merged_row_header(0, 2)
        assert not result["changed"]

    def test_invalid_level_rejected(self, editor):
        editor.set_data([[""]], merged_rows={0: "Title"})
        result = editor.apply_merged_row_header(0, 4)
        assert "error" in result
        assert editor.grid.merged_rows[0] == "Title"
