"""
Tests for snapshot-based undo/redo through the editor.
"""

from md_grid_editor.api import GridEditor
from md_grid_editor.models import SelectionRange


class TestUndoRedo:
    def setup_method(self):
        self.editor = GridEditor()
        self.editor.initialize_grid(2, 2)

    def test_undo_then_redo_cell_edit(self):
        before = self.editor.grid.data

        self.editor.set_cell_value(0, 0, "x")
        after = self.editor.grid.data

        self.editor.undo()
        assert self.editor.grid.data == before

        self.editor.redo()
        assert self.editor.grid.data == after

    def test_new_mutation_discards_redo(self):
        self.editor.set_cell_value(0, 0, "x")
        self.editor.undo()
        self.editor.set_cell_value(1, 1, "y")

        result = self.editor.redo()

        assert not result["changed"]
        assert self.editor.grid.cell(0, 0) == ""
        assert self.editor.grid.cell(1, 1) == "y"

    def test_undo_on_empty_history_is_noop(self):
        result = self.editor.undo()
        assert not result["changed"]

    def test_undo_restores_shape_and_merged_rows(self):
        self.editor.set_cell_value(0, 0, "a")
        self.editor.set_selection(SelectionRange.span(0, 0, 0, 1))
        self.editor.merge_cells()
        self.editor.add_column()

        self.editor.undo()
        assert self.editor.grid.cols == 2
        assert len(self.editor.grid.column_widths) == 2

        self.editor.undo()
        assert self.editor.grid.merged_rows == {}
        assert self.editor.grid.cell(0, 0) == "a"

    def test_advisory_metadata_survives_undo(self):
        self.editor.set_cell_value(0, 0, "a")
        self.editor.set_column_alignment(1, "right")

        self.editor.undo()

        assert self.editor.grid.cell(0, 0) == ""
        assert self.editor.grid.column_alignments[1] == "right"

    def test_undo_import_restores_alignments(self):
        self.editor.import_markdown("| a | b |\n|:-:|--:|\n| 1 | 2 |\n")
        self.editor.import_markdown("| c | d |\n|:-:|--:|\n")
        assert self.editor.grid.column_alignments == ("center", "right")

        self.editor.undo()
        self.editor.undo()

        assert self.editor.grid.data == [["", ""], ["", ""]]
        assert self.editor.grid.column_alignments == ("left", "left")
        assert "|:-" not in self.editor.export_markdown()

        self.editor.redo()
        assert self.editor.grid.data == [["a", "b"], ["1", "2"]]
        assert self.editor.grid.column_alignments == ("center", "right")

    def test_undo_set_data_restores_widths(self):
        self.editor.set_column_width(0, 300)
        self.editor.set_data([["x", "y"]])
        assert self.editor.grid.column_widths == (128, 128)

        self.editor.undo()

        assert self.editor.grid.column_widths == (300, 128)

    def test_selection_only_ops_do_not_record(self):
        self.editor.set_selection_start(0, 0)
        self.editor.move_selection("right")
        self.editor.set_column_width(0, 300)
        self.editor.set_is_dragging(True)

        assert not self.editor.context.history.can_undo

    def test_history_is_capped(self):
        for i in range(60):
            self.editor.set_cell_value(0, 0, str(i))

        assert len(self.editor.context.history.past) == 50

    def test_initialize_clears_history(self):
        self.editor.set_cell_value(0, 0, "x")
        self.editor.initialize_grid(3, 3)
        assert not self.editor.context.history.can_undo
        assert self.editor.grid.rows == 3
