from md_grid_editor.models import CellCoord, Grid, GridRow, SelectionRange


class TestSelectionRange:
    def test_normalized_bounds(self):
        sel = SelectionRange.span(3, 4, 1, 2)
        assert (sel.row_min, sel.row_max, sel.col_min, sel.col_max) == (1, 3, 2, 4)
        assert sel.height == 3
        assert sel.width == 3
        assert not sel.is_single_cell

    def test_single(self):
        sel = SelectionRange.single(2, 2)
        assert sel.start == sel.end == CellCoord(2, 2)
        assert sel.is_single_cell

    def test_iter_coords_row_major(self):
        sel = SelectionRange.span(0, 0, 1, 1)
        assert list(sel.iter_coords()) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_to_dict(self):
        sel = SelectionRange.span(0, 1, 2, 3)
        assert sel.to_dict() == {"start": {"row": 0, "col": 1}, "end": {"row": 2, "col": 3}}


class TestGrid:
    def test_create_defaults(self):
        grid = Grid.create()
        assert grid.rows == 20
        assert grid.cols == 10
        assert grid.column_widths == (128,) * 10
        assert grid.column_alignments == ("left",) * 10

    def test_create_never_empty(self):
        grid = Grid.create(0, 0)
        assert (grid.rows, grid.cols) == (1, 1)

    def test_from_data_pads_ragged_rows(self):
        grid = Grid.from_data([["a"], ["b", "c", None]])
        assert grid.data == [["a", "", ""], ["b", "c", ""]]

    def test_from_data_merged_rows_are_blank(self):
        grid = Grid.from_data([["x", "y"], ["z", "w"]], merged_rows={0: "Title"})
        assert grid.data[0] == ["", ""]
        assert grid.merged_rows == {0: "Title"}
        assert grid.is_merged(0)
        assert not grid.is_merged(1)
        assert not grid.is_merged(5)

    def test_from_data_unknown_alignment_falls_back(self):
        grid = Grid.from_data([["a", "b"]], column_alignments=["justify"])
        assert grid.column_alignments == ("left", "left")

    def test_with_cells_leaves_original(self):
        grid = Grid.from_data([["a", "b"]])
        updated = grid.with_cells({(0, 1): "z"})
        assert grid.data == [["a", "b"]]
        assert updated.data == [["a", "z"]]

    def test_data_is_a_copy(self):
        grid = Grid.from_data([["a"]])
        grid.data[0][0] = "changed"
        assert grid.cell(0, 0) == "a"

    def test_sub_grid_remaps_merged_rows(self):
        grid = Grid.from_data(
            [["a", "b", "c"], ["", "", ""], ["d", "e", "f"]],
            merged_rows={1: "Note"},
            column_alignments=["left", "center", "right"],
        )
        sub = grid.sub_grid(SelectionRange.span(1, 1, 2, 2))
        assert sub.merged_rows == {0: "Note"}
        assert sub.data == [["", ""], ["e", "f"]]
        assert sub.column_alignments == ("center", "right")

    def test_clamp_selection(self):
        grid = Grid.create(2, 2)
        sel = grid.clamp_selection(SelectionRange.span(-1, 0, 5, 9))
        assert sel == SelectionRange.span(0, 0, 1, 1)


class TestGridRow:
    def test_row_edits_are_copies(self):
        row = GridRow(("a", "b"))
        assert row.insert_cells(1, ["x"]).cells == ("a", "x", "b")
        assert row.drop_cells(0, 1).cells == ("b",)
        assert row.with_cell(0, "z").cells == ("z", "b")
        assert row.cells == ("a", "b")

    def test_merged_flag(self):
        assert GridRow(("",), "text").is_merged
        assert not GridRow.blank(2).is_merged
