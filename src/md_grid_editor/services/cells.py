from dataclasses import replace

from ..models import DEFAULT_ALIGNMENT, GridRow, SelectionRange
from .grid import require_cell, update_grid

FORMAT_MARKERS = {
    "bold": "**",
    "italic": "_",
    "strikethrough": "~~",
    "code": "`",
}


def is_wrapped(text, marker):
    return (
        len(text) >= 2 * len(marker) and text.startswith(marker) and text.endswith(marker)
    )


def toggle_marker(text, marker, unwrap):
    """Wrap ``text`` in ``marker`` or strip it.

    Wrapping an already-wrapped value and unwrapping a plain one both return
    the text unchanged.
    """
    if unwrap:
        if is_wrapped(text, marker):
            return text[len(marker) : len(text) - len(marker)]
        return text
    if is_wrapped(text, marker):
        return text
    return f"{marker}{text}{marker}"


def set_cell_value(context, row_idx, col_idx, value):
    value = value if value is not None else ""

    def grid_transform(grid):
        require_cell(grid, row_idx, col_idx)
        return grid.with_cells({(row_idx, col_idx): value})

    return update_grid(context, grid_transform)


def fill_range(context, target):
    """Tile the selected pattern across ``target``.

    Values are read from the pre-fill grid, so a target overlapping the
    source still repeats the original pattern. A target reaching outside
    the grid is rejected.
    """
    selection = context.selection
    if selection is None:
        return update_grid(context, lambda grid: grid)

    source = context.grid.clamp_selection(selection)

    def grid_transform(grid):
        require_cell(grid, target.row_min, target.col_min)
        require_cell(grid, target.row_max, target.col_max)
        updates = {}
        for r, c in target.iter_coords():
            src_r = source.row_min + (r - source.row_min) % source.height
            src_c = source.col_min + (c - source.col_min) % source.width
            updates[(r, c)] = grid.cell(src_r, src_c)
        return grid.with_cells(updates)

    return update_grid(context, grid_transform, selection=target)


def apply_formatting(context, kind):
    """Toggle a markdown emphasis marker over the selected cells.

    If every non-empty cell is already wrapped they are all unwrapped;
    otherwise the unwrapped ones are wrapped. Empty cells are ignored.
    """
    if kind not in FORMAT_MARKERS:
        return {"error": f"Unknown format: {kind}"}
    marker = FORMAT_MARKERS[kind]
    selection = context.selection

    def grid_transform(grid):
        if selection is None:
            return grid
        coords = [
            (r, c) for r, c in grid.clamp_selection(selection).iter_coords() if grid.cell(r, c)
        ]
        unwrap = all(is_wrapped(grid.cell(r, c), marker) for r, c in coords)
        return grid.with_cells(
            {(r, c): toggle_marker(grid.cell(r, c), marker, unwrap) for r, c in coords}
        )

    return update_grid(context, grid_transform)


def delete_selection(context):
    selection = context.selection

    def grid_transform(grid):
        if selection is None:
            return grid
        return grid.with_cells(
            {coord: "" for coord in grid.clamp_selection(selection).iter_coords()}
        )

    return update_grid(context, grid_transform)


def paste_data(context, rows2d, start_row, start_col):
    """Write a block of values at ``(start_row, start_col)``.

    The grid grows by appending blank rows/columns when the block does not
    fit. Shorter pasted rows leave the cells to their right untouched.
    """
    paste_rows = len(rows2d)
    paste_cols = max([len(row) for row in rows2d] + [0])
    if paste_rows == 0 or paste_cols == 0:
        return update_grid(context, lambda grid: grid)

    width = context.config["defaultColumnWidth"]
    selection = SelectionRange.span(
        start_row, start_col, start_row + paste_rows - 1, start_col + paste_cols - 1
    )

    def grid_transform(grid):
        if start_row < 0 or start_col < 0:
            raise IndexError(f"Invalid paste origin: ({start_row}, {start_col})")

        needed_rows = start_row + paste_rows
        needed_cols = start_col + paste_cols

        if needed_cols > grid.cols:
            extra = needed_cols - grid.cols
            grid = replace(
                grid,
                row_entries=tuple(
                    entry.insert_cells(len(entry.cells), [""] * extra)
                    for entry in grid.row_entries
                ),
                column_widths=grid.column_widths + (width,) * extra,
                column_alignments=grid.column_alignments + (DEFAULT_ALIGNMENT,) * extra,
            )

        if needed_rows > grid.rows:
            extra = needed_rows - grid.rows
            grid = grid.with_rows(
                grid.row_entries + tuple(GridRow.blank(grid.cols) for _ in range(extra))
            )

        updates = {}
        for r, row in enumerate(rows2d):
            for c, value in enumerate(row):
                updates[(start_row + r, start_col + c)] = value if value is not None else ""
        return grid.with_cells(updates)

    return update_grid(context, grid_transform, selection=selection)
