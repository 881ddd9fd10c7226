from dataclasses import replace

from ..models import ALIGNMENTS, DEFAULT_ALIGNMENT
from .grid import insertion_index, require_col, update_grid


def _insert_column(grid, index, values, width, alignment):
    entries = [
        entry.insert_cells(index, [values[r]]) for r, entry in enumerate(grid.row_entries)
    ]
    widths = list(grid.column_widths)
    widths.insert(index, width)
    alignments = list(grid.column_alignments)
    alignments.insert(index, alignment)
    return replace(
        grid,
        row_entries=tuple(entries),
        column_widths=tuple(widths),
        column_alignments=tuple(alignments),
    )


def add_column(context, col_idx=None):
    width = context.config["defaultColumnWidth"]

    def grid_transform(grid):
        insert_pos = insertion_index(context, col_idx, axis="col")
        blanks = [""] * grid.rows
        return _insert_column(grid, insert_pos, blanks, width, DEFAULT_ALIGNMENT)

    return update_grid(context, grid_transform)


def delete_column(context, col_idx):
    """Delete one column, or every selected column when ``col_idx == -1``."""
    selection = context.selection

    def grid_transform(grid):
        if col_idx == -1:
            if selection is None:
                return grid
            span = grid.clamp_selection(selection)
            start, count = span.col_min, span.width
        else:
            require_col(grid, col_idx)
            start, count = col_idx, 1

        if grid.cols - count < 1:
            return grid

        return replace(
            grid,
            row_entries=tuple(entry.drop_cells(start, count) for entry in grid.row_entries),
            column_widths=grid.column_widths[:start] + grid.column_widths[start + count :],
            column_alignments=grid.column_alignments[:start]
            + grid.column_alignments[start + count :],
        )

    return update_grid(context, grid_transform, clear_selection=True)


def duplicate_column(context, col_idx):
    def grid_transform(grid):
        require_col(grid, col_idx)
        values = [entry.cells[col_idx] for entry in grid.row_entries]
        return _insert_column(
            grid,
            col_idx + 1,
            values,
            grid.column_widths[col_idx],
            grid.column_alignments[col_idx],
        )

    return update_grid(context, grid_transform)


def set_column_width(context, col_idx, width):
    min_width = context.config["minColumnWidth"]

    def grid_transform(grid):
        require_col(grid, col_idx)
        widths = list(grid.column_widths)
        widths[col_idx] = max(min_width, int(width))
        return replace(grid, column_widths=tuple(widths))

    return update_grid(context, grid_transform, record_history=False)


def set_column_alignment(context, col_idx, alignment):
    def grid_transform(grid):
        require_col(grid, col_idx)
        if alignment not in ALIGNMENTS:
            raise ValueError(f"Invalid alignment: {alignment}")
        alignments = list(grid.column_alignments)
        alignments[col_idx] = alignment
        return replace(grid, column_alignments=tuple(alignments))

    return update_grid(context, grid_transform, record_history=False)
