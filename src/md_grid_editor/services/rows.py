from ..models import GridRow
from .grid import insertion_index, require_row, update_grid


def add_row(context, row_idx=None):
    def grid_transform(grid):
        insert_pos = insertion_index(context, row_idx, axis="row")
        entries = list(grid.row_entries)
        entries.insert(insert_pos, GridRow.blank(grid.cols))
        return grid.with_rows(entries)

    return update_grid(context, grid_transform)


def delete_row(context, row_idx):
    """Delete one row, or every selected row when ``row_idx == -1``."""
    selection = context.selection

    def grid_transform(grid):
        if row_idx == -1:
            if selection is None:
                return grid
            span = grid.clamp_selection(selection)
            start, count = span.row_min, span.height
        else:
            require_row(grid, row_idx)
            start, count = row_idx, 1

        # Never leave the grid without rows
        if grid.rows - count < 1:
            return grid

        entries = grid.row_entries[:start] + grid.row_entries[start + count :]
        return grid.with_rows(entries)

    return update_grid(context, grid_transform, clear_selection=True)


def duplicate_row(context, row_idx):
    def grid_transform(grid):
        require_row(grid, row_idx)
        entries = list(grid.row_entries)
        # Rows are immutable, so sharing the entry is a safe copy
        entries.insert(row_idx + 1, entries[row_idx])
        return grid.with_rows(entries)

    return update_grid(context, grid_transform)
