from dataclasses import replace

from ..codec import heading_level, strip_heading
from ..models import GridRow
from .grid import update_grid

HEADER_LEVELS = (1, 2, 3)


def is_merged_row(context, row_idx):
    return context.grid.is_merged(row_idx)


def get_merged_row_level(context, row_idx):
    if not context.grid.is_merged(row_idx):
        return 0
    return heading_level(context.grid.row_entries[row_idx].merged_text)


def merge_cells(context):
    """Collapse each selected row into one plain-text line.

    The non-blank values of the selected columns are joined with a space and
    every cell of the row is blanked. Rows that are already merged keep
    their text.
    """
    selection = context.selection

    def grid_transform(grid):
        if selection is None:
            return grid
        span = grid.clamp_selection(selection)
        if span.is_single_cell:
            return grid

        entries = list(grid.row_entries)
        for r in range(span.row_min, span.row_max + 1):
            entry = entries[r]
            if entry.is_merged:
                continue
            parts = [
                value.strip()
                for value in entry.cells[span.col_min : span.col_max + 1]
                if value and value.strip()
            ]
            entries[r] = GridRow(GridRow.blank(grid.cols).cells, " ".join(parts))
        return grid.with_rows(entries)

    return update_grid(context, grid_transform, clear_selection=True)


def unmerge_cells(context, row_idx):
    """Put the merged text back into column 0 as a normal row."""

    def grid_transform(grid):
        if not grid.is_merged(row_idx):
            return grid
        entry = grid.row_entries[row_idx]
        restored = GridRow(entry.cells).with_cell(0, entry.merged_text)
        entries = list(grid.row_entries)
        entries[row_idx] = restored
        return grid.with_rows(entries)

    return update_grid(context, grid_transform)


def _update_merged_text(context, row_idx, text_func):
    def grid_transform(grid):
        if not grid.is_merged(row_idx):
            return grid
        entries = list(grid.row_entries)
        entry = entries[row_idx]
        entries[row_idx] = replace(entry, merged_text=text_func(entry.merged_text))
        return grid.with_rows(entries)

    return update_grid(context, grid_transform)


def apply_merged_row_header(context, row_idx, level):
    if level not in HEADER_LEVELS:
        return {"error": f"Invalid header level: {level}"}
    prefix = "#" * level + " "
    return _update_merged_text(context, row_idx, lambda text: prefix + strip_heading(text))


def remove_merged_row_header(context, row_idx):
    return _update_merged_text(context, row_idx, strip_heading)
