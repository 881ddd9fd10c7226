import logging
from dataclasses import replace

logger = logging.getLogger(__name__)


def grid_result(context, changed=True):
    grid = context.grid
    return {"changed": changed, "rows": grid.rows, "cols": grid.cols}


def require_row(grid, row_idx):
    if row_idx < 0 or row_idx >= grid.rows:
        raise IndexError(f"Invalid row index: {row_idx}")


def require_col(grid, col_idx):
    if col_idx < 0 or col_idx >= grid.cols:
        raise IndexError(f"Invalid column index: {col_idx}")


def require_cell(grid, row_idx, col_idx):
    require_row(grid, row_idx)
    require_col(grid, col_idx)


def insertion_index(context, index, axis):
    """Insert position for a new row/column.

    Defaults to just after the selection end, else the end of the grid. An
    explicit index must lie in ``0..count``.
    """
    grid = context.grid
    count = grid.rows if axis == "row" else grid.cols
    if index is None:
        selection = context.selection
        index = getattr(selection.end, axis) + 1 if selection else count
        return max(0, min(index, count))
    if index < 0 or index > count:
        label = "row" if axis == "row" else "column"
        raise IndexError(f"Invalid {label} insert index: {index}")
    return index


def update_grid(
    context,
    transform_func,
    selection=None,
    clear_selection=False,
    record_history=True,
    restore_metadata=False,
):
    """Run ``transform_func(grid) -> grid`` and swap the result in.

    Returning the same grid object means the operation was a no-op: nothing
    is recorded and the selection is left alone. Out-of-range indices are
    reported as ``{"error": ...}`` with the state unchanged.

    Pass ``restore_metadata=True`` when the transform replaces column widths
    and alignments wholesale, so undo brings the old ones back.
    """
    current = context.grid
    try:
        new_grid = transform_func(current)
    except (IndexError, ValueError) as e:
        logger.warning("Rejected grid update: %s", e)
        return {"error": str(e)}

    if new_grid is current:
        return grid_result(context, changed=False)

    if record_history:
        context.history.push(current, restore_metadata)
    context.update_state(grid=new_grid, selection=selection, clear_selection=clear_selection)
    logger.debug("Grid updated: %dx%d", new_grid.rows, new_grid.cols)
    return grid_result(context)


def _restore(context, entry):
    current = context.grid
    snapshot = entry.grid
    # Widths and alignments are advisory and never recorded on their own,
    # so keep the live values unless the edit replaced them or the column
    # count changed.
    if not entry.restore_metadata and snapshot.cols == current.cols:
        snapshot = replace(
            snapshot,
            column_widths=current.column_widths,
            column_alignments=current.column_alignments,
        )
    selection = context.selection
    clear_selection = selection is not None and not (
        snapshot.in_bounds(selection.row_max, selection.col_max)
    )
    context.update_state(grid=snapshot, clear_selection=clear_selection)


def undo(context):
    entry = context.history.undo(context.grid)
    if entry is None:
        return grid_result(context, changed=False)
    _restore(context, entry)
    return grid_result(context)


def redo(context):
    entry = context.history.redo(context.grid)
    if entry is None:
        return grid_result(context, changed=False)
    _restore(context, entry)
    return grid_result(context)
