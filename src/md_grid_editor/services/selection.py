"""Selection and gesture state. None of these operations enter history."""

import logging

from ..models import CellCoord, SelectionRange

logger = logging.getLogger(__name__)

DIRECTIONS = ("up", "down", "left", "right", "next", "prev")


def set_selection(context, selection):
    if selection is not None:
        selection = context.grid.clamp_selection(selection)
    context.selection = selection
    return {"selection": selection.to_dict() if selection else None}


def set_selection_start(context, row_idx, col_idx):
    return set_selection(context, SelectionRange.single(row_idx, col_idx))


def set_selection_end(context, row_idx, col_idx):
    current = context.selection
    if current is None:
        return {"selection": None}
    return set_selection(context, SelectionRange(current.start, CellCoord(row_idx, col_idx)))


def move_selection(context, direction):
    """Move to a neighbouring cell and collapse to a single-cell selection.

    Arrow directions clamp at the grid edges; ``next``/``prev`` follow
    row-major tab order and wrap between rows.
    """
    if direction not in DIRECTIONS:
        logger.warning("Unknown direction: %s", direction)
        return {"error": f"Unknown direction: {direction}"}

    grid = context.grid
    if context.selection is None:
        return set_selection(context, SelectionRange.single(0, 0))

    start = context.selection.start
    row, col = start.row, start.col

    if direction == "up":
        row = max(0, row - 1)
    elif direction == "down":
        row = min(grid.rows - 1, row + 1)
    elif direction == "left":
        col = max(0, col - 1)
    elif direction == "right":
        col = min(grid.cols - 1, col + 1)
    elif direction == "next":
        if col < grid.cols - 1:
            col += 1
        elif row < grid.rows - 1:
            row, col = row + 1, 0
    elif direction == "prev":
        if col > 0:
            col -= 1
        elif row > 0:
            row, col = row - 1, grid.cols - 1

    return set_selection(context, SelectionRange.single(row, col))


def set_is_dragging(context, is_dragging):
    context.is_dragging = bool(is_dragging)


def set_is_filling(context, is_filling):
    context.is_filling = bool(is_filling)


def set_fill_end(context, coord):
    context.fill_end = coord


def set_editing(context, editing):
    context.editing = bool(editing)
