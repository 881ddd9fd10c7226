import logging

from ..clipboard import parse_tsv, selection_to_tsv
from ..codec import grid_to_markdown, parse_markdown_full
from ..models import Grid
from .cells import delete_selection, paste_data
from .grid import grid_result, update_grid

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "table.md"
EXPORT_MIME_TYPE = "text/markdown"


def initialize_grid(context, rows, cols):
    """Start a new sheet. Clears merged rows, column metadata and history."""
    context.reset(max(1, rows), max(1, cols))
    logger.debug("Initialized %dx%d grid", context.grid.rows, context.grid.cols)
    return grid_result(context)


def set_data(context, data, merged_rows=None, column_alignments=None):
    """Replace the whole grid. Column widths reset to the default."""
    width = context.config["defaultColumnWidth"]

    def grid_transform(grid):
        return Grid.from_data(data, merged_rows, column_alignments, width)

    return update_grid(context, grid_transform, clear_selection=True, restore_metadata=True)


def import_markdown(context, md_text):
    parsed = parse_markdown_full(md_text)
    if not parsed.grid:
        return grid_result(context, changed=False)
    return set_data(context, parsed.grid, parsed.merged_rows, parsed.column_alignments)


def export_markdown(context, use_selection=True):
    selection = context.selection if use_selection else None
    return grid_to_markdown(context.grid, selection)


def export_file(context, use_selection=True):
    """Return ``(filename, mime_type, content)`` for a markdown download."""
    return EXPORT_FILENAME, EXPORT_MIME_TYPE, export_markdown(context, use_selection)


def copy_selection(context):
    return selection_to_tsv(context.grid, context.selection)


def cut_selection(context):
    text = selection_to_tsv(context.grid, context.selection)
    if context.selection is not None:
        delete_selection(context)
    return text


def paste_text(context, text, start_row=None, start_col=None):
    rows2d = parse_tsv(text)
    if not rows2d:
        return grid_result(context, changed=False)

    selection = context.selection
    if start_row is None:
        start_row = selection.start.row if selection else 0
    if start_col is None:
        start_col = selection.start.col if selection else 0
    return paste_data(context, rows2d, start_row, start_col)
