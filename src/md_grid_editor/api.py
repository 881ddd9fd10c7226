from .context import GridContext
from .services import cells as cells_service
from .services import columns as columns_service
from .services import document as document_service
from .services import grid as grid_service
from .services import merge as merge_service
from .services import rows as rows_service
from .services import selection as selection_service
from .services import workbook as workbook_service
from .stats import selection_stats

__all__ = ["GridEditor"]


class GridEditor:
    """The only mutation entry point for a grid.

    Each editor owns its own ``GridContext``; callers hold the editor
    instead of reaching into shared state.
    """

    def __init__(self, config_json=None, context=None):
        self.context = context if context is not None else GridContext(config_json)

    # State

    @property
    def grid(self):
        return self.context.grid

    @property
    def selection(self):
        return self.context.selection

    def get_state(self):
        return self.context.get_state()

    def get_selection_stats(self):
        return selection_stats(self.context.grid, self.context.selection)

    # Document

    def initialize_grid(self, rows, cols):
        return document_service.initialize_grid(self.context, rows, cols)

    def set_data(self, data, merged_rows=None, column_alignments=None):
        return document_service.set_data(self.context, data, merged_rows, column_alignments)

    def import_markdown(self, md_text):
        return document_service.import_markdown(self.context, md_text)

    def export_markdown(self, use_selection=True):
        return document_service.export_markdown(self.context, use_selection)

    def export_file(self, use_selection=True):
        return document_service.export_file(self.context, use_selection)

    def import_workbook(self, md_text, root_marker="# Tables"):
        return workbook_service.import_workbook(self.context, md_text, root_marker)

    def export_workbook(self, sheet_name="Sheet 1", root_marker="# Tables"):
        return workbook_service.export_workbook(self.context, sheet_name, root_marker)

    # Clipboard

    def copy_selection(self):
        return document_service.copy_selection(self.context)

    def cut_selection(self):
        return document_service.cut_selection(self.context)

    def paste_text(self, text, start_row=None, start_col=None):
        return document_service.paste_text(self.context, text, start_row, start_col)

    def paste_data(self, rows2d, start_row, start_col):
        return cells_service.paste_data(self.context, rows2d, start_row, start_col)

    # Cells

    def set_cell_value(self, row_idx, col_idx, value):
        return cells_service.set_cell_value(self.context, row_idx, col_idx, value)

    def fill_range(self, target):
        return cells_service.fill_range(self.context, target)

    def apply_formatting(self, kind):
        return cells_service.apply_formatting(self.context, kind)

    def delete_selection(self):
        return cells_service.delete_selection(self.context)

    # Rows / Columns

    def add_row(self, row_idx=None):
        return rows_service.add_row(self.context, row_idx)

    def delete_row(self, row_idx):
        return rows_service.delete_row(self.context, row_idx)

    def duplicate_row(self, row_idx):
        return rows_service.duplicate_row(self.context, row_idx)

    def add_column(self, col_idx=None):
        return columns_service.add_column(self.context, col_idx)

    def delete_column(self, col_idx):
        return columns_service.delete_column(self.context, col_idx)

    def duplicate_column(self, col_idx):
        return columns_service.duplicate_column(self.context, col_idx)

    def set_column_width(self, col_idx, width):
        return columns_service.set_column_width(self.context, col_idx, width)

    def set_column_alignment(self, col_idx, alignment):
        return columns_service.set_column_alignment(self.context, col_idx, alignment)

    # Merged rows

    def merge_cells(self):
        return merge_service.merge_cells(self.context)

    def unmerge_cells(self, row_idx):
        return merge_service.unmerge_cells(self.context, row_idx)

    def is_merged_row(self, row_idx):
        return merge_service.is_merged_row(self.context, row_idx)

    def get_merged_row_level(self, row_idx):
        return merge_service.get_merged_row_level(self.context, row_idx)

    def apply_merged_row_header(self, row_idx, level):
        return merge_service.apply_merged_row_header(self.context, row_idx, level)

    def remove_merged_row_header(self, row_idx):
        return merge_service.remove_merged_row_header(self.context, row_idx)

    # Selection

    def set_selection(self, selection):
        return selection_service.set_selection(self.context, selection)

    def set_selection_start(self, row_idx, col_idx):
        return selection_service.set_selection_start(self.context, row_idx, col_idx)

    def set_selection_end(self, row_idx, col_idx):
        return selection_service.set_selection_end(self.context, row_idx, col_idx)

    def move_selection(self, direction):
        return selection_service.move_selection(self.context, direction)

    def set_is_dragging(self, is_dragging):
        return selection_service.set_is_dragging(self.context, is_dragging)

    def set_is_filling(self, is_filling):
        return selection_service.set_is_filling(self.context, is_filling)

    def set_fill_end(self, coord):
        return selection_service.set_fill_end(self.context, coord)

    def set_editing(self, editing):
        return selection_service.set_editing(self.context, editing)

    # History

    def undo(self):
        return grid_service.undo(self.context)

    def redo(self):
        return grid_service.redo(self.context)
