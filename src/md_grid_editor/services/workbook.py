"""Interop between the grid and md_spreadsheet_parser workbook models.

A grid is a sequence of table blocks separated by merged text rows. Each
block maps to one ``Table``: the header row becomes ``headers``, a heading
line above the block becomes the table name and other text above it the
description. Column widths and alignments travel in the table's visual
metadata.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional

from md_spreadsheet_parser import (
    MultiTableParsingSchema,
    Sheet,
    Table,
    Workbook,
    generate_workbook_markdown,
    parse_workbook,
)

from ..codec import heading_level, strip_heading
from ..models import ALIGNMENTS, DEFAULT_COL_WIDTH, MIN_COL_WIDTH, Grid
from ..types import VisualMetadata
from .grid import update_grid

TABLE_HEADER_LEVEL = 3
SHEET_HEADER_LEVEL = 2


@dataclass
class TableBlock:
    preamble: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)

    @property
    def name(self) -> Optional[str]:
        headings = [text for text in self.preamble if heading_level(text)]
        return strip_heading(headings[-1]) if headings else None

    @property
    def description(self) -> str:
        return "\n".join(text for text in self.preamble if text and not heading_level(text))


def split_table_blocks(grid: Grid) -> List[TableBlock]:
    blocks = []
    preamble: List[str] = []
    current = None
    for entry in grid.row_entries:
        if entry.is_merged:
            current = None
            preamble.append(entry.merged_text)
            continue
        if current is None:
            current = TableBlock(preamble=preamble)
            blocks.append(current)
            preamble = []
        current.rows.append(list(entry.cells))
    return blocks


def _visual_metadata(grid: Grid) -> VisualMetadata:
    return {
        "columns": {
            str(c): {"width": grid.column_widths[c], "align": grid.column_alignments[c]}
            for c in range(grid.cols)
        }
    }


def grid_to_workbook(grid: Grid, sheet_name: str = "Sheet 1") -> Workbook:
    visual = _visual_metadata(grid)
    tables = []
    for block in split_table_blocks(grid):
        tables.append(
            Table(
                name=block.name,
                description=block.description,
                headers=block.rows[0],
                rows=block.rows[1:],
                metadata={"visual": visual},
            )
        )
    return Workbook(sheets=[Sheet(name=sheet_name, tables=tables)], metadata={})


def _column_metadata(table: Table):
    metadata = table.metadata or {}
    return metadata.get("visual", {}).get("columns", {})


def _apply_column_metadata(grid: Grid, columns) -> Grid:
    widths = list(grid.column_widths)
    alignments = list(grid.column_alignments)
    for c in range(grid.cols):
        col_meta = columns.get(str(c)) or {}
        if "width" in col_meta:
            widths[c] = max(MIN_COL_WIDTH, int(col_meta["width"]))
        if col_meta.get("align") in ALIGNMENTS:
            alignments[c] = col_meta["align"]
    return replace(grid, column_widths=tuple(widths), column_alignments=tuple(alignments))


def _table_lines(table: Table):
    """Yield ``(merged_text, cells)`` pairs for one table."""
    if table.name:
        yield "#" * TABLE_HEADER_LEVEL + " " + table.name, None
    if table.description:
        for line in table.description.splitlines():
            if line.strip():
                yield line.strip(), None
    headers = list(table.headers or [])
    if headers:
        yield None, headers
    for row in table.rows or []:
        yield None, list(row)


def _grid_from_lines(lines, columns=None, column_width=DEFAULT_COL_WIDTH) -> Grid:
    data = []
    merged_rows = {}
    for text, cells in lines:
        if text is not None:
            merged_rows[len(data)] = text
            data.append([""])
        else:
            data.append(cells)
    grid = Grid.from_data(data, merged_rows, column_width=column_width)
    if columns:
        grid = _apply_column_metadata(grid, columns)
    return grid


def grid_from_table(table: Table, column_width: int = DEFAULT_COL_WIDTH) -> Grid:
    return _grid_from_lines(_table_lines(table), _column_metadata(table), column_width)


def grid_from_workbook(workbook: Workbook, column_width: int = DEFAULT_COL_WIDTH) -> Grid:
    """Flatten every sheet's tables into one grid, in document order.

    Column metadata comes from the first table that describes each column.
    """
    lines = []
    columns = {}
    for sheet in workbook.sheets:
        if sheet.name:
            lines.append(("#" * SHEET_HEADER_LEVEL + " " + sheet.name, None))
        for table in sheet.tables:
            lines.extend(_table_lines(table))
            for key, col_meta in _column_metadata(table).items():
                columns.setdefault(key, col_meta)
    if not lines:
        return Grid.create(1, 1, column_width)
    return _grid_from_lines(lines, columns, column_width)


def build_schema(root_marker: str = "# Tables") -> MultiTableParsingSchema:
    return MultiTableParsingSchema(
        root_marker=root_marker,
        sheet_header_level=SHEET_HEADER_LEVEL,
        table_header_level=TABLE_HEADER_LEVEL,
        capture_description=True,
    )


def workbook_markdown(grid: Grid, sheet_name: str = "Sheet 1", root_marker: str = "# Tables") -> str:
    return generate_workbook_markdown(grid_to_workbook(grid, sheet_name), build_schema(root_marker))


def load_workbook_markdown(md_text: str, root_marker: str = "# Tables") -> Workbook:
    return parse_workbook(md_text, build_schema(root_marker))


def export_workbook(context, sheet_name="Sheet 1", root_marker="# Tables"):
    return workbook_markdown(context.grid, sheet_name, root_marker)


def import_workbook(context, md_text, root_marker="# Tables"):
    workbook = load_workbook_markdown(md_text, root_marker)
    width = context.config["defaultColumnWidth"]

    return update_grid(
        context,
        lambda grid: grid_from_workbook(workbook, width),
        clear_selection=True,
        restore_metadata=True,
    )
