try:
    from typing_extensions import TypedDict
except ImportError:
    from typing import TypedDict

from typing import Dict, List, Literal, Optional

ColumnAlignment = Literal["left", "center", "right"]


# Editor Config
class GridConfig(TypedDict, total=False):
    defaultRows: int
    defaultCols: int
    defaultColumnWidth: int
    minColumnWidth: int
    historyLimit: int


# Selection
class CoordDict(TypedDict):
    row: int
    col: int


class SelectionDict(TypedDict):
    start: CoordDict
    end: CoordDict


# Numeric Stats (read-only, derived from selection)
class SelectionStats(TypedDict):
    count: int
    sum: float
    avg: float


# Column Metadata (visual metadata shape shared with md_spreadsheet_parser tables)
class ColumnMetadata(TypedDict, total=False):
    width: int
    align: ColumnAlignment


ColumnsMetadata = Dict[str, ColumnMetadata]


class VisualMetadata(TypedDict, total=False):
    columns: ColumnsMetadata


# Root State Payload
class GridState(TypedDict):
    data: List[List[str]]
    rows: int
    cols: int
    mergedRows: Dict[str, str]
    columnWidths: List[int]
    columnAlignments: List[ColumnAlignment]
    selection: Optional[SelectionDict]
    fillEnd: Optional[CoordDict]
    editing: bool
    isDragging: bool
    isFilling: bool
    canUndo: bool
    canRedo: bool
