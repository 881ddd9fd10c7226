"""Grid model: immutable cell matrix, column metadata and selection.

Every structural edit builds a new ``Grid`` and swaps it in, so a retained
reference to an older grid (a history snapshot) never changes underneath.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

DEFAULT_ROWS = 20
DEFAULT_COLS = 10
DEFAULT_COL_WIDTH = 128
MIN_COL_WIDTH = 48
DEFAULT_ALIGNMENT = "left"
ALIGNMENTS = ("left", "center", "right")


@dataclass(frozen=True)
class CellCoord:
    row: int
    col: int

    def to_dict(self):
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class SelectionRange:
    """Anchor (``start``) and free (``end``) corners of a rectangle."""

    start: CellCoord
    end: CellCoord

    @classmethod
    def single(cls, row: int, col: int) -> "SelectionRange":
        coord = CellCoord(row, col)
        return cls(coord, coord)

    @classmethod
    def span(cls, row_a: int, col_a: int, row_b: int, col_b: int) -> "SelectionRange":
        return cls(CellCoord(row_a, col_a), CellCoord(row_b, col_b))

    @property
    def row_min(self) -> int:
        return min(self.start.row, self.end.row)

    @property
    def row_max(self) -> int:
        return max(self.start.row, self.end.row)

    @property
    def col_min(self) -> int:
        return min(self.start.col, self.end.col)

    @property
    def col_max(self) -> int:
        return max(self.start.col, self.end.col)

    @property
    def height(self) -> int:
        return self.row_max - self.row_min + 1

    @property
    def width(self) -> int:
        return self.col_max - self.col_min + 1

    @property
    def is_single_cell(self) -> bool:
        return self.height == 1 and self.width == 1

    def contains(self, row: int, col: int) -> bool:
        return self.row_min <= row <= self.row_max and self.col_min <= col <= self.col_max

    def iter_coords(self) -> Iterator[Tuple[int, int]]:
        for r in range(self.row_min, self.row_max + 1):
            for c in range(self.col_min, self.col_max + 1):
                yield r, c

    def to_dict(self):
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True)
class GridRow:
    """One row slot: either normal cells or a merged free-text line.

    A merged row keeps a full-width blank ``cells`` tuple so the grid stays
    rectangular; ``merged_text`` is what gets rendered and serialized.
    """

    cells: Tuple[str, ...]
    merged_text: Optional[str] = None

    @classmethod
    def blank(cls, cols: int) -> "GridRow":
        return cls(tuple("" for _ in range(cols)))

    @property
    def is_merged(self) -> bool:
        return self.merged_text is not None

    def with_cell(self, col: int, value: str) -> "GridRow":
        cells = list(self.cells)
        cells[col] = value
        return replace(self, cells=tuple(cells))

    def insert_cells(self, index: int, values: Sequence[str]) -> "GridRow":
        cells = list(self.cells)
        cells[index:index] = list(values)
        return replace(self, cells=tuple(cells))

    def drop_cells(self, start: int, count: int) -> "GridRow":
        cells = self.cells[:start] + self.cells[start + count :]
        return replace(self, cells=cells)


@dataclass(frozen=True)
class Grid:
    row_entries: Tuple[GridRow, ...]
    column_widths: Tuple[int, ...] = field(default=())
    column_alignments: Tuple[str, ...] = field(default=())

    @classmethod
    def create(
        cls,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        column_width: int = DEFAULT_COL_WIDTH,
    ) -> "Grid":
        rows = max(1, rows)
        cols = max(1, cols)
        return cls(
            row_entries=tuple(GridRow.blank(cols) for _ in range(rows)),
            column_widths=tuple(column_width for _ in range(cols)),
            column_alignments=tuple(DEFAULT_ALIGNMENT for _ in range(cols)),
        )

    @classmethod
    def from_data(
        cls,
        data: Sequence[Sequence[str]],
        merged_rows: Optional[Dict[int, str]] = None,
        column_alignments: Optional[Sequence[str]] = None,
        column_width: int = DEFAULT_COL_WIDTH,
    ) -> "Grid":
        """Build a grid from a matrix, right-padding ragged rows with blanks."""
        merged_rows = merged_rows or {}
        cols = max([len(row) for row in data] + [1])
        entries = []
        for r, row in enumerate(data):
            if r in merged_rows:
                entries.append(GridRow(GridRow.blank(cols).cells, merged_rows[r]))
                continue
            cells = [cell if cell is not None else "" for cell in row]
            cells.extend("" for _ in range(cols - len(cells)))
            entries.append(GridRow(tuple(cells)))
        if not entries:
            entries.append(GridRow.blank(cols))

        alignments = list(column_alignments or [])[:cols]
        alignments = [a if a in ALIGNMENTS else DEFAULT_ALIGNMENT for a in alignments]
        alignments.extend(DEFAULT_ALIGNMENT for _ in range(cols - len(alignments)))

        return cls(
            row_entries=tuple(entries),
            column_widths=tuple(column_width for _ in range(cols)),
            column_alignments=tuple(alignments),
        )

    @property
    def rows(self) -> int:
        return len(self.row_entries)

    @property
    def cols(self) -> int:
        if not self.row_entries:
            return 0
        return len(self.row_entries[0].cells)

    @property
    def data(self) -> List[List[str]]:
        return [list(entry.cells) for entry in self.row_entries]

    @property
    def merged_rows(self) -> Dict[int, str]:
        return {
            r: entry.merged_text
            for r, entry in enumerate(self.row_entries)
            if entry.merged_text is not None
        }

    def cell(self, row: int, col: int) -> str:
        return self.row_entries[row].cells[col]

    def is_merged(self, row: int) -> bool:
        return 0 <= row < self.rows and self.row_entries[row].is_merged

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def with_rows(self, entries) -> "Grid":
        return replace(self, row_entries=tuple(entries))

    def with_cells(self, updates: Dict[Tuple[int, int], str]) -> "Grid":
        """Return a copy with ``{(row, col): value}`` written in."""
        if not updates:
            return self
        entries = list(self.row_entries)
        by_row: Dict[int, Dict[int, str]] = {}
        for (r, c), value in updates.items():
            by_row.setdefault(r, {})[c] = value
        for r, cols in by_row.items():
            cells = list(entries[r].cells)
            for c, value in cols.items():
                cells[c] = value
            entries[r] = replace(entries[r], cells=tuple(cells))
        return self.with_rows(entries)

    def sub_grid(self, selection: SelectionRange) -> "Grid":
        """Project the selected rectangle into a new grid with local indices."""
        c0, c1 = selection.col_min, selection.col_max + 1
        entries = []
        for r in range(selection.row_min, selection.row_max + 1):
            entry = self.row_entries[r]
            if entry.is_merged:
                entries.append(GridRow(GridRow.blank(c1 - c0).cells, entry.merged_text))
            else:
                entries.append(GridRow(entry.cells[c0:c1]))
        return Grid(
            row_entries=tuple(entries),
            column_widths=self.column_widths[c0:c1],
            column_alignments=self.column_alignments[c0:c1],
        )

    def clamp_selection(self, selection: SelectionRange) -> SelectionRange:
        def clamp(value, upper):
            return max(0, min(value, upper - 1))

        return SelectionRange.span(
            clamp(selection.start.row, self.rows),
            clamp(selection.start.col, self.cols),
            clamp(selection.end.row, self.rows),
            clamp(selection.end.col, self.cols),
        )
