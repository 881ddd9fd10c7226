"""Conversion between the grid model and pipe-table markdown.

Only GFM pipe tables and single-line plain-text/heading lines are modeled.
A plain-text line is stored as a merged row so row numbering is identical on
both sides of the conversion.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .models import Grid, SelectionRange

MIN_MARKDOWN_WIDTH = 3

_SEPARATOR_RE = re.compile(r"^[\s|\-:]+$")
_UNESCAPED_PIPE_RE = re.compile(r"(?<!\\)\|")
_HEADING_RE = re.compile(r"^(#{1,6})\s*")


@dataclass
class ParsedMarkdown:
    grid: List[List[str]]
    merged_rows: Dict[int, str] = field(default_factory=dict)
    column_alignments: List[str] = field(default_factory=list)
    cols: int = 1

    def to_grid(self) -> Grid:
        return Grid.from_data(self.grid, self.merged_rows, self.column_alignments)


def escape_pipe(value: str) -> str:
    """Escape pipe characters so a cell survives inside a table row."""
    if not value or "|" not in value:
        return value
    return value.replace("|", "\\|")


def heading_level(text: Optional[str]) -> int:
    """Return 1-3 for ``#``/``##``/``###`` text, else 0."""
    if not text:
        return 0
    match = re.match(r"^(#{1,3})\s", text)
    if not match:
        return 0
    return len(match.group(1))


def strip_heading(text: str) -> str:
    return _HEADING_RE.sub("", text, count=1)


def _pad(value, width):
    return value + " " * max(0, width - len(value))


def grid_to_markdown(grid: Grid, selection: Optional[SelectionRange] = None) -> str:
    # Only a multi-cell selection restricts the export
    if selection is not None and not selection.is_single_cell:
        return grid_to_markdown(grid.sub_grid(grid.clamp_selection(selection)))

    cols = grid.cols
    merged = grid.merged_rows

    widths = [MIN_MARKDOWN_WIDTH] * cols
    for r, entry in enumerate(grid.row_entries):
        if r in merged:
            continue
        for c, cell in enumerate(entry.cells):
            widths[c] = max(widths[c], len(escape_pipe(cell or "")))

    def format_row(cells):
        return (
            "| "
            + " | ".join(_pad(escape_pipe(cells[c] or ""), widths[c]) for c in range(cols))
            + " |\n"
        )

    def format_separator():
        parts = []
        for c in range(cols):
            align = grid.column_alignments[c] if c < len(grid.column_alignments) else "left"
            dashes = "-" * max(1, widths[c])
            if align == "center":
                parts.append(f":{dashes}:")
            elif align == "right":
                parts.append(f"{dashes}:")
            else:
                parts.append(f"-{dashes}-")
        return "|" + "|".join(parts) + "|\n"

    md = ""
    table_open = False

    for r, entry in enumerate(grid.row_entries):
        if r in merged:
            # A plain-text line ends the current table block
            table_open = False
            if not md.endswith("\n\n"):
                md += "\n"
            md += merged[r] + "\n\n"
            continue

        if not table_open:
            if md and not md.endswith("\n\n"):
                md += "\n"
            # First row after a break becomes the header of a new table
            md += format_row(entry.cells)
            md += format_separator()
            table_open = True
            continue

        md += format_row(entry.cells)

    return md


def _is_separator_row(line: str) -> bool:
    return bool(_SEPARATOR_RE.match(line.strip()))


def _is_table_row(line: str) -> bool:
    t = line.strip()
    return t.startswith("|") or ("|" in t and not t.startswith("#"))


def _trim_outer_pipes(line: str) -> str:
    content = line.strip()
    if content.startswith("|"):
        content = content[1:]
    if content.endswith("|") and not content.endswith("\\|"):
        content = content[:-1]
    return content


def _split_table_row(line: str) -> List[str]:
    content = _trim_outer_pipes(line)
    return [cell.strip().replace("\\|", "|") for cell in _UNESCAPED_PIPE_RE.split(content)]


def _separator_alignments(line: str) -> List[Optional[str]]:
    """Alignment per separator cell; ``None`` for cells without dashes."""
    result = []
    for cell in _trim_outer_pipes(line).split("|"):
        c = cell.strip()
        if "-" not in c:
            result.append(None)
        elif c.startswith(":") and c.endswith(":"):
            result.append("center")
        elif c.endswith(":"):
            result.append("right")
        else:
            result.append("left")
    return result


def parse_markdown_full(markdown: Optional[str]) -> ParsedMarkdown:
    """Parse markdown into grid rows, merged rows and column alignments.

    Never raises: anything that is not a table row becomes a merged
    plain-text row, and empty input yields a single blank cell.
    """
    lines = [line for line in (markdown or "").splitlines() if line.strip()]

    if not lines:
        return ParsedMarkdown(grid=[[""]], merged_rows={}, column_alignments=["left"], cols=1)

    max_cols = 1
    for line in lines:
        if _is_table_row(line) and not _is_separator_row(line):
            max_cols = max(max_cols, len(_split_table_row(line)))

    grid: List[List[str]] = []
    merged_rows: Dict[int, str] = {}
    alignments = ["left"] * max_cols

    for line in lines:
        if _is_separator_row(line):
            for idx, align in enumerate(_separator_alignments(line)):
                if align is not None and idx < max_cols:
                    alignments[idx] = align
            continue

        if _is_table_row(line):
            cells = _split_table_row(line)
            cells.extend("" for _ in range(max_cols - len(cells)))
            grid.append(cells[:max_cols])
        else:
            merged_rows[len(grid)] = line.strip()
            grid.append([""] * max_cols)

    if not grid:
        # Input held only separator rows
        grid.append([""] * max_cols)

    return ParsedMarkdown(
        grid=grid,
        merged_rows=merged_rows,
        column_alignments=alignments,
        cols=max_cols,
    )


def parse_markdown_to_grid(markdown: Optional[str]) -> List[List[str]]:
    return parse_markdown_full(markdown).grid


def get_column_label(index: int) -> str:
    label = ""
    i = index
    while i >= 0:
        label = chr(i % 26 + 65) + label
        i = i // 26 - 1
    return label
