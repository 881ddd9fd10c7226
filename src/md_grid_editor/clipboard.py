"""Tab-separated clipboard interchange (spreadsheet-compatible, not markdown)."""

import re
from typing import List, Optional

from .models import Grid, SelectionRange

_LINE_BREAK_RE = re.compile(r"\r?\n")


def selection_to_tsv(grid: Grid, selection: Optional[SelectionRange]) -> str:
    if selection is None:
        return ""
    selection = grid.clamp_selection(selection)
    c0, c1 = selection.col_min, selection.col_max + 1
    return "\n".join(
        "\t".join(grid.row_entries[r].cells[c0:c1])
        for r in range(selection.row_min, selection.row_max + 1)
    )


def parse_tsv(text: Optional[str]) -> List[List[str]]:
    """Split clipboard text into rows of cells.

    One trailing line break is dropped so a copied block does not paste an
    extra empty row.
    """
    if not text:
        return []
    if text.endswith("\r\n"):
        text = text[:-2]
    elif text.endswith("\n"):
        text = text[:-1]
    return [line.split("\t") for line in _LINE_BREAK_RE.split(text)]
