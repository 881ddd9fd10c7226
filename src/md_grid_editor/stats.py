import re
from typing import Optional

from .models import Grid, SelectionRange
from .types import SelectionStats

# Leading numeric prefix, the way a lenient float parse reads "12px" as 12
_NUMBER_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(value: str) -> Optional[float]:
    if not value:
        return None
    match = _NUMBER_PREFIX_RE.match(value)
    if not match:
        return None
    return float(match.group(1))


def selection_stats(grid: Grid, selection: Optional[SelectionRange]) -> Optional[SelectionStats]:
    if selection is None:
        return None
    selection = grid.clamp_selection(selection)

    nums = []
    for r, c in selection.iter_coords():
        number = parse_number(grid.cell(r, c))
        if number is not None:
            nums.append(number)

    if not nums:
        return {"count": 0, "sum": 0, "avg": 0}

    total = sum(nums)
    return {
        "count": len(nums),
        "sum": round(total, 2),
        "avg": round(total / len(nums), 2),
    }
