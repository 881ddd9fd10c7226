import json
from dataclasses import dataclass, field
from typing import Optional

from pydantic import TypeAdapter

from .history import HISTORY_LIMIT, History
from .models import (
    DEFAULT_COL_WIDTH,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    MIN_COL_WIDTH,
    CellCoord,
    Grid,
    SelectionRange,
)
from .types import GridConfig

DEFAULT_CONFIG: GridConfig = {
    "defaultRows": DEFAULT_ROWS,
    "defaultCols": DEFAULT_COLS,
    "defaultColumnWidth": DEFAULT_COL_WIDTH,
    "minColumnWidth": MIN_COL_WIDTH,
    "historyLimit": HISTORY_LIMIT,
}

_config_adapter = TypeAdapter(GridConfig)


def load_config(config_json: Optional[str] = None) -> GridConfig:
    """Merge a JSON config string over the defaults.

    Raises ``pydantic.ValidationError`` for malformed JSON or a key with the
    wrong type.
    """
    validated = _config_adapter.validate_json(config_json) if config_json else {}
    merged = dict(DEFAULT_CONFIG)
    merged.update(validated)
    return merged


@dataclass
class EditorState:
    grid: Grid
    selection: Optional[SelectionRange] = None
    fill_end: Optional[CellCoord] = None
    editing: bool = False
    is_dragging: bool = False
    is_filling: bool = False
    config: GridConfig = field(default_factory=lambda: dict(DEFAULT_CONFIG))


class GridContext:
    """Owns the current grid, the selection and the undo/redo stacks."""

    def __init__(self, config_json: Optional[str] = None):
        config = load_config(config_json)
        self._state = EditorState(grid=self._empty_grid(config), config=config)
        self.history = History(config["historyLimit"])

    @staticmethod
    def _empty_grid(config, rows=None, cols=None):
        return Grid.create(
            rows if rows is not None else config["defaultRows"],
            cols if cols is not None else config["defaultCols"],
            config["defaultColumnWidth"],
        )

    @property
    def grid(self) -> Grid:
        return self._state.grid

    @grid.setter
    def grid(self, value: Grid):
        self._state.grid = value

    @property
    def selection(self) -> Optional[SelectionRange]:
        return self._state.selection

    @selection.setter
    def selection(self, value: Optional[SelectionRange]):
        self._state.selection = value

    @property
    def fill_end(self) -> Optional[CellCoord]:
        return self._state.fill_end

    @fill_end.setter
    def fill_end(self, value: Optional[CellCoord]):
        self._state.fill_end = value

    @property
    def editing(self) -> bool:
        return self._state.editing

    @editing.setter
    def editing(self, value: bool):
        self._state.editing = value

    @property
    def is_dragging(self) -> bool:
        return self._state.is_dragging

    @is_dragging.setter
    def is_dragging(self, value: bool):
        self._state.is_dragging = value

    @property
    def is_filling(self) -> bool:
        return self._state.is_filling

    @is_filling.setter
    def is_filling(self, value: bool):
        self._state.is_filling = value

    @property
    def config(self) -> GridConfig:
        return self._state.config

    def update_state(
        self,
        grid: Optional[Grid] = None,
        selection: Optional[SelectionRange] = None,
        clear_selection: bool = False,
    ):
        """Swap in a new grid and/or selection."""
        if grid is not None:
            self._state.grid = grid
        if clear_selection:
            self._state.selection = None
        elif selection is not None:
            self._state.selection = selection

    def reset(self, rows: Optional[int] = None, cols: Optional[int] = None):
        config = self._state.config
        self._state = EditorState(grid=self._empty_grid(config, rows, cols), config=config)
        self.history.clear()

    def initialize(self, config_json: Optional[str] = None):
        config = load_config(config_json)
        self._state = EditorState(grid=self._empty_grid(config), config=config)
        self.history = History(config["historyLimit"])

    def get_full_state_dict(self) -> dict:
        grid = self._state.grid
        return {
            "data": grid.data,
            "rows": grid.rows,
            "cols": grid.cols,
            # JSON object keys are strings
            "mergedRows": {str(k): v for k, v in grid.merged_rows.items()},
            "columnWidths": list(grid.column_widths),
            "columnAlignments": list(grid.column_alignments),
            "selection": self._state.selection.to_dict() if self._state.selection else None,
            "fillEnd": self._state.fill_end.to_dict() if self._state.fill_end else None,
            "editing": self._state.editing,
            "isDragging": self._state.is_dragging,
            "isFilling": self._state.is_filling,
            "canUndo": self.history.can_undo,
            "canRedo": self.history.can_redo,
        }

    def get_state(self) -> str:
        """Return the full state as a JSON string for the frontend."""
        return json.dumps(self.get_full_state_dict())
