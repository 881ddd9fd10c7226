"""Tests for GridContext state management and config loading."""

import json

import pytest
from md_grid_editor.context import DEFAULT_CONFIG, GridContext, load_config
from md_grid_editor.models import Grid, SelectionRange
from pydantic import ValidationError


@pytest.fixture
def context():
    """Fresh context for each test."""
    return GridContext()


class TestGridContext:
    """Tests for GridContext state management."""

    def test_contexts_are_independent(self):
        ctx1 = GridContext()
        ctx2 = GridContext()
        ctx1.grid = Grid.create(2, 2)
        assert ctx2.grid.rows == 20

    def test_update_state_partial(self, context):
        grid = Grid.create(3, 3)
        context.update_state(grid=grid)
        assert context.grid is grid
        assert context.selection is None

        sel = SelectionRange.single(1, 1)
        context.update_state(selection=sel)
        assert context.selection == sel
        assert context.grid is grid

    def test_update_state_clear_selection(self, context):
        context.selection = SelectionRange.single(0, 0)
        context.update_state(clear_selection=True)
        assert context.selection is None

    def test_reset_clears_state(self, context):
        context.selection = SelectionRange.single(0, 0)
        context.is_dragging = True
        context.history.push(context.grid)

        context.reset(4, 5)

        assert (context.grid.rows, context.grid.cols) == (4, 5)
        assert context.selection is None
        assert not context.is_dragging
        assert not context.history.can_undo

    def test_get_state_is_json(self, context):
        context.grid = Grid.from_data([["a", ""], ["", ""]], merged_rows={1: "Note"})
        context.selection = SelectionRange.span(0, 0, 0, 1)

        state = json.loads(context.get_state())

        assert state["data"] == [["a", ""], ["", ""]]
        assert state["rows"] == 2
        assert state["cols"] == 2
        assert state["mergedRows"] == {"1": "Note"}
        assert state["columnAlignments"] == ["left", "left"]
        assert state["selection"] == {"start": {"row": 0, "col": 0}, "end": {"row": 0, "col": 1}}
        assert state["fillEnd"] is None
        assert state["canUndo"] is False


class TestConfig:
    def test_defaults(self):
        assert load_config(None) == DEFAULT_CONFIG
        assert load_config("") == DEFAULT_CONFIG

    def test_overrides(self):
        config = load_config(json.dumps({"defaultRows": 5, "historyLimit": 3}))
        assert config["defaultRows"] == 5
        assert config["historyLimit"] == 3
        assert config["defaultCols"] == DEFAULT_CONFIG["defaultCols"]

    def test_invalid_value_raises(self):
        with pytest.raises(ValidationError):
            load_config(json.dumps({"defaultRows": "many"}))

    def test_malformed_json_raises_validation_error(self):
        with pytest.raises(ValidationError):
            load_config("{defaultRows: 5")
        with pytest.raises(ValidationError):
            GridContext("not json")

    def test_context_uses_config(self):
        ctx = GridContext(json.dumps({"defaultRows": 3, "defaultCols": 2, "defaultColumnWidth": 90}))
        assert (ctx.grid.rows, ctx.grid.cols) == (3, 2)
        assert ctx.grid.column_widths == (90, 90)

    def test_initialize_replaces_history_limit(self, context):
        context.initialize(json.dumps({"historyLimit": 2}))
        assert context.history.limit == 2
