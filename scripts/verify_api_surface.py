import sys

from md_grid_editor.api import GridEditor

EXPECTED_METHODS = [
    "add_column",
    "add_row",
    "apply_formatting",
    "apply_merged_row_header",
    "copy_selection",
    "cut_selection",
    "delete_column",
    "delete_row",
    "delete_selection",
    "duplicate_column",
    "duplicate_row",
    "export_file",
    "export_markdown",
    "export_workbook",
    "fill_range",
    "get_merged_row_level",
    "get_selection_stats",
    "get_state",
    "import_markdown",
    "import_workbook",
    "initialize_grid",
    "is_merged_row",
    "merge_cells",
    "move_selection",
    "paste_data",
    "paste_text",
    "redo",
    "remove_merged_row_header",
    "set_cell_value",
    "set_column_alignment",
    "set_column_width",
    "set_data",
    "set_editing",
    "set_fill_end",
    "set_is_dragging",
    "set_is_filling",
    "set_selection",
    "set_selection_end",
    "set_selection_start",
    "undo",
    "unmerge_cells",
]


def find_missing():
    return [method for method in EXPECTED_METHODS if not hasattr(GridEditor, method)]


def verify_api():
    print("Verifying API surface area...")
    missing = find_missing()
    for method in EXPECTED_METHODS:
        if method in missing:
            print(f"❌ Missing: {method}")
        else:
            print(f"✅ Found: {method}")

    if missing:
        print(f"\nERROR: {len(missing)} methods missing from GridEditor")
        sys.exit(1)

    print("\nAPI Surface Verification Passed!")
    sys.exit(0)


if __name__ == "__main__":
    verify_api()
