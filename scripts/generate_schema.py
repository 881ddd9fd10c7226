import json
import sys
from pathlib import Path

# Add src to path
current_dir = Path(__file__).parent
src_dir = current_dir.parent / "src"
sys.path.insert(0, str(src_dir))

from md_grid_editor.types import GridConfig, GridState
from pydantic import TypeAdapter

SCHEMAS = {
    "grid-state.schema.json": GridState,
    "grid-config.schema.json": GridConfig,
}


def main():
    # Frontends validate the get_state() payload and the config they send
    # against these files.
    schema_dir = current_dir.parent / "schemas"
    schema_dir.mkdir(exist_ok=True)

    for filename, payload_type in SCHEMAS.items():
        schema = TypeAdapter(payload_type).json_schema()
        output_file = schema_dir / filename
        with open(output_file, "w") as f:
            json.dump(schema, f, indent=2)
        print(f"Schema generated at: {output_file}")


if __name__ == "__main__":
    main()
