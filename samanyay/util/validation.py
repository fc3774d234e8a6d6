"""JSON schema validation helpers for row payloads."""
import json
from functools import lru_cache
from pathlib import Path

import jsonschema

from samanyay import config


def load_schema(schema_path: Path) -> dict:
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


@lru_cache(maxsize=None)
def row_schema(name: str) -> dict:
    """Load `<name>.schema.json` from the row schema directory (cached)."""
    return load_schema(config.ROW_SCHEMAS_DIR / f"{name}.schema.json")


def validate(data: dict, schema: dict) -> list[str]:
    """Return list of validation error messages, empty if valid."""
    try:
        jsonschema.validate(instance=data, schema=schema)
        return []
    except jsonschema.ValidationError as e:
        return [e.message]
    except jsonschema.SchemaError as e:
        return [f"Schema error: {e.message}"]
