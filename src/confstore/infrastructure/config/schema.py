"""Schema utilities for configuration validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from confstore.domain.errors import SchemaError

SCHEMA_FILE = Path(__file__).resolve().parent / "schemas" / "config.schema.json"


def load_schema(path: Path | None = None) -> Mapping[str, object]:
    schema_path = path or SCHEMA_FILE
    try:
        schema_text = Path(schema_path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"Unable to read schema {schema_path}: {exc}") from exc
    try:
        schema = json.loads(schema_text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Schema {schema_path} is not valid JSON: {exc}") from exc
    if not isinstance(schema, Mapping):
        raise SchemaError(f"Schema {schema_path} must be a JSON object.")
    return schema


__all__ = ["load_schema", "SCHEMA_FILE"]
