"""Validation helpers built on the packaged JSON Schema."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import SchemaError as JsonSchemaError

from confstore.domain.errors import ConfigError, SchemaError

from .schema import load_schema

_ERROR_KINDS: dict[str, str] = {
    "required": "missing-required-field",
    "type": "wrong-type",
    "minimum": "below-minimum",
    "maximum": "above-maximum",
}


@dataclass(frozen=True, kw_only=True)
class Violation:
    kind: str
    field: str
    message: str


def build_validator(schema: Mapping[str, Any] | None = None) -> Draft202012Validator:
    schema = load_schema() if schema is None else schema
    try:
        Draft202012Validator.check_schema(schema)
    except JsonSchemaError as exc:
        raise SchemaError(f"Invalid schema: {exc.message}") from exc
    return Draft202012Validator(schema)


def classify(error: ValidationError) -> str:
    """Map a jsonschema error onto the store's error taxonomy."""

    return _ERROR_KINDS.get(str(error.validator), "other")


def field_path(parts: Iterable[Any]) -> str:
    dotted = ".".join(str(part) for part in parts)
    return dotted or "<root>"


def collect_violations(validator: Draft202012Validator, instance: Any) -> list[Violation]:
    errors = sorted(
        validator.iter_errors(instance),
        key=lambda err: [str(part) for part in err.path],
    )
    return [
        Violation(kind=classify(err), field=field_path(err.path), message=err.message)
        for err in errors
    ]


def format_error(path: Path | str, field: str, message: str) -> str:
    location = f"[cyan]{path}[/cyan]"
    target = f" → [magenta]{field}[/magenta]" if field else ""
    return f"[bold red]Config error[/bold red]: {location}{target} {message}"


def validate_with_schema(
    validator: Draft202012Validator,
    instance: Any,
    path: Path | str,
) -> None:
    violations = collect_violations(validator, instance)
    if violations:
        first = violations[0]
        raise ConfigError(format_error(path, first.field, f"({first.kind}) {first.message}"))


def non_finite_fields(instance: Any, prefix: str = "") -> list[str]:
    """Dotted paths of every NaN or infinite number inside *instance*."""

    if isinstance(instance, float):
        return [] if math.isfinite(instance) else [prefix or "<root>"]
    if isinstance(instance, Mapping):
        items = instance.items()
    elif isinstance(instance, list):
        items = enumerate(instance)
    else:
        return []
    found: list[str] = []
    for name, value in items:
        found.extend(non_finite_fields(value, f"{prefix}.{name}" if prefix else str(name)))
    return found


_MISSING = object()


def _collect_defaults(schema: Mapping[str, Any]) -> Any:
    if "default" in schema:
        return copy.deepcopy(schema["default"])
    properties = schema.get("properties")
    if not isinstance(properties, Mapping):
        return _MISSING
    result: dict[str, Any] = {}
    for name, subschema in properties.items():
        if not isinstance(subschema, Mapping):
            continue
        value = _collect_defaults(subschema)
        if value is not _MISSING:
            result[name] = value
    return result if result else _MISSING


def default_value(schema: Mapping[str, Any]) -> Any:
    """Return the default declared by *schema*, or built from its properties.

    Only the ``default`` keyword counts. Raises ``LookupError`` when nothing
    in *schema* declares one.
    """

    value = _collect_defaults(schema)
    if value is _MISSING:
        raise LookupError("schema declares no default")
    return value


def default_config(schema: Mapping[str, Any]) -> dict[str, Any]:
    """Build a configuration object from the ``default`` keywords in *schema*."""

    value = _collect_defaults(schema)
    return value if isinstance(value, dict) else {}


def schema_for_key(schema: Mapping[str, Any], keys: Iterable[str]) -> Mapping[str, Any] | None:
    current: Mapping[str, Any] = schema
    for key in keys:
        properties = current.get("properties")
        if not isinstance(properties, Mapping):
            return None
        subschema = properties.get(key)
        if not isinstance(subschema, Mapping):
            return None
        current = subschema
    return current


__all__ = [
    "Violation",
    "build_validator",
    "non_finite_fields",
    "classify",
    "field_path",
    "collect_violations",
    "format_error",
    "validate_with_schema",
    "default_value",
    "default_config",
    "schema_for_key",
]
