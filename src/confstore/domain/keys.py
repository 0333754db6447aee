"""Dotted key helpers for nested configuration mappings."""

from __future__ import annotations

from typing import Any, Mapping

from .errors import InvalidKeyError


def split_key(key: str) -> list[str]:
    """Split ``"aSetting.i"`` into ``["aSetting", "i"]``."""

    parts = key.split(".") if key else []
    if not parts or any(not part for part in parts):
        raise InvalidKeyError(f"invalid key '{key}'")
    return parts


def flatten(mapping: Mapping[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    rows: list[tuple[str, Any]] = []
    for name, value in mapping.items():
        dotted = f"{prefix}.{name}" if prefix else str(name)
        if isinstance(value, Mapping) and value:
            rows.extend(flatten(value, dotted))
        else:
            rows.append((dotted, value))
    return rows


__all__ = ["split_key", "flatten"]
