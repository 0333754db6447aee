"""Reading and writing configuration documents on disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from confstore.domain.errors import ConfigError

from .validators import format_error

logger = logging.getLogger(__name__)

__all__ = ["reject_constant", "parse_json", "read_config", "write_config", "dump_config"]


def reject_constant(name: str) -> Any:
    """Refuse the ``NaN``/``Infinity`` tokens that :mod:`json` accepts by default."""

    raise ValueError(f"non-finite number {name} is not valid JSON")


def parse_json(text: str) -> Any:
    return json.loads(text, parse_constant=reject_constant)


def read_config(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:  # pragma: no cover
        raise ConfigError(format_error(path, "<file>", str(exc))) from exc
    try:
        data = parse_json(text)
    except ValueError as exc:
        raise ConfigError(format_error(path, "<root>", f"Invalid JSON: {exc}")) from exc
    if not isinstance(data, dict):
        raise ConfigError(format_error(path, "<root>", "Top-level document must be an object."))
    return data


def dump_config(config: Mapping[str, Any]) -> str:
    return json.dumps(config, indent=2, allow_nan=False) + "\n"


def write_config(path: Path, config: Mapping[str, Any]) -> None:
    try:
        text = dump_config(config)
    except ValueError as exc:
        raise ConfigError(format_error(path, "<root>", str(exc))) from exc
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(format_error(path, "<file>", str(exc))) from exc
    logger.debug("Wrote configuration to %s", path)
