"""Shared fixtures for confstore tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from confstore.infrastructure.config.schema import SCHEMA_FILE

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def sample_config() -> dict[str, Any]:
    return json.loads((DATA_DIR / "config.json").read_text(encoding="utf-8"))


@pytest.fixture
def config_dir(tmp_path: Path, sample_config: dict[str, Any]) -> Path:
    """A directory holding a copy of the sample config.json."""
    destination = tmp_path / "settings"
    destination.mkdir()
    (destination / "config.json").write_text(json.dumps(sample_config), encoding="utf-8")
    return destination


@pytest.fixture
def corrected_schema_path(tmp_path: Path) -> Path:
    """The packaged schema with ``aSetting.j``'s ``default:`` key spelled ``default``."""
    text = SCHEMA_FILE.read_text(encoding="utf-8")
    assert '"default:"' in text
    destination = tmp_path / "corrected.schema.json"
    destination.write_text(text.replace('"default:"', '"default"'), encoding="utf-8")
    return destination
