"""Tests for config file I/O and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from confstore.domain.errors import ConfigError
from confstore.infrastructure.config.loader import dump_config, read_config, write_config
from confstore.utils.logging import configure_logging


def test_write_config_creates_parents_and_pretty_prints(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "config.json"
    write_config(target, {"aSetting": {"i": 1}})
    text = target.read_text(encoding="utf-8")
    assert text == '{\n  "aSetting": {\n    "i": 1\n  }\n}\n'
    assert read_config(target) == {"aSetting": {"i": 1}}


def test_dump_config_trailing_newline() -> None:
    assert dump_config({}).endswith("\n")


def test_read_config_rejects_non_object(tmp_path: Path) -> None:
    target = tmp_path / "config.json"
    target.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        read_config(target)
    assert "must be an object" in str(excinfo.value)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_replaces_handlers(restore_root_logger) -> None:
    root = restore_root_logger
    root.addHandler(logging.NullHandler())

    configure_logging()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)
    assert root.level == logging.INFO

    configure_logging(verbose=True)
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG


@pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
def test_read_config_rejects_non_finite_tokens(tmp_path: Path, token: str) -> None:
    target = tmp_path / "config.json"
    target.write_text(f'{{"anotherSetting": {{"x": {token}}}}}', encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        read_config(target)
    assert "Invalid JSON" in str(excinfo.value)


def test_write_config_refuses_non_finite(tmp_path: Path) -> None:
    target = tmp_path / "config.json"
    with pytest.raises(ConfigError):
        write_config(target, {"aSetting": {"i": float("nan")}})
    assert not target.exists()


def test_write_config_wraps_os_errors(tmp_path: Path) -> None:
    target = tmp_path / "config.json"
    target.mkdir()
    with pytest.raises(ConfigError) as excinfo:
        write_config(target, {"aSetting": {"i": 1}})
    assert "<file>" in str(excinfo.value)
