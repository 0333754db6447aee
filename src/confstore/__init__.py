"""Schema-validated application settings store."""

from __future__ import annotations

from confstore.application.store import Store
from confstore.domain.errors import (
    ConfigError,
    InvalidDeleteError,
    InvalidKeyError,
    InvalidSetError,
    SchemaError,
    StoreError,
    StoreInitError,
)
from confstore.infrastructure.config.schema import SCHEMA_FILE, load_schema
from confstore.infrastructure.config.validators import build_validator, default_config

__all__ = [
    "Store",
    "ConfigError",
    "SchemaError",
    "StoreError",
    "StoreInitError",
    "InvalidSetError",
    "InvalidKeyError",
    "InvalidDeleteError",
    "SCHEMA_FILE",
    "load_schema",
    "build_validator",
    "default_config",
]
