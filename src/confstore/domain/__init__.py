"""Domain types for the configuration store."""

from __future__ import annotations

from .errors import (
    ConfigError,
    InvalidDeleteError,
    InvalidKeyError,
    InvalidSetError,
    SchemaError,
    StoreError,
    StoreInitError,
)
from .keys import flatten, split_key

__all__ = [
    "ConfigError",
    "SchemaError",
    "StoreError",
    "StoreInitError",
    "InvalidSetError",
    "InvalidKeyError",
    "InvalidDeleteError",
    "flatten",
    "split_key",
]
