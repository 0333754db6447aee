"""Exceptions raised by the configuration store."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when configuration files cannot be read or fail validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class SchemaError(ConfigError):
    """Raised when the schema document is unreadable or not a valid schema."""


class StoreError(Exception):
    """Base class for store operation failures."""

    default_message = "store error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class StoreInitError(StoreError):
    default_message = "failed to initialize store"


class InvalidSetError(StoreError):
    default_message = "invalid key-value set"


class InvalidKeyError(StoreError):
    default_message = "invalid key"


class InvalidDeleteError(StoreError):
    default_message = "invalid key-value delete"


__all__ = [
    "ConfigError",
    "SchemaError",
    "StoreError",
    "StoreInitError",
    "InvalidSetError",
    "InvalidKeyError",
    "InvalidDeleteError",
]
