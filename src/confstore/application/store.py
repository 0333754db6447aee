"""Schema-backed key/value store persisted as a JSON file."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft202012Validator

from confstore.domain.errors import (
    ConfigError,
    InvalidDeleteError,
    InvalidKeyError,
    InvalidSetError,
    StoreError,
    StoreInitError,
)
from confstore.domain.keys import split_key
from confstore.infrastructure.config.loader import read_config, write_config
from confstore.infrastructure.config.schema import load_schema
from confstore.infrastructure.config.validators import (
    build_validator,
    collect_violations,
    default_config,
    default_value,
    non_finite_fields,
    schema_for_key,
    validate_with_schema,
)
from confstore.utils.paths import resolve_config_path

logger = logging.getLogger(__name__)


def _walk(config: Any, parts: list[str], key: str) -> Any:
    current = config
    for part in parts:
        if not isinstance(current, dict) or part not in current:
            raise InvalidKeyError(f"invalid key '{key}'")
        current = current[part]
    return current


class Store:
    """In-memory configuration bound to a file and, optionally, a schema.

    Every mutation is applied to a copy first; the copy only replaces the
    live configuration (and is written to disk) once it validates.
    """

    def __init__(
        self,
        path: Path,
        config: Mapping[str, Any],
        schema: Mapping[str, Any] | None = None,
    ) -> None:
        self.path = Path(path)
        self.schema = schema
        self.validator: Draft202012Validator | None = (
            build_validator(schema) if schema is not None else None
        )
        self._config: dict[str, Any] = copy.deepcopy(dict(config))

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"Store(path={str(self.path)!r}, schema={'yes' if self.schema else 'no'})"

    @classmethod
    def open(
        cls,
        company_name: str,
        app_name: str,
        schema_path: Path | None = None,
        path_override: Path | None = None,
    ) -> Store:
        """Locate, load and validate the configuration for *app_name*."""

        schema = load_schema(schema_path) if schema_path is not None else None
        config_path = resolve_config_path(company_name, app_name, path_override)

        if config_path.exists():
            config = read_config(config_path)
            logger.info("Loaded configuration from %s", config_path)
            if schema is not None:
                validator = build_validator(schema)
                try:
                    validate_with_schema(validator, config, config_path)
                except ConfigError as exc:
                    logger.warning("%s; using schema defaults", exc)
                    config = cls._defaults_or_fail(schema, validator)
            return cls(config_path, config, schema)

        if schema is None:
            raise StoreInitError(f"no configuration at {config_path} and no schema to derive one")

        logger.info("No configuration at %s; using schema defaults", config_path)
        config = cls._defaults_or_fail(schema, build_validator(schema))
        return cls(config_path, config, schema)

    @staticmethod
    def _defaults_or_fail(
        schema: Mapping[str, Any], validator: Draft202012Validator
    ) -> dict[str, Any]:
        config = default_config(schema)
        violations = collect_violations(validator, config)
        if violations:
            first = violations[0]
            raise StoreInitError(
                f"schema defaults do not form a valid configuration: {first.field}: {first.message}"
            )
        return config

    def as_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._config)

    def get(self, key: str) -> Any:
        return copy.deepcopy(_walk(self._config, split_key(key), key))

    def has(self, key: str) -> bool:
        try:
            _walk(self._config, split_key(key), key)
        except InvalidKeyError:
            return False
        return True

    def set(self, key: str, value: Any) -> None:
        parts = split_key(key)
        config = copy.deepcopy(self._config)
        parent = _walk(config, parts[:-1], key)
        if not isinstance(parent, dict) or parts[-1] not in parent:
            raise InvalidKeyError(f"invalid key '{key}'")
        parent[parts[-1]] = copy.deepcopy(value)
        self._commit(config, InvalidSetError, key)

    def delete(self, key: str) -> None:
        parts = split_key(key)
        config = copy.deepcopy(self._config)
        parent = _walk(config, parts[:-1], key)
        if not isinstance(parent, dict) or parts[-1] not in parent:
            raise InvalidKeyError(f"invalid key '{key}'")
        del parent[parts[-1]]
        self._commit(config, InvalidDeleteError, key)

    def reset(self, key: str | None = None) -> None:
        """Restore *key*, or the whole configuration, to the schema defaults."""

        if self.schema is None:
            raise InvalidKeyError("no schema to reset from")

        if key is None:
            self._commit(default_config(self.schema), InvalidSetError, "<root>")
            return

        parts = split_key(key)
        subschema = schema_for_key(self.schema, parts)
        if subschema is None:
            raise InvalidKeyError(f"key '{key}' is not described by the schema")
        try:
            value = default_value(subschema)
        except LookupError as exc:
            raise InvalidKeyError(f"key '{key}' has no default") from exc

        config = copy.deepcopy(self._config)
        parent = _walk(config, parts[:-1], key)
        if not isinstance(parent, dict):
            raise InvalidKeyError(f"invalid key '{key}'")
        parent[parts[-1]] = value
        self._commit(config, InvalidSetError, key)

    def save(self) -> None:
        write_config(self.path, self._config)

    def _commit(self, config: dict[str, Any], error: type[StoreError], key: str) -> None:
        non_finite = non_finite_fields(config)
        if non_finite:
            raise error(f"{error.default_message} '{key}': {non_finite[0]}: non-finite number")
        if self.validator is not None:
            violations = collect_violations(self.validator, config)
            if violations:
                first = violations[0]
                raise error(f"{error.default_message} '{key}': {first.field}: {first.message}")
        write_config(self.path, config)
        self._config = config
        logger.debug("Committed change to '%s'", key)


__all__ = ["Store"]
