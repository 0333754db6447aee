"""Utility helpers for locating configuration files."""

from __future__ import annotations

from pathlib import Path

import typer

from confstore.domain.errors import StoreInitError

CONFIG_FILENAME = "config.json"


def user_config_dir(company_name: str, app_name: str) -> Path:
    """Return the per-user directory holding *app_name*'s settings."""

    return Path(typer.get_app_dir(company_name)) / app_name


def resolve_config_path(
    company_name: str,
    app_name: str,
    path_override: Path | None = None,
) -> Path:
    """Pick the config file location, honouring an explicit directory override."""

    if path_override is not None:
        override = Path(path_override)
        if not override.is_dir():
            raise StoreInitError(f"invalid override path: {override}")
        return override / CONFIG_FILENAME
    return user_config_dir(company_name, app_name) / CONFIG_FILENAME


__all__ = ["CONFIG_FILENAME", "user_config_dir", "resolve_config_path"]
