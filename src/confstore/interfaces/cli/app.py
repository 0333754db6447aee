"""Command line interface for confstore."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import typer
from rich.console import Console
from rich.table import Table

from confstore.application.store import Store
from confstore.domain.errors import ConfigError, StoreError
from confstore.domain.keys import flatten
from confstore.infrastructure.config.loader import parse_json, read_config
from confstore.infrastructure.config.schema import SCHEMA_FILE, load_schema
from confstore.infrastructure.config.validators import build_validator, collect_violations
from confstore.utils.logging import configure_logging
from confstore.utils.paths import resolve_config_path

app = typer.Typer(help="Read, change and validate schema-checked application settings.")
console = Console()


@dataclass
class CliSettings:
    company: str
    app_name: str
    schema: Path
    config_dir: Path | None


def _handle_config_error(exc: ConfigError) -> None:
    console.print(str(exc), soft_wrap=True)
    raise typer.Exit(code=1) from exc


def _handle_store_error(exc: StoreError) -> None:
    console.print(f"[bold red]Store error[/bold red]: {exc}", highlight=False, soft_wrap=True)
    raise typer.Exit(code=1) from exc


def _open_store(ctx: typer.Context) -> Store:
    settings: CliSettings = ctx.obj
    try:
        return Store.open(
            settings.company,
            settings.app_name,
            schema_path=settings.schema,
            path_override=settings.config_dir,
        )
    except ConfigError as exc:
        _handle_config_error(exc)
        raise  # pragma: no cover
    except StoreError as exc:
        _handle_store_error(exc)
        raise  # pragma: no cover


def _parse_value(raw: str) -> Any:
    try:
        return parse_json(raw)
    except ValueError:
        return raw


def _echo_json(value: Any) -> None:
    console.print(json.dumps(value), markup=False, highlight=False, soft_wrap=True)


@app.callback()
def main_callback(
    ctx: typer.Context,
    company: str = typer.Option(
        "ACME", "--company", envvar="CONFSTORE_COMPANY", help="Vendor directory name."
    ),
    app_name: str = typer.Option(
        "Dynamite", "--app", envvar="CONFSTORE_APP", help="Application directory name."
    ),
    schema: Path = typer.Option(
        SCHEMA_FILE,
        "--schema",
        envvar="CONFSTORE_SCHEMA",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="JSON Schema the configuration must satisfy.",
    ),
    config_dir: Path | None = typer.Option(
        None,
        "--config-dir",
        envvar="CONFSTORE_CONFIG_DIR",
        file_okay=False,
        dir_okay=True,
        help="Directory holding config.json (defaults to the per-user config directory).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(verbose)
    ctx.obj = CliSettings(company=company, app_name=app_name, schema=schema, config_dir=config_dir)


@app.command()
def validate(
    ctx: typer.Context,
    config_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Configuration JSON file to check.",
    ),
) -> None:
    """Validate a configuration file against the schema."""

    settings: CliSettings = ctx.obj
    try:
        validator = build_validator(load_schema(settings.schema))
        instance = read_config(config_file)
    except ConfigError as exc:
        _handle_config_error(exc)
        return

    violations = collect_violations(validator, instance)
    if not violations:
        console.print("[green]Config OK[/green]")
        return

    table = Table(title=f"Violations – {config_file.name}")
    table.add_column("Kind", justify="left")
    table.add_column("Field", justify="left")
    table.add_column("Message", justify="left")
    for violation in violations:
        table.add_row(violation.kind, violation.field, violation.message)
    console.print(table)
    raise typer.Exit(code=1)


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the location of the configuration file."""

    settings: CliSettings = ctx.obj
    try:
        config_path = resolve_config_path(settings.company, settings.app_name, settings.config_dir)
    except StoreError as exc:
        _handle_store_error(exc)
        return
    console.print(str(config_path), markup=False, highlight=False, soft_wrap=True)


@app.command()
def get(ctx: typer.Context, key: str = typer.Argument(..., help="Dotted key, e.g. aSetting.i.")) -> None:
    """Print a value as JSON."""

    store = _open_store(ctx)
    try:
        _echo_json(store.get(key))
    except StoreError as exc:
        _handle_store_error(exc)


@app.command()
def has(ctx: typer.Context, key: str = typer.Argument(..., help="Dotted key, e.g. aSetting.i.")) -> None:
    """Report whether a key is present."""

    store = _open_store(ctx)
    present = store.has(key)
    console.print("true" if present else "false")
    if not present:
        raise typer.Exit(code=1)


@app.command("set", context_settings={"ignore_unknown_options": True})
def set_value(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Dotted key, e.g. aSetting.i."),
    value: str = typer.Argument(..., help="New value, parsed as JSON when possible."),
) -> None:
    """Change an existing key."""

    store = _open_store(ctx)
    try:
        store.set(key, _parse_value(value))
    except StoreError as exc:
        _handle_store_error(exc)
        return
    except ConfigError as exc:
        _handle_config_error(exc)
        return
    console.print(f"[green]Updated {key}[/green] in {store}", highlight=False)


@app.command()
def delete(ctx: typer.Context, key: str = typer.Argument(..., help="Dotted key, e.g. deletableSetting.")) -> None:
    """Remove a key, provided the result still validates."""

    store = _open_store(ctx)
    try:
        store.delete(key)
    except StoreError as exc:
        _handle_store_error(exc)
        return
    except ConfigError as exc:
        _handle_config_error(exc)
        return
    console.print(f"[green]Deleted {key}[/green] from {store}", highlight=False)


@app.command()
def reset(
    ctx: typer.Context,
    key: str | None = typer.Argument(None, help="Dotted key to reset; omit to reset everything."),
) -> None:
    """Restore schema defaults."""

    store = _open_store(ctx)
    try:
        store.reset(key)
    except StoreError as exc:
        _handle_store_error(exc)
        return
    except ConfigError as exc:
        _handle_config_error(exc)
        return
    console.print(f"[green]Reset {key or 'all settings'}[/green] in {store}", highlight=False)


@app.command()
def show(ctx: typer.Context) -> None:
    """Display every setting."""

    store = _open_store(ctx)
    table = Table(title=f"Settings – {store}")
    table.add_column("Key", justify="left")
    table.add_column("Value", justify="right")
    for dotted, value in flatten(store.as_dict()):
        table.add_row(dotted, json.dumps(value))
    console.print(table)


def main(argv: Iterable[str] | None = None) -> None:
    """Invoke the Typer application."""
    app(args=list(argv) if argv is not None else None)


if __name__ == "__main__":
    main()
