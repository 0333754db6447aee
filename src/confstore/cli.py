"""Console entrypoint."""

from __future__ import annotations

from .interfaces.cli.app import app, main  # re-export

__all__ = ["app", "main"]
