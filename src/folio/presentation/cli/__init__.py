"""Command-line interface."""

from folio.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
