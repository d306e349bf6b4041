"""CLI presentation."""

from apps.auth_cli.presentation.cli.app import app

__all__ = ["app"]
