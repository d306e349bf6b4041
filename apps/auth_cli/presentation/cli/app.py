"""Typer application."""

from __future__ import annotations

import typer

from apps.auth_cli.presentation.cli.auth import auth_app

app = typer.Typer(
    name="device-login",
    help="CLI tool with device authorization authentication.",
    no_args_is_help=True,
    add_completion=False,
)

app.add_typer(auth_app, name="auth")
