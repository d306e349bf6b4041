"""Auth commands.

``device-login auth`` 하위 명령 그룹입니다.

    device-login auth login --hostname http://localhost:3000
    device-login auth status
    device-login auth logout
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import typer

from apps.auth_cli.application.exceptions import CliError
from apps.auth_cli.domain import format_duration, normalize_hostname
from apps.auth_cli.presentation.cli.console import console, escape, print_error
from apps.auth_cli.setup import dependencies as deps

HOSTNAME_PROMPT = "Enter auth server URL (e.g., http://localhost:3000)"
DEFAULT_TIMEOUT_SECONDS = 300

auth_app = typer.Typer(no_args_is_help=True, help="Authenticate with the auth server.")


def _resolve_hostname(hostname: Optional[str]) -> str:
    """플래그 → 저장된 설정 → 프롬프트 순서로 서버 URL을 결정합니다."""
    if not hostname:
        state = deps.get_state_store().load()
        if state is not None:
            hostname = state.hostname
    if not hostname:
        hostname = typer.prompt(HOSTNAME_PROMPT)
    return normalize_hostname(hostname)


@auth_app.command("login")
def login(
    hostname: Optional[str] = typer.Option(None, "--hostname", help="Auth server URL."),
    no_browser: bool = typer.Option(
        False, "--no-browser", help="Don't open browser automatically."
    ),
    timeout: int = typer.Option(
        DEFAULT_TIMEOUT_SECONDS, "--timeout", min=1, help="Polling timeout in seconds."
    ),
) -> None:
    """Authenticate using the OAuth 2.0 Device Authorization Grant."""
    host = _resolve_hostname(hostname)
    console.print(f"Authenticating with {escape(host)}")

    with deps.get_http_client() as client:
        interactor = deps.get_login_interactor(client, host)
        try:
            authorization = interactor.start()
        except CliError as e:
            print_error(e.message)
            raise typer.Exit(code=1) from None

        console.print()
        console.print(f"[cyan]Please visit: {escape(authorization.verification_uri)}[/cyan]")
        console.print(f"And enter code: [bold yellow]{escape(authorization.user_code)}[/bold yellow]")
        console.print()

        if not no_browser and not deps.open_browser(authorization.browser_uri):
            console.print("Could not open browser.")
            console.print("Please open the URL manually.")

        try:
            with console.status("Waiting for authorization..."):
                state = interactor.complete(authorization, timeout=timeout)
        except CliError as e:
            print_error(f"authentication failed: {e.message}")
            raise typer.Exit(code=1) from None

    console.print()
    console.print("[green]Authentication successful![/green]")
    if state.user_email:
        console.print(f"Logged in as: {escape(state.user_email)}")


@auth_app.command("logout")
def logout() -> None:
    """Remove stored tokens and login state."""
    try:
        deps.get_logout_interactor().execute()
    except CliError as e:
        print_error(e.message)
        raise typer.Exit(code=1) from None

    console.print("[green]Logged out successfully[/green]")


@auth_app.command("status")
def status() -> None:
    """Display authentication status."""
    state = deps.get_status_query().execute()
    if state is None:
        console.print("[red]Not logged in[/red]")
        return

    console.print("[green]Logged in[/green]")
    console.print(f"  Server: {escape(state.hostname)}")
    if state.user_email:
        console.print(f"  User: {escape(state.user_email)}")

    if state.expires_at is None:
        return

    now = datetime.now(timezone.utc)
    expires = state.expires_at.astimezone().isoformat(timespec="seconds")
    if state.is_expired(now):
        console.print(f"[yellow]  Token expired at: {expires}[/yellow]")
    else:
        console.print(f"  Token expires: {expires}")
        console.print(f"  Time remaining: {format_duration(state.time_remaining(now))}")
