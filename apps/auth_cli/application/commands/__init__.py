"""CLI Commands."""

from apps.auth_cli.application.commands.login import LoginInteractor
from apps.auth_cli.application.commands.logout import LogoutInteractor

__all__ = ["LoginInteractor", "LogoutInteractor"]
