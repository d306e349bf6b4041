"""Gateway Ports."""

from apps.auth.application.gateway.ports.auth_handler import AuthHandler

__all__ = ["AuthHandler"]
