"""Gateway DTOs."""

from apps.auth.application.gateway.dto.proxy import AuthRequest, AuthResponse

__all__ = ["AuthRequest", "AuthResponse"]
