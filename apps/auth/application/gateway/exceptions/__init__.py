"""Gateway Exceptions."""

from apps.auth.application.gateway.exceptions.upstream import AuthUpstreamError

__all__ = ["AuthUpstreamError"]
