"""Bearer token authentication."""

from apps.resource.application.auth.dto import AuthenticatedUser
from apps.resource.application.auth.exceptions import (
    AuthenticationError,
    InvalidTokenError,
    JwksUnavailableError,
)
from apps.resource.application.auth.ports import KeySource, TokenVerifier

__all__ = [
    "AuthenticatedUser",
    "AuthenticationError",
    "InvalidTokenError",
    "JwksUnavailableError",
    "KeySource",
    "TokenVerifier",
]
