"""JWKS-based token verification."""

from apps.resource.infrastructure.jwks.cache import JwksCache
from apps.resource.infrastructure.jwks.verifier import JoseTokenVerifier

__all__ = ["JoseTokenVerifier", "JwksCache"]
