"""Upstream auth server adapters."""

from apps.auth.infrastructure.upstream.http_auth_handler import (
    HOP_BY_HOP_HEADERS,
    HttpxAuthHandler,
    filter_headers,
)

__all__ = ["HOP_BY_HOP_HEADERS", "HttpxAuthHandler", "filter_headers"]
