"""Credential storage adapters."""

from apps.auth_cli.infrastructure.credentials.keyring_store import (
    ACCESS_TOKEN_KEY,
    REFRESH_TOKEN_KEY,
    KeyringCredentialStore,
)

__all__ = ["ACCESS_TOKEN_KEY", "REFRESH_TOKEN_KEY", "KeyringCredentialStore"]
