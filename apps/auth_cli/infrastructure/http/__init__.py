"""HTTP adapters."""

from apps.auth_cli.infrastructure.http.device_auth_client import HttpxDeviceAuthClient

__all__ = ["HttpxDeviceAuthClient"]
