"""CLI Dependencies.

명령에서 사용하는 어댑터/유스케이스 조립.
테스트에서는 이 모듈의 함수를 monkeypatch로 교체합니다.
"""

from __future__ import annotations

import httpx

from apps.auth_cli.application.commands import LoginInteractor, LogoutInteractor
from apps.auth_cli.application.queries import AuthStatusQuery
from apps.auth_cli.infrastructure.browser import open_browser
from apps.auth_cli.infrastructure.config import JsonLoginStateStore
from apps.auth_cli.infrastructure.credentials import KeyringCredentialStore
from apps.auth_cli.infrastructure.http import HttpxDeviceAuthClient
from apps.auth_cli.setup.config import Settings, get_settings


def get_state_store() -> JsonLoginStateStore:
    return JsonLoginStateStore()


def get_credential_store(settings: Settings | None = None) -> KeyringCredentialStore:
    settings = settings or get_settings()
    return KeyringCredentialStore(settings.keyring_service)


def get_http_client(settings: Settings | None = None) -> httpx.Client:
    settings = settings or get_settings()
    return httpx.Client(timeout=settings.http_timeout_seconds)


def get_device_auth_client(
    client: httpx.Client,
    hostname: str,
    settings: Settings | None = None,
) -> HttpxDeviceAuthClient:
    settings = settings or get_settings()
    return HttpxDeviceAuthClient(
        client,
        hostname=hostname,
        client_id=settings.client_id,
        scope=settings.scope,
    )


def get_login_interactor(client: httpx.Client, hostname: str) -> LoginInteractor:
    return LoginInteractor(
        hostname=hostname,
        gateway=get_device_auth_client(client, hostname),
        credentials=get_credential_store(),
        state_store=get_state_store(),
    )


def get_logout_interactor() -> LogoutInteractor:
    return LogoutInteractor(get_credential_store(), get_state_store())


def get_status_query() -> AuthStatusQuery:
    return AuthStatusQuery(get_credential_store(), get_state_store())


__all__ = [
    "get_credential_store",
    "get_device_auth_client",
    "get_http_client",
    "get_login_interactor",
    "get_logout_interactor",
    "get_state_store",
    "get_status_query",
    "open_browser",
]
