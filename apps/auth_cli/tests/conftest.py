"""Test Configuration and Fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import httpx
import keyring
import pytest
from keyring.errors import PasswordDeleteError

from apps.auth_cli.infrastructure.http import HttpxDeviceAuthClient

AUTH_HOST = "http://auth.test"


class FakeKeyring:
    """keyring 모듈 함수를 대체하는 메모리 저장소."""

    def __init__(self) -> None:
        self.passwords: dict[tuple[str, str], str] = {}

    def get_password(self, service: str, username: str) -> str | None:
        return self.passwords.get((service, username))

    def set_password(self, service: str, username: str, password: str) -> None:
        self.passwords[(service, username)] = password

    def delete_password(self, service: str, username: str) -> None:
        if (service, username) not in self.passwords:
            raise PasswordDeleteError("Password not found")
        del self.passwords[(service, username)]


class FakeClock:
    """sleep 호출 시 시간이 흐르는 monotonic 시계."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_keyring(monkeypatch: pytest.MonkeyPatch) -> FakeKeyring:
    backend = FakeKeyring()
    monkeypatch.setattr(keyring, "get_password", backend.get_password)
    monkeypatch.setattr(keyring, "set_password", backend.set_password)
    monkeypatch.setattr(keyring, "delete_password", backend.delete_password)
    return backend


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """XDG_CONFIG_HOME을 임시 디렉토리로 지정."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_device_client(
    clock: FakeClock,
) -> Callable[[Callable[[httpx.Request], httpx.Response]], HttpxDeviceAuthClient]:
    """MockTransport 기반 HttpxDeviceAuthClient 팩토리."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> HttpxDeviceAuthClient:
        return HttpxDeviceAuthClient(
            httpx.Client(transport=httpx.MockTransport(handler)),
            hostname=AUTH_HOST,
            client_id="device-login-cli",
            scope="openid profile email",
            sleep=clock.sleep,
            clock=clock,
        )

    return _make
