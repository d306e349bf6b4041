"""Test Configuration and Fixtures."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from apps.pastes_web.infrastructure.api import PastesApiClient

API_BASE_URL = "http://pastes-api.test"


@pytest.fixture
def make_api() -> Callable[[Callable[[httpx.Request], httpx.Response]], PastesApiClient]:
    """MockTransport 기반 PastesApiClient 팩토리."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> PastesApiClient:
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url=API_BASE_URL,
        )
        return PastesApiClient(client)

    return _make
