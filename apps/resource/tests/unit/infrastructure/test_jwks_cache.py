"""JwksCache 테스트."""

from __future__ import annotations

import httpx
import pytest

from apps.resource.application.auth import InvalidTokenError, JwksUnavailableError
from apps.resource.infrastructure.jwks import JwksCache

JWKS_URL = "http://auth.test/api/auth/jwks"


class Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class JwksServer:
    """응답할 키 목록을 바꿀 수 있는 JWKS 엔드포인트."""

    def __init__(self, *keys: dict) -> None:
        self.keys = list(keys)
        self.fail = False
        self.requests = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests += 1
        assert str(request.url) == JWKS_URL
        if self.fail:
            return httpx.Response(503)
        return httpx.Response(200, json={"keys": self.keys})


@pytest.fixture
def clock() -> Clock:
    return Clock()


def make_cache(server: JwksServer, clock: Clock) -> JwksCache:
    return JwksCache(
        httpx.AsyncClient(transport=httpx.MockTransport(server)),
        JWKS_URL,
        min_refresh_interval=60,
        max_refresh_interval=900,
        clock=clock,
    )


class TestJwksCache:
    @pytest.mark.asyncio
    async def test_keys_are_cached(self, signing_key, clock):
        server = JwksServer(signing_key.public_jwk)
        cache = make_cache(server, clock)

        first = await cache.get_key("key-1")
        clock.now += 300
        second = await cache.get_key("key-1")

        assert first == second == signing_key.public_jwk
        assert server.requests == 1

    @pytest.mark.asyncio
    async def test_refreshes_after_max_interval(self, signing_key, clock):
        server = JwksServer(signing_key.public_jwk)
        cache = make_cache(server, clock)

        await cache.get_key("key-1")
        clock.now += 900
        await cache.get_key("key-1")

        assert server.requests == 2

    @pytest.mark.asyncio
    async def test_unknown_kid_forces_refresh(self, signing_key, rotated_key, clock):
        """키 교체 후 새 kid는 강제 갱신으로 찾음."""
        server = JwksServer(signing_key.public_jwk)
        cache = make_cache(server, clock)
        await cache.get_key("key-1")

        server.keys.append(rotated_key.public_jwk)
        clock.now += 61
        key = await cache.get_key("key-2")

        assert key == rotated_key.public_jwk
        assert server.requests == 2

    @pytest.mark.asyncio
    async def test_forced_refresh_respects_min_interval(self, signing_key, clock):
        server = JwksServer(signing_key.public_jwk)
        cache = make_cache(server, clock)
        await cache.get_key("key-1")

        clock.now += 10
        with pytest.raises(InvalidTokenError, match="no matching key"):
            await cache.get_key("key-unknown")

        assert server.requests == 1

    @pytest.mark.asyncio
    async def test_token_without_kid_uses_single_key(self, signing_key, clock):
        cache = make_cache(JwksServer(signing_key.public_jwk), clock)

        assert await cache.get_key(None) == signing_key.public_jwk

    @pytest.mark.asyncio
    async def test_fetch_failure_without_cache(self, clock):
        server = JwksServer()
        server.fail = True
        cache = make_cache(server, clock)

        with pytest.raises(JwksUnavailableError, match="failed to fetch JWKS"):
            await cache.get_key("key-1")

    @pytest.mark.asyncio
    async def test_fetch_failure_keeps_cached_keys(self, signing_key, clock):
        server = JwksServer(signing_key.public_jwk)
        cache = make_cache(server, clock)
        await cache.get_key("key-1")

        server.fail = True
        clock.now += 1000
        key = await cache.get_key("key-1")

        assert key == signing_key.public_jwk
        assert server.requests == 2

    @pytest.mark.asyncio
    async def test_invalid_document(self, clock):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"unexpected": True})

        cache = JwksCache(
            httpx.AsyncClient(transport=httpx.MockTransport(handler)),
            JWKS_URL,
            clock=clock,
        )

        with pytest.raises(JwksUnavailableError, match="invalid JWKS response"):
            await cache.get_key("key-1")
