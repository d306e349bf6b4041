"""HttpxAuthHandler 단위 테스트.

httpx.MockTransport로 외부 인증 서버를 대체합니다.
"""

from __future__ import annotations

import httpx
import pytest

from apps.auth.application.gateway.dto import AuthRequest
from apps.auth.application.gateway.exceptions import AuthUpstreamError
from apps.auth.infrastructure.upstream import HttpxAuthHandler, filter_headers


class TestFilterHeaders:
    """hop-by-hop 헤더 필터 테스트."""

    def test_removes_hop_by_hop(self) -> None:
        headers = [
            ("Connection", "keep-alive"),
            ("Transfer-Encoding", "chunked"),
            ("Content-Type", "application/json"),
        ]

        result = filter_headers(headers, {"connection", "transfer-encoding"})

        assert result == [("Content-Type", "application/json")]

    def test_removes_headers_listed_in_connection(self) -> None:
        headers = [
            ("Connection", "X-Internal"),
            ("X-Internal", "secret"),
            ("Accept", "*/*"),
        ]

        result = filter_headers(headers, {"connection"})

        assert result == [("Accept", "*/*")]

    def test_keeps_duplicate_headers(self) -> None:
        headers = [("set-cookie", "a=1"), ("set-cookie", "b=2")]

        assert filter_headers(headers, set()) == headers


class TestHttpxAuthHandler:
    """HttpxAuthHandler 테스트."""

    @pytest.mark.asyncio
    async def test_forwards_request(self) -> None:
        """메서드, 경로, 쿼리, 바디가 그대로 전달됨."""
        # Arrange
        captured: dict[str, httpx.Request] = {}

        def responder(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            return httpx.Response(200, json={"session": None})

        client = httpx.AsyncClient(transport=httpx.MockTransport(responder))
        handler = HttpxAuthHandler(client, upstream_url="http://upstream.test/")
        request = AuthRequest(
            method="POST",
            path="/api/auth/device/code",
            query="foo=bar",
            headers=(
                ("host", "localhost:3000"),
                ("content-type", "application/json"),
                ("connection", "keep-alive"),
                ("cookie", "session=abc"),
            ),
            body=b'{"client_id":"device-login-cli"}',
            client_host="10.0.0.1",
        )

        # Act
        response = await handler.handle(request)
        await client.aclose()

        # Assert
        sent = captured["request"]
        assert sent.method == "POST"
        assert str(sent.url) == "http://upstream.test/api/auth/device/code?foo=bar"
        assert sent.content == b'{"client_id":"device-login-cli"}'
        assert sent.headers["cookie"] == "session=abc"
        assert sent.headers["x-forwarded-for"] == "10.0.0.1"
        assert sent.headers["x-forwarded-host"] == "localhost:3000"
        assert sent.headers["host"] == "upstream.test"
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_preserves_set_cookie_and_strips_hop_by_hop(self) -> None:
        # Arrange
        def responder(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                302,
                headers=[
                    ("location", "/"),
                    ("set-cookie", "a=1; Path=/"),
                    ("set-cookie", "b=2; Path=/"),
                    ("keep-alive", "timeout=5"),
                ],
            )

        client = httpx.AsyncClient(transport=httpx.MockTransport(responder))
        handler = HttpxAuthHandler(client, upstream_url="http://upstream.test")

        # Act
        response = await handler.handle(AuthRequest(method="GET", path="/api/auth/callback/github"))
        await client.aclose()

        # Assert
        names = [name.lower() for name, _ in response.headers]
        cookies = [value for name, value in response.headers if name.lower() == "set-cookie"]
        assert response.status_code == 302
        assert cookies == ["a=1; Path=/", "b=2; Path=/"]
        assert "keep-alive" not in names
        assert "content-length" not in names

    @pytest.mark.asyncio
    async def test_connection_error_raises_upstream_error(self) -> None:
        # Arrange
        def responder(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(responder))
        handler = HttpxAuthHandler(client, upstream_url="http://upstream.test")

        # Act & Assert
        with pytest.raises(AuthUpstreamError) as exc_info:
            await handler.handle(AuthRequest(method="GET", path="/api/auth/get-session"))
        await client.aclose()

        assert "connection refused" in exc_info.value.message
