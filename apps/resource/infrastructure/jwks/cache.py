"""JWKS Cache.

KeySource 포트의 구현체입니다.
인증 서버의 ``/api/auth/jwks``를 메모리에 캐시합니다.

갱신 규칙:
- 마지막 조회 후 max_refresh_interval이 지나면 다음 요청에서 갱신
- 토큰의 kid가 캐시에 없으면 강제 갱신 (키 교체 대응)
- 어떤 경우에도 min_refresh_interval 안에는 다시 조회하지 않음
- 갱신 실패 시 기존 키를 계속 사용, 캐시가 비어 있으면 JwksUnavailableError
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Callable

import httpx

from apps.resource.application.auth import InvalidTokenError, JwksUnavailableError

logger = logging.getLogger(__name__)


class JwksCache:
    def __init__(
        self,
        client: httpx.AsyncClient,
        jwks_url: str,
        *,
        min_refresh_interval: float = 60.0,
        max_refresh_interval: float = 900.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._jwks_url = jwks_url
        self._min_refresh_interval = min_refresh_interval
        self._max_refresh_interval = max_refresh_interval
        self._clock = clock
        self._lock = asyncio.Lock()
        self._keys: list[dict[str, Any]] | None = None
        self._fetched_at: float | None = None

    async def get_key(self, kid: str | None) -> dict[str, Any]:
        keys = await self._get_keys(force=False)
        key = _find_key(keys, kid)
        if key is None:
            keys = await self._get_keys(force=True)
            key = _find_key(keys, kid)
        if key is None:
            raise InvalidTokenError(f"no matching key for kid {kid!r}")
        return key

    async def _get_keys(self, *, force: bool) -> list[dict[str, Any]]:
        async with self._lock:
            if self._keys is not None and not self._refresh_due(force):
                return self._keys

            try:
                self._keys = await self._fetch()
            except JwksUnavailableError:
                if self._keys is None:
                    raise
                logger.warning(
                    "JWKS refresh failed, using cached keys",
                    extra={"jwks_url": self._jwks_url},
                )
            # 실패해도 기록하여 min_refresh_interval 동안 재시도하지 않음
            self._fetched_at = self._clock()
            return self._keys

    def _refresh_due(self, force: bool) -> bool:
        age = self._clock() - (self._fetched_at or 0.0)
        if age < self._min_refresh_interval:
            return False
        return force or age >= self._max_refresh_interval

    async def _fetch(self) -> list[dict[str, Any]]:
        try:
            response = await self._client.get(self._jwks_url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.error(
                "JWKS fetch failed",
                extra={"jwks_url": self._jwks_url, "error": str(e)},
            )
            raise JwksUnavailableError(str(e) or type(e).__name__) from e
        except ValueError as e:
            raise JwksUnavailableError("invalid JWKS response") from e

        keys = data.get("keys") if isinstance(data, dict) else None
        if not isinstance(keys, list):
            raise JwksUnavailableError("invalid JWKS response")

        logger.info("JWKS refreshed", extra={"jwks_url": self._jwks_url, "keys": len(keys)})
        return keys


def _find_key(keys: list[dict[str, Any]], kid: str | None) -> dict[str, Any] | None:
    """kid가 없는 토큰은 키가 하나뿐일 때만 허용."""
    if kid is None:
        return keys[0] if len(keys) == 1 else None
    for key in keys:
        if key.get("kid") == kid:
            return key
    return None
