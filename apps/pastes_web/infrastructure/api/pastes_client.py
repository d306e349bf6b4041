"""HTTPX Pastes API client.

PastesApi 포트의 httpx 구현체입니다.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from apps.pastes_web.application.dto import PasteDraft, PasteView
from apps.pastes_web.application.exceptions import PastesApiError

logger = logging.getLogger(__name__)


class PastesApiClient:
    """Pastes REST API 클라이언트."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(
                "Pastes API request failed",
                extra={"method": method, "url": url, "error": str(e)},
            )
            raise PastesApiError("Pastes API unavailable") from e

        if response.is_error:
            raise PastesApiError(_error_message(response), status_code=response.status_code)
        return response

    async def list_recent(self, limit: int) -> list[PasteView]:
        """최근 공개 Paste 목록."""
        response = await self._request("GET", "/pastes", params={"limit": limit})
        data = response.json()
        return [PasteView.from_api(item) for item in data.get("pastes") or []]

    async def get(self, slug: str) -> PasteView:
        """slug로 Paste 조회."""
        response = await self._request("GET", f"/pastes/{quote(slug, safe='')}")
        return PasteView.from_api(response.json())

    async def create(self, draft: PasteDraft) -> PasteView:
        """Paste 생성."""
        response = await self._request("POST", "/pastes", json=draft.to_payload())
        return PasteView.from_api(response.json())


def _error_message(response: httpx.Response) -> str:
    """{"error": "..."} 본문에서 메시지를 꺼냅니다."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"request failed with status {response.status_code}"
