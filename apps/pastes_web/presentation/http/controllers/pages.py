"""Pastebin page controllers.

- GET /: 생성 폼 + 최근 Paste 목록
- POST /: 폼 제출 → Pastes API 생성 → /p/{slug}로 리다이렉트
- GET /p/{slug}: Paste 보기
- GET /p/{slug}/raw: 원문 (text/plain)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from apps.pastes_web.application.dto import PasteDraft
from apps.pastes_web.application.exceptions import PastesApiError
from apps.pastes_web.application.ports import PastesApi
from apps.pastes_web.presentation.http.controllers.templating import templates
from apps.pastes_web.setup.config import Settings
from apps.pastes_web.setup.dependencies import get_app_settings, get_pastes_api

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

LANGUAGES = (
    "plaintext",
    "python",
    "javascript",
    "typescript",
    "go",
    "rust",
    "java",
    "bash",
    "sql",
    "json",
    "yaml",
    "markdown",
    "html",
    "css",
)

EXPIRY_OPTIONS = (
    ("", "Never"),
    ("10", "10 minutes"),
    ("60", "1 hour"),
    ("1440", "1 day"),
    ("10080", "1 week"),
)


def paste_error_message(error: PastesApiError) -> str:
    """Paste 조회 실패를 화면 메시지로 변환합니다."""
    if error.is_expired:
        return "This paste has expired"
    if error.is_not_found:
        return "Paste not found"
    return "Failed to load paste"


def _error_status(error: PastesApiError) -> int:
    if error.is_expired or error.is_not_found:
        return error.status_code
    return status.HTTP_502_BAD_GATEWAY


def _parse_expiry(raw: str) -> int | None:
    try:
        minutes = int(raw)
    except ValueError:
        return None
    return minutes or None


async def _render_index(
    request: Request,
    api: PastesApi,
    settings: Settings,
    *,
    form: dict[str, Any] | None = None,
    error: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    recent = None
    recent_error = False
    try:
        recent = await api.list_recent(settings.recent_limit)
    except PastesApiError as e:
        logger.warning("Failed to load recent pastes", extra={"error": e.message})
        recent_error = True

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "recent": recent,
            "recent_error": recent_error,
            "form": form or {"language": "plaintext", "is_public": True, "expires": ""},
            "error": error,
            "languages": LANGUAGES,
            "expiry_options": EXPIRY_OPTIONS,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    api: PastesApi = Depends(get_pastes_api),
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse:
    """생성 폼과 최근 Paste 목록."""
    return await _render_index(request, api, settings)


@router.post("/", response_class=HTMLResponse)
async def create_paste(
    request: Request,
    content: str = Form(""),
    title: str = Form(""),
    language: str = Form("plaintext"),
    is_public: bool = Form(False),
    expires: str = Form(""),
    api: PastesApi = Depends(get_pastes_api),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """폼 제출로 Paste를 생성합니다."""
    form = {
        "content": content,
        "title": title,
        "language": language,
        "is_public": is_public,
        "expires": expires,
    }
    if not content.strip():
        return await _render_index(
            request,
            api,
            settings,
            form=form,
            error="Content is required",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    draft = PasteDraft(
        content=content,
        title=title,
        language=language or "plaintext",
        is_public=is_public,
        expires_in_minutes=_parse_expiry(expires),
    )
    try:
        paste = await api.create(draft)
    except PastesApiError as e:
        return await _render_index(
            request,
            api,
            settings,
            form=form,
            error=f"Error: {e.message}",
            status_code=e.status_code if e.status_code and e.status_code < 500 else 502,
        )

    return RedirectResponse(url=f"/p/{paste.slug}", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/p/{slug}", response_class=HTMLResponse)
async def view_paste(
    request: Request,
    slug: str,
    api: PastesApi = Depends(get_pastes_api),
) -> HTMLResponse:
    """Paste 보기."""
    try:
        paste = await api.get(slug)
    except PastesApiError as e:
        return templates.TemplateResponse(
            request,
            "paste.html",
            {"paste": None, "error": paste_error_message(e)},
            status_code=_error_status(e),
        )

    return templates.TemplateResponse(request, "paste.html", {"paste": paste, "error": None})


@router.get("/p/{slug}/raw", response_class=PlainTextResponse)
async def raw_paste(slug: str, api: PastesApi = Depends(get_pastes_api)) -> PlainTextResponse:
    """Paste 원문."""
    try:
        paste = await api.get(slug)
    except PastesApiError as e:
        return PlainTextResponse(paste_error_message(e), status_code=_error_status(e))
    return PlainTextResponse(paste.content)
