"""Pastes controller - Paste CRUD endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from apps.pastes.application.paste.commands import CreatePasteInteractor, DeletePasteInteractor
from apps.pastes.application.paste.dto import CreatePasteInput, PageRequest
from apps.pastes.application.paste.queries import GetPasteQuery, ListPastesQuery
from apps.pastes.presentation.http.schemas import (
    CreatePasteRequest,
    PasteListResponse,
    PasteResponse,
)
from apps.pastes.setup.dependencies import (
    get_create_paste_interactor,
    get_delete_paste_interactor,
    get_get_paste_query,
    get_list_pastes_query,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pastes", tags=["pastes"])

DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_OFFSET = 0


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def resolve_page(limit: str | None, offset: str | None) -> PageRequest:
    """쿼리 문자열을 PageRequest로 변환합니다.

    limit은 1..100, offset은 0 이상일 때만 적용하고 그 외에는 기본값을 사용합니다.
    """
    parsed_limit = _parse_int(limit)
    parsed_offset = _parse_int(offset)
    if parsed_limit is None or not 0 < parsed_limit <= MAX_LIMIT:
        parsed_limit = DEFAULT_LIMIT
    if parsed_offset is None or parsed_offset < 0:
        parsed_offset = DEFAULT_OFFSET
    return PageRequest(limit=parsed_limit, offset=parsed_offset)


@router.post(
    "",
    response_model=PasteResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_paste(
    request: CreatePasteRequest,
    interactor: CreatePasteInteractor = Depends(get_create_paste_interactor),
) -> PasteResponse:
    """Paste를 생성합니다."""
    paste = await interactor.execute(
        CreatePasteInput(
            content=request.content,
            title=request.title,
            language=request.language,
            is_public=True if request.is_public is None else request.is_public,
            expires_in_minutes=request.expires_in_minutes,
        )
    )
    return PasteResponse.model_validate(paste)


@router.get("", response_model=PasteListResponse, response_model_exclude_none=True)
async def list_pastes(
    limit: str | None = Query(None, description="1..100 (기본 20)"),
    offset: str | None = Query(None, description="0 이상 (기본 0)"),
    query: ListPastesQuery = Depends(get_list_pastes_query),
) -> PasteListResponse:
    """만료되지 않은 공개 Paste를 최신순으로 조회합니다."""
    page = resolve_page(limit, offset)
    pastes = await query.execute(page)
    return PasteListResponse(
        pastes=[PasteResponse.model_validate(p) for p in pastes],
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{slug}", response_model=PasteResponse, response_model_exclude_none=True)
async def get_paste(
    slug: str,
    query: GetPasteQuery = Depends(get_get_paste_query),
) -> PasteResponse:
    """slug로 Paste를 조회합니다."""
    paste = await query.execute(slug)
    return PasteResponse.model_validate(paste)


@router.delete("/{slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_paste(
    slug: str,
    interactor: DeletePasteInteractor = Depends(get_delete_paste_interactor),
) -> Response:
    """Paste를 삭제합니다."""
    await interactor.execute(slug)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
