"""Notes controller - Note CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from apps.notes.application.note.commands import (
    CreateNoteInteractor,
    DeleteNoteInteractor,
    UpdateNoteInteractor,
)
from apps.notes.application.note.dto import CreateNoteInput, UpdateNoteInput
from apps.notes.application.note.queries import GetNoteQuery, ListNotesQuery
from apps.notes.presentation.http.controllers.identifiers import parse_id
from apps.notes.presentation.http.schemas import NoteRequest, NoteResponse
from apps.notes.setup.dependencies import (
    get_create_note_interactor,
    get_delete_note_interactor,
    get_get_note_query,
    get_list_notes_query,
    get_update_note_interactor,
)

router = APIRouter(prefix="/notes", tags=["notes"])

INVALID_ID = "invalid note id"
INVALID_CATEGORY_ID = "invalid category_id"


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteRequest,
    interactor: CreateNoteInteractor = Depends(get_create_note_interactor),
) -> NoteResponse:
    note = await interactor.execute(
        CreateNoteInput(
            category_id=parse_id(request.category_id, INVALID_CATEGORY_ID),
            title=request.title,
            content=request.content,
        )
    )
    return NoteResponse.model_validate(note)


@router.get("", response_model=list[NoteResponse])
async def list_notes(
    category_id: str | None = Query(None, description="Category 필터 (UUID)"),
    query: ListNotesQuery = Depends(get_list_notes_query),
) -> list[NoteResponse]:
    """Note를 최신순으로 조회합니다. category_id가 있으면 해당 Category만."""
    category_filter = parse_id(category_id, INVALID_CATEGORY_ID) if category_id else None
    return [NoteResponse.model_validate(n) for n in await query.execute(category_filter)]


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: str,
    query: GetNoteQuery = Depends(get_get_note_query),
) -> NoteResponse:
    note = await query.execute(parse_id(note_id, INVALID_ID))
    return NoteResponse.model_validate(note)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    request: NoteRequest,
    interactor: UpdateNoteInteractor = Depends(get_update_note_interactor),
) -> NoteResponse:
    """category_id, title, content를 모두 교체합니다."""
    note = await interactor.execute(
        UpdateNoteInput(
            note_id=parse_id(note_id, INVALID_ID),
            category_id=parse_id(request.category_id, INVALID_CATEGORY_ID),
            title=request.title,
            content=request.content,
        )
    )
    return NoteResponse.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: str,
    interactor: DeleteNoteInteractor = Depends(get_delete_note_interactor),
) -> Response:
    await interactor.execute(parse_id(note_id, INVALID_ID))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
