"""Categories controller - Category CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from apps.notes.application.category.commands import (
    CreateCategoryInteractor,
    DeleteCategoryInteractor,
    UpdateCategoryInteractor,
)
from apps.notes.application.category.dto import CreateCategoryInput, UpdateCategoryInput
from apps.notes.application.category.queries import GetCategoryQuery, ListCategoriesQuery
from apps.notes.presentation.http.controllers.identifiers import parse_id
from apps.notes.presentation.http.schemas import CategoryRequest, CategoryResponse
from apps.notes.setup.dependencies import (
    get_create_category_interactor,
    get_delete_category_interactor,
    get_get_category_query,
    get_list_categories_query,
    get_update_category_interactor,
)

router = APIRouter(prefix="/categories", tags=["categories"])

INVALID_ID = "invalid category id"


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CategoryRequest,
    interactor: CreateCategoryInteractor = Depends(get_create_category_interactor),
) -> CategoryResponse:
    category = await interactor.execute(CreateCategoryInput(name=request.name))
    return CategoryResponse.model_validate(category)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    query: ListCategoriesQuery = Depends(get_list_categories_query),
) -> list[CategoryResponse]:
    """전체 Category를 최신순으로 조회합니다."""
    return [CategoryResponse.model_validate(c) for c in await query.execute()]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: str,
    query: GetCategoryQuery = Depends(get_get_category_query),
) -> CategoryResponse:
    category = await query.execute(parse_id(category_id, INVALID_ID))
    return CategoryResponse.model_validate(category)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    request: CategoryRequest,
    interactor: UpdateCategoryInteractor = Depends(get_update_category_interactor),
) -> CategoryResponse:
    """Category 이름을 변경합니다."""
    category = await interactor.execute(
        UpdateCategoryInput(category_id=parse_id(category_id, INVALID_ID), name=request.name)
    )
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    interactor: DeleteCategoryInteractor = Depends(get_delete_category_interactor),
) -> Response:
    """Category와 속한 Note를 삭제합니다."""
    await interactor.execute(parse_id(category_id, INVALID_ID))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
