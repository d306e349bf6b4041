"""Dependency injection setup."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.notes.application.category.commands import (
    CreateCategoryInteractor,
    DeleteCategoryInteractor,
    UpdateCategoryInteractor,
)
from apps.notes.application.category.queries import GetCategoryQuery, ListCategoriesQuery
from apps.notes.application.note.commands import (
    CreateNoteInteractor,
    DeleteNoteInteractor,
    UpdateNoteInteractor,
)
from apps.notes.application.note.queries import GetNoteQuery, ListNotesQuery
from apps.notes.infrastructure.persistence_postgres.adapters import (
    SqlaCategoryCommandGateway,
    SqlaCategoryQueryGateway,
    SqlaNoteCommandGateway,
    SqlaNoteQueryGateway,
    SqlaTransactionManager,
)
from apps.notes.infrastructure.persistence_postgres.session import get_db_session

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


# Category
def get_list_categories_query(session: SessionDep) -> ListCategoriesQuery:
    return ListCategoriesQuery(SqlaCategoryQueryGateway(session))


def get_get_category_query(session: SessionDep) -> GetCategoryQuery:
    return GetCategoryQuery(SqlaCategoryQueryGateway(session))


def get_create_category_interactor(session: SessionDep) -> CreateCategoryInteractor:
    return CreateCategoryInteractor(
        category_command=SqlaCategoryCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_update_category_interactor(session: SessionDep) -> UpdateCategoryInteractor:
    return UpdateCategoryInteractor(
        category_query=SqlaCategoryQueryGateway(session),
        category_command=SqlaCategoryCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_delete_category_interactor(session: SessionDep) -> DeleteCategoryInteractor:
    return DeleteCategoryInteractor(
        category_command=SqlaCategoryCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


# Note
def get_list_notes_query(session: SessionDep) -> ListNotesQuery:
    return ListNotesQuery(SqlaNoteQueryGateway(session))


def get_get_note_query(session: SessionDep) -> GetNoteQuery:
    return GetNoteQuery(SqlaNoteQueryGateway(session))


def get_create_note_interactor(session: SessionDep) -> CreateNoteInteractor:
    return CreateNoteInteractor(
        note_command=SqlaNoteCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_update_note_interactor(session: SessionDep) -> UpdateNoteInteractor:
    return UpdateNoteInteractor(
        note_query=SqlaNoteQueryGateway(session),
        note_command=SqlaNoteCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )


def get_delete_note_interactor(session: SessionDep) -> DeleteNoteInteractor:
    return DeleteNoteInteractor(
        note_command=SqlaNoteCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )
