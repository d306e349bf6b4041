"""Dependency injection setup."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.pastes.application.paste.commands import CreatePasteInteractor, DeletePasteInteractor
from apps.pastes.application.paste.queries import GetPasteQuery, ListPastesQuery
from apps.pastes.domain.services import SlugGenerator
from apps.pastes.infrastructure.persistence_postgres.adapters import (
    SqlaPasteCommandGateway,
    SqlaPasteQueryGateway,
    SqlaTransactionManager,
)
from apps.pastes.infrastructure.persistence_postgres.session import get_db_session
from apps.pastes.setup.config import Settings, get_settings

# Type alias for dependency injection
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


# Domain Services
def get_slug_generator(settings: Settings = Depends(get_settings)) -> SlugGenerator:
    """SlugGenerator 인스턴스를 반환합니다."""
    return SlugGenerator(settings.slug_length)


# Queries
def get_get_paste_query(session: SessionDep) -> GetPasteQuery:
    """GetPasteQuery 인스턴스를 반환합니다."""
    return GetPasteQuery(paste_query=SqlaPasteQueryGateway(session))


def get_list_pastes_query(session: SessionDep) -> ListPastesQuery:
    """ListPastesQuery 인스턴스를 반환합니다."""
    return ListPastesQuery(paste_query=SqlaPasteQueryGateway(session))


# Commands
def get_create_paste_interactor(
    session: SessionDep,
    slug_generator: SlugGenerator = Depends(get_slug_generator),
) -> CreatePasteInteractor:
    """CreatePasteInteractor 인스턴스를 반환합니다."""
    return CreatePasteInteractor(
        paste_command=SqlaPasteCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
        slug_generator=slug_generator,
    )


def get_delete_paste_interactor(session: SessionDep) -> DeletePasteInteractor:
    """DeletePasteInteractor 인스턴스를 반환합니다."""
    return DeletePasteInteractor(
        paste_command=SqlaPasteCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )
