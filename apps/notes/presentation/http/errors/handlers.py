"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
모든 오류 응답은 {"message": "<message>"} 형태입니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.notes.application.common.exceptions import (
    ApplicationError,
    AuthenticationError,
    InvalidInputError,
    NotesStorageError,
)
from apps.notes.domain.exceptions import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    DomainError,
    InvalidCategoryError,
    InvalidNoteError,
    NoteNotFoundError,
)

logger = logging.getLogger(__name__)


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.debug("Invalid request body", extra={"errors": str(exc.errors())})
        return error_response(400, "invalid request body")

    @app.exception_handler(AuthenticationError)
    async def authentication_handler(request: Request, exc: AuthenticationError):
        return error_response(401, exc.message, headers={"WWW-Authenticate": "Bearer"})

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        return error_response(400, exc.message)

    @app.exception_handler(InvalidCategoryError)
    async def invalid_category_handler(request: Request, exc: InvalidCategoryError):
        return error_response(400, exc.message)

    @app.exception_handler(InvalidNoteError)
    async def invalid_note_handler(request: Request, exc: InvalidNoteError):
        return error_response(400, exc.message)

    @app.exception_handler(CategoryNotFoundError)
    async def category_not_found_handler(request: Request, exc: CategoryNotFoundError):
        return error_response(404, exc.message)

    @app.exception_handler(NoteNotFoundError)
    async def note_not_found_handler(request: Request, exc: NoteNotFoundError):
        return error_response(404, exc.message)

    @app.exception_handler(CategoryAlreadyExistsError)
    async def category_exists_handler(request: Request, exc: CategoryAlreadyExistsError):
        return error_response(409, exc.message)

    @app.exception_handler(NotesStorageError)
    async def storage_handler(request: Request, exc: NotesStorageError):
        return error_response(500, exc.message)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return error_response(400, exc.message)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return error_response(400, exc.message)
