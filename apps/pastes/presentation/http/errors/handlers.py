"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
모든 오류 응답은 {"error": "<message>"} 형태입니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.pastes.application.common.exceptions import ApplicationError, PasteStorageError
from apps.pastes.domain.exceptions import (
    DomainError,
    InvalidPasteError,
    PasteExpiredError,
    PasteNotFoundError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.debug("Invalid request body", extra={"errors": str(exc.errors())})
        return error_response(400, "invalid request body")

    @app.exception_handler(InvalidPasteError)
    async def invalid_paste_handler(request: Request, exc: InvalidPasteError):
        return error_response(400, exc.message)

    @app.exception_handler(PasteNotFoundError)
    async def paste_not_found_handler(request: Request, exc: PasteNotFoundError):
        return error_response(404, exc.message)

    @app.exception_handler(PasteExpiredError)
    async def paste_expired_handler(request: Request, exc: PasteExpiredError):
        return error_response(410, exc.message)

    @app.exception_handler(PasteStorageError)
    async def paste_storage_handler(request: Request, exc: PasteStorageError):
        return error_response(500, exc.message)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return error_response(400, exc.message)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return error_response(400, exc.message)
