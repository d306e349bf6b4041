"""Exception Handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.resource.application.auth import AuthenticationError, JwksUnavailableError
from apps.resource.application.common.exceptions import ApplicationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return JSONResponse(
            status_code=401,
            content={"detail": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(JwksUnavailableError)
    async def jwks_unavailable_handler(request: Request, exc: JwksUnavailableError):
        logger.error("JWKS unavailable", extra={"path": request.url.path, "error": exc.message})
        return JSONResponse(status_code=500, content={"detail": exc.message})

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(status_code=400, content={"detail": exc.message})
