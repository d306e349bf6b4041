"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.auth.application.common.exceptions import ApplicationError
from apps.auth.application.gateway.exceptions import AuthUpstreamError


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(AuthUpstreamError)
    async def auth_upstream_handler(request: Request, exc: AuthUpstreamError):
        return JSONResponse(
            status_code=502,
            content={"detail": exc.message, "code": "AUTH_UPSTREAM_UNAVAILABLE"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
