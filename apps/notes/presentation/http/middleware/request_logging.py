"""Request logging middleware."""

from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from apps.notes.presentation.http.middleware.request_id import REQUEST_ID_HEADER

logger = logging.getLogger("apps.notes.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """요청마다 method, path, status, request_id를 기록합니다.

    RequestIdMiddleware보다 바깥에 두어 응답 헤더의 request_id를 읽습니다.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)

        logger.info(
            "request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "request_id": response.headers.get(REQUEST_ID_HEADER, ""),
            },
        )
        return response
