"""Auth Proxy Controller.

/api/auth/* 요청을 AuthHandler로 위임합니다.
메서드, 경로, 쿼리, 헤더, 바디를 그대로 전달합니다.
"""

from fastapi import APIRouter, Depends, Request, Response

from apps.auth.application.gateway.dto import AuthRequest
from apps.auth.application.gateway.ports import AuthHandler
from apps.auth.setup.dependencies import get_auth_handler

router = APIRouter()


@router.api_route(
    "/api/auth/{path:path}",
    methods=["GET", "POST"],
    summary="인증 서버 위임",
    include_in_schema=False,
)
async def proxy_auth(
    path: str,
    request: Request,
    handler: AuthHandler = Depends(get_auth_handler),
) -> Response:
    auth_request = AuthRequest(
        method=request.method,
        path=request.url.path,
        query=request.url.query,
        headers=tuple(request.headers.items()),
        body=await request.body(),
        client_host=request.client.host if request.client else None,
    )
    result = await handler.handle(auth_request)

    response = Response(content=result.body, status_code=result.status_code)
    # Set-Cookie 등 중복 헤더 유지
    for name, value in result.headers:
        response.headers.append(name, value)
    return response
