"""Path-scoped CORS Middleware.

CORS 헤더와 preflight 처리를 지정한 경로 prefix 아래에만 적용합니다.
/login, /device 등 페이지 응답에는 CORS 헤더가 붙지 않습니다.
"""

from typing import Any

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class PathScopedCORSMiddleware:
    def __init__(self, app: ASGIApp, *, path_prefix: str, **cors_options: Any) -> None:
        self.app = app
        self.path_prefix = path_prefix.rstrip("/")
        self.cors = CORSMiddleware(app, **cors_options)

    def _in_scope(self, path: str) -> bool:
        return path == self.path_prefix or path.startswith(self.path_prefix + "/")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and self._in_scope(scope["path"]):
            await self.cors(scope, receive, send)
            return
        await self.app(scope, receive, send)
