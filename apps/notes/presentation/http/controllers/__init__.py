"""HTTP Controllers.

/health는 인증 없이, /api/v1 아래 라우트는 Bearer 토큰 인증 후 처리합니다.
"""

from fastapi import APIRouter, Depends

from apps.notes.presentation.http.auth import require_api_token
from apps.notes.presentation.http.controllers.categories import router as categories_router
from apps.notes.presentation.http.controllers.health import router as health_router
from apps.notes.presentation.http.controllers.notes import router as notes_router

api_router = APIRouter(prefix="/api/v1", dependencies=[Depends(require_api_token)])
api_router.include_router(categories_router)
api_router.include_router(notes_router)

__all__ = ["api_router", "health_router"]
