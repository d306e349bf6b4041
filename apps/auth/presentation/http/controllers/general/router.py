"""General Router.

Health check 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends

from apps.auth.setup.config import Settings
from apps.auth.setup.dependencies import get_app_settings

router = APIRouter()


@router.get("/health", summary="Health check")
async def health(settings: Settings = Depends(get_app_settings)) -> dict[str, str]:
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }
