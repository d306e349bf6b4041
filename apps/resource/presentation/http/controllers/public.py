"""Public endpoints (인증 불필요)."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from apps.resource.setup.config import Settings
from apps.resource.setup.dependencies import get_app_settings

router = APIRouter(prefix="/api/public", tags=["public"])


@router.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }


@router.get("/info")
async def info(settings: Settings = Depends(get_app_settings)):
    """서비스 정보."""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "message": "This is a public endpoint",
    }
