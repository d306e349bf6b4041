"""HTTP Controllers."""

from fastapi import APIRouter

from apps.resource.presentation.http.controllers.protected import router as protected_router
from apps.resource.presentation.http.controllers.public import router as public_router

root_router = APIRouter()
root_router.include_router(public_router)
root_router.include_router(protected_router)

__all__ = ["root_router"]
