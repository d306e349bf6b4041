"""HTTP Controllers."""

from apps.auth.presentation.http.controllers.pages import device_router
from apps.auth.presentation.http.controllers.root_router import router as root_router

__all__ = ["device_router", "root_router"]
