"""HTML page controllers."""

from apps.auth.presentation.http.controllers.pages.device import router as device_router
from apps.auth.presentation.http.controllers.pages.login import router as login_router

__all__ = ["device_router", "login_router"]
