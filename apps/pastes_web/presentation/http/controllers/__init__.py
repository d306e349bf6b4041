from apps.pastes_web.presentation.http.controllers.health import router as health_router
from apps.pastes_web.presentation.http.controllers.pages import router as pages_router

__all__ = ["health_router", "pages_router"]
