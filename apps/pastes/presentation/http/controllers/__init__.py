"""HTTP Controllers."""

from apps.pastes.presentation.http.controllers.health import router as health_router
from apps.pastes.presentation.http.controllers.pastes import router as pastes_router

__all__ = ["health_router", "pastes_router"]
