"""Auth proxy controllers."""

from apps.auth.presentation.http.controllers.proxy.auth_proxy import router

__all__ = ["router"]
