"""HTTP authentication."""

from apps.resource.presentation.http.auth.dependencies import (
    extract_bearer_token,
    get_current_user,
)

__all__ = ["extract_bearer_token", "get_current_user"]
