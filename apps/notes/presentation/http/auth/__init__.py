from apps.notes.presentation.http.auth.static_token import check_bearer_token, require_api_token

__all__ = ["check_bearer_token", "require_api_token"]
