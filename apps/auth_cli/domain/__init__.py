"""Device-login CLI domain."""

from apps.auth_cli.domain.login_state import LoginState, format_duration, normalize_hostname

__all__ = ["LoginState", "format_duration", "normalize_hostname"]
