"""Domain Value Objects."""

from apps.auth.domain.value_objects.user_code import format_user_code_input, normalize_user_code

__all__ = ["format_user_code_input", "normalize_user_code"]
