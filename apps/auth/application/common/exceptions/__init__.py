"""Application Exceptions."""

from apps.auth.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
