"""Application Exceptions."""

from apps.resource.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
