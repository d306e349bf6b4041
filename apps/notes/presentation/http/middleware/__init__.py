from apps.notes.presentation.http.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIdMiddleware,
)
from apps.notes.presentation.http.middleware.request_logging import RequestLoggingMiddleware

__all__ = ["REQUEST_ID_HEADER", "RequestIdMiddleware", "RequestLoggingMiddleware"]
