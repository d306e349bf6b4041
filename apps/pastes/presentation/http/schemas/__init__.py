from apps.pastes.presentation.http.schemas.paste import (
    CreatePasteRequest,
    PasteListResponse,
    PasteResponse,
)

__all__ = ["CreatePasteRequest", "PasteListResponse", "PasteResponse"]
