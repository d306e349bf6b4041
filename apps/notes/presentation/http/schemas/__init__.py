from apps.notes.presentation.http.schemas.category import CategoryRequest, CategoryResponse
from apps.notes.presentation.http.schemas.note import NoteRequest, NoteResponse

__all__ = ["CategoryRequest", "CategoryResponse", "NoteRequest", "NoteResponse"]
