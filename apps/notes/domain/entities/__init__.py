from apps.notes.domain.entities.category import Category
from apps.notes.domain.entities.note import Note

__all__ = ["Category", "Note"]
