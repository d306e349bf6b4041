from apps.notes.application.note.queries.get_note import GetNoteQuery
from apps.notes.application.note.queries.list_notes import ListNotesQuery

__all__ = ["GetNoteQuery", "ListNotesQuery"]
