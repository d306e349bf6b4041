from apps.notes.application.note.dto.note import CreateNoteInput, UpdateNoteInput

__all__ = ["CreateNoteInput", "UpdateNoteInput"]
