from apps.notes.application.note.commands.create_note import CreateNoteInteractor
from apps.notes.application.note.commands.delete_note import DeleteNoteInteractor
from apps.notes.application.note.commands.update_note import UpdateNoteInteractor

__all__ = ["CreateNoteInteractor", "DeleteNoteInteractor", "UpdateNoteInteractor"]
