from apps.notes.application.note.ports.note_gateway import NoteCommandGateway, NoteQueryGateway

__all__ = ["NoteCommandGateway", "NoteQueryGateway"]
