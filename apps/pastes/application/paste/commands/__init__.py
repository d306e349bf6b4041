from apps.pastes.application.paste.commands.create_paste import CreatePasteInteractor
from apps.pastes.application.paste.commands.delete_paste import DeletePasteInteractor

__all__ = ["CreatePasteInteractor", "DeletePasteInteractor"]
