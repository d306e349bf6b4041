from apps.pastes.application.paste.dto.paste import CreatePasteInput, PageRequest

__all__ = ["CreatePasteInput", "PageRequest"]
