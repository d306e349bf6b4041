from apps.pastes_web.application.dto.paste import PasteDraft, PasteView

__all__ = ["PasteDraft", "PasteView"]
