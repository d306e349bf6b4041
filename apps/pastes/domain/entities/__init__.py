from apps.pastes.domain.entities.paste import Paste

__all__ = ["Paste"]
