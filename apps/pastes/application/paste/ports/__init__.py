from apps.pastes.application.paste.ports.paste_gateway import (
    PasteCommandGateway,
    PasteQueryGateway,
)

__all__ = ["PasteCommandGateway", "PasteQueryGateway"]
