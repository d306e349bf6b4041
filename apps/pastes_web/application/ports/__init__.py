from apps.pastes_web.application.ports.pastes_api import PastesApi

__all__ = ["PastesApi"]
