from apps.pastes_web.infrastructure.api.pastes_client import PastesApiClient

__all__ = ["PastesApiClient"]
