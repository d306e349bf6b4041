from apps.pastes.domain.services.slug_generator import DEFAULT_SLUG_LENGTH, SlugGenerator

__all__ = ["DEFAULT_SLUG_LENGTH", "SlugGenerator"]
