from apps.auth.presentation.http.middleware.cors import PathScopedCORSMiddleware

__all__ = ["PathScopedCORSMiddleware"]
