"""HTTP Presentation."""

from apps.joke_api.presentation.http.router import router

__all__ = ["router"]
