"""HTTP Error Handlers."""

from apps.joke_api.presentation.http.errors.handlers import register_exception_handlers

__all__ = ["register_exception_handlers"]
