"""Message Handlers."""

from apps.joke_api.presentation.handlers.game_event_handler import GameEventHandler

__all__ = ["GameEventHandler"]
