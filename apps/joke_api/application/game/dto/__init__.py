"""Game DTOs."""

from apps.joke_api.application.game.dto.game_event import GameEvent

__all__ = ["GameEvent"]
