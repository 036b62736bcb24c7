"""Application Commands."""

from apps.joke_api.application.commands.fetch_jokes import FetchJokesCommand
from apps.joke_api.application.commands.receive_game_event import (
    ReceiveGameEventCommand,
)

__all__ = ["FetchJokesCommand", "ReceiveGameEventCommand"]
