"""Joke DTOs."""

from apps.joke_api.application.jokes.dto.joke import JokeRequestParams, RelayedJoke
from apps.joke_api.application.jokes.dto.upstream import (
    UpstreamJoke,
    UpstreamJokeEnvelope,
)

__all__ = [
    "JokeRequestParams",
    "RelayedJoke",
    "UpstreamJoke",
    "UpstreamJokeEnvelope",
]
