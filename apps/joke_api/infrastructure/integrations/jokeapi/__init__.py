"""JokeAPI Integration."""

from apps.joke_api.infrastructure.integrations.jokeapi.jokeapi_client import (
    JokeApiClient,
)

__all__ = ["JokeApiClient"]
