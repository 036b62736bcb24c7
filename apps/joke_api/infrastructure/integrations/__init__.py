"""External API Integrations."""

from apps.joke_api.infrastructure.integrations.jokeapi import JokeApiClient

__all__ = ["JokeApiClient"]
