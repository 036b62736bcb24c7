"""Application Ports."""

from apps.joke_api.application.common.ports.joke_source import JokeSourcePort

__all__ = ["JokeSourcePort"]
