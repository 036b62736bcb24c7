"""Presentation Adapters."""

from apps.joke_api.presentation.adapters.consumer_adapter import ConsumerAdapter

__all__ = ["ConsumerAdapter"]
