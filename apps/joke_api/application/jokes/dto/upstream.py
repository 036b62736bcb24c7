"""Upstream (JokeAPI) 응답 스키마.

모든 필드가 필수입니다. 누락 시 ValidationError (→ UpstreamMalformedResponse).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class UpstreamJoke(BaseModel):
    """JokeAPI two-part joke."""

    model_config = ConfigDict(extra="ignore")

    id: int
    setup: str
    delivery: str
    category: str
    type: str
    safe: bool
    lang: str
    flags: dict[str, Any]


class UpstreamJokeEnvelope(BaseModel):
    """JokeAPI 다건 응답 envelope."""

    model_config = ConfigDict(extra="ignore")

    error: bool
    amount: int
    jokes: list[UpstreamJoke]
