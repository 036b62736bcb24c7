"""Joke DTOs.

요청 파라미터와 서비스 자체 응답 형태(RelayedJoke)입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from apps.joke_api.application.common.exceptions import InvalidJokeCountError

if TYPE_CHECKING:
    from apps.joke_api.application.jokes.dto.upstream import UpstreamJoke

DEFAULT_JOKE_COUNT = 6


@dataclass(frozen=True)
class JokeRequestParams:
    """Joke 조회 요청.

    Attributes:
        count: 요청할 joke 수 (>= 1, 상한은 upstream이 판단)
    """

    count: int = DEFAULT_JOKE_COUNT

    def __post_init__(self) -> None:
        if self.count < 1:
            raise InvalidJokeCountError(self.count)


@dataclass(frozen=True)
class RelayedJoke:
    """UpstreamJoke의 축소 projection (id/type/safe/lang/flags 제외)."""

    category: str
    setup: str
    delivery: str

    @classmethod
    def from_upstream(cls, joke: UpstreamJoke) -> RelayedJoke:
        """UpstreamJoke에서 생성."""
        return cls(
            category=joke.category,
            setup=joke.setup,
            delivery=joke.delivery,
        )
