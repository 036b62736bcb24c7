"""Joke Source Port.

외부 joke 제공 API 추상화 인터페이스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.joke_api.application.jokes.dto.upstream import UpstreamJokeEnvelope


class JokeSourcePort(ABC):
    """Joke 소스 포트."""

    @abstractmethod
    async def fetch_envelope(self, amount: int) -> UpstreamJokeEnvelope:
        """two-part joke를 amount개 요청합니다.

        Args:
            amount: 요청할 joke 수

        Returns:
            검증된 upstream 응답

        Raises:
            UpstreamUnavailableError: 성공이 아닌 상태 코드 또는 전송 실패
            UpstreamMalformedResponseError: 본문 디코딩/검증 실패
        """
        pass
