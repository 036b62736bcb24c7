"""Fetch Jokes Command.

Joke 조회 UseCase.
Upstream 호출 → RelayedJoke projection → 빈 결과 검사.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.joke_api.application.common.exceptions import UpstreamEmptyResultError
from apps.joke_api.application.jokes.dto.joke import JokeRequestParams, RelayedJoke

if TYPE_CHECKING:
    from apps.joke_api.application.common.ports.joke_source import JokeSourcePort

logger = logging.getLogger(__name__)


class FetchJokesCommand:
    """Joke 조회 Command (UseCase).

    재시도/캐시 없음: 호출마다 upstream 왕복 1회.
    """

    def __init__(self, joke_source: JokeSourcePort) -> None:
        """Initialize.

        Args:
            joke_source: Joke 소스 (DI)
        """
        self._joke_source = joke_source

    async def execute(self, params: JokeRequestParams) -> list[RelayedJoke]:
        """Command 실행.

        Args:
            params: 요청 파라미터

        Returns:
            upstream 순서를 유지한 RelayedJoke 목록 (비어 있지 않음)

        Raises:
            RelayError: upstream 실패 (unavailable / malformed / empty)
        """
        envelope = await self._joke_source.fetch_envelope(params.count)

        jokes = [RelayedJoke.from_upstream(joke) for joke in envelope.jokes]

        if not jokes:
            logger.warning(
                "A list of jokes is empty",
                extra={"requested": params.count, "amount": envelope.amount},
            )
            raise UpstreamEmptyResultError("A list of jokes is empty")

        return jokes
