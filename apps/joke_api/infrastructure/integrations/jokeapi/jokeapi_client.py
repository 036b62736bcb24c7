"""JokeAPI HTTP Client.

JokeAPI v2 two-part joke 조회 클라이언트.

API 문서: https://v2.jokeapi.dev/

요청:
    GET {base_url}Any?type=twopart&amount={n}

응답:
- amount >= 2: {"error": false, "amount": n, "jokes": [...]}
- amount == 1: envelope 없이 joke 객체 하나
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from apps.joke_api.application.common.exceptions import (
    UpstreamMalformedResponseError,
    UpstreamUnavailableError,
)
from apps.joke_api.application.common.ports.joke_source import JokeSourcePort
from apps.joke_api.application.jokes.dto.upstream import UpstreamJokeEnvelope

logger = logging.getLogger(__name__)

JOKE_CATEGORY = "Any"
JOKE_TYPE = "twopart"


class JokeApiClient(JokeSourcePort):
    """JokeAPI 클라이언트.

    HTTP 클라이언트는 Container가 소유하며 호출마다 재사용합니다.
    타임아웃/커넥션 풀 설정은 주입된 클라이언트의 책임입니다.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
    ) -> None:
        """초기화.

        Args:
            http_client: HTTP 클라이언트 (외부 주입)
            base_url: JokeAPI base URL (Settings.joke_api_base_url)
        """
        self._client = http_client
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"

    @property
    def jokes_url(self) -> str:
        """joke 조회 URL."""
        return f"{self._base_url}{JOKE_CATEGORY}"

    async def fetch_envelope(self, amount: int) -> UpstreamJokeEnvelope:
        """two-part joke 조회.

        Args:
            amount: 요청할 joke 수

        Returns:
            검증된 UpstreamJokeEnvelope
        """
        try:
            response = await self._client.get(
                self.jokes_url,
                params={"type": JOKE_TYPE, "amount": amount},
            )
        except httpx.RequestError as e:
            logger.critical(
                "Request to JokeApi failed",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            raise UpstreamUnavailableError(f"Request to JokeApi failed: {e}") from e

        if not response.is_success:
            logger.critical(
                "A response status code from JokeApi was not success",
                extra={"status": response.status_code, "amount": amount},
            )
            raise UpstreamUnavailableError(
                f"JokeApi responded with {response.status_code}",
                status_code=response.status_code,
            )

        return self._decode(response)

    def _decode(self, response: httpx.Response) -> UpstreamJokeEnvelope:
        """응답 본문을 envelope으로 검증.

        Raises:
            UpstreamMalformedResponseError: JSON 파싱/검증 실패 또는 null
        """
        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(
                "Response from JokeApi is not valid JSON",
                extra={"error": str(e)},
            )
            raise UpstreamMalformedResponseError("Response from JokeApi is not valid JSON") from e

        if payload is None:
            logger.warning("Response from JokeApi is null")
            raise UpstreamMalformedResponseError("Response from JokeApi is null")

        try:
            return UpstreamJokeEnvelope.model_validate(self._normalize(payload))
        except ValidationError as e:
            logger.warning(
                "Response from JokeApi failed validation",
                extra={"errors": e.error_count()},
            )
            raise UpstreamMalformedResponseError(
                "Response from JokeApi failed validation"
            ) from e

    @staticmethod
    def _normalize(payload: Any) -> Any:
        """단건 응답(envelope 없음)을 1건짜리 envelope으로 변환."""
        if isinstance(payload, dict) and "jokes" not in payload and "setup" in payload:
            return {
                "error": payload.get("error", False),
                "amount": 1,
                "jokes": [payload],
            }
        return payload
