"""Dependency Injection.

Clean Architecture의 Composition Root입니다.
모든 의존성을 여기서 조립하고, 수명(init/close)을 관리합니다.

소유 관계:
- httpx.AsyncClient → JokeApiClient (HTTP 릴레이 전용)
- RabbitMQClient → ConsumerAdapter (이벤트 소비 전용)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from fastapi import Request

from apps.joke_api.application.commands.fetch_jokes import FetchJokesCommand
from apps.joke_api.application.commands.receive_game_event import (
    ReceiveGameEventCommand,
)
from apps.joke_api.infrastructure.integrations.jokeapi import JokeApiClient
from apps.joke_api.infrastructure.messaging import RabbitMQClient, TopologySpec
from apps.joke_api.presentation.adapters.consumer_adapter import ConsumerAdapter
from apps.joke_api.presentation.handlers.game_event_handler import GameEventHandler
from apps.joke_api.setup.config import get_settings

if TYPE_CHECKING:
    from apps.joke_api.setup.config import Settings


class Container:
    """의존성 컨테이너.

    모든 의존성을 생성하고 관리합니다.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._http_client: httpx.AsyncClient | None = None
        self._fetch_jokes_command: FetchJokesCommand | None = None
        self._rabbitmq_client: RabbitMQClient | None = None
        self._consumer_adapter: ConsumerAdapter | None = None

    async def init(self) -> None:
        """의존성 초기화.

        Raises:
            BrokerSetupError: RabbitMQ 연결/토폴로지 선언 실패
        """
        settings = self._settings

        # HTTP 릴레이
        self._http_client = httpx.AsyncClient(timeout=settings.joke_api_timeout)
        joke_source = JokeApiClient(
            http_client=self._http_client,
            base_url=settings.joke_api_base_url,
        )
        self._fetch_jokes_command = FetchJokesCommand(joke_source)

        # 이벤트 소비
        self._consumer_adapter = ConsumerAdapter(
            GameEventHandler(ReceiveGameEventCommand())
        )
        self._rabbitmq_client = RabbitMQClient(
            settings.amqp_url,
            topology=TopologySpec.from_settings(settings),
            connection_name=settings.amqp_connection_name,
        )
        try:
            await self._rabbitmq_client.connect()
        except Exception:
            await self.close()
            raise

    async def start_consuming(self) -> None:
        """이벤트 소비 시작."""
        await self.rabbitmq_client.start_consuming(self.consumer_adapter.on_message)

    async def close(self) -> None:
        """리소스 정리 (consumer drain → 연결 종료)."""
        if self._rabbitmq_client:
            await self._rabbitmq_client.close()
            self._rabbitmq_client = None
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    @property
    def fetch_jokes_command(self) -> FetchJokesCommand:
        """Joke 조회 Command."""
        if not self._fetch_jokes_command:
            raise RuntimeError("Container not initialized")
        return self._fetch_jokes_command

    @property
    def rabbitmq_client(self) -> RabbitMQClient:
        """RabbitMQ Client."""
        if not self._rabbitmq_client:
            raise RuntimeError("Container not initialized")
        return self._rabbitmq_client

    @property
    def consumer_adapter(self) -> ConsumerAdapter:
        """Consumer Adapter."""
        if not self._consumer_adapter:
            raise RuntimeError("Container not initialized")
        return self._consumer_adapter

    @property
    def is_consuming(self) -> bool:
        """이벤트 소비 중 여부."""
        return self._rabbitmq_client is not None and self._rabbitmq_client.is_consuming


def get_container(request: Request) -> Container:
    """앱에 바인딩된 Container."""
    return request.app.state.container


def get_fetch_jokes_command(request: Request) -> FetchJokesCommand:
    """FetchJokesCommand 의존성 주입.

    FastAPI Depends에서 사용.
    """
    return get_container(request).fetch_jokes_command
