"""RabbitMQ Client.

MQ 연결/채널/메시지 스트림을 담당하는 Infrastructure 컴포넌트입니다.

| 컴포넌트 | 계층 | 책임 |
|---------|------|------|
| RabbitMQClient | Infrastructure | MQ 연결/채널/토폴로지/메시지 스트림 |
| ConsumerAdapter | Presentation | decode/dispatch/ack-nack |

소비 모델:
    전용 asyncio Task가 queue iterator에서 다음 메시지를 기다리고,
    callback이 끝난 뒤에야 다음 메시지를 가져옵니다.
    prefetch=1과 함께 in-flight 메시지는 항상 최대 1개입니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable

import aio_pika
from aio_pika.exceptions import AMQPError

from apps.joke_api.application.common.exceptions import (
    BrokerConnectionLostError,
    BrokerSetupError,
)
from apps.joke_api.infrastructure.messaging.topology import TopologySpec

if TYPE_CHECKING:
    from aio_pika.abc import (
        AbstractChannel,
        AbstractConnection,
        AbstractIncomingMessage,
        AbstractQueue,
    )

logger = logging.getLogger(__name__)

MessageCallback = Callable[["AbstractIncomingMessage"], Awaitable[None]]


class RabbitMQClient:
    """RabbitMQ 클라이언트.

    MQ 연결과 메시지 스트림을 담당합니다.
    메시지 처리(decode/dispatch/ack)는 ConsumerAdapter에 위임합니다.
    """

    def __init__(
        self,
        amqp_url: str,
        topology: TopologySpec | None = None,
        connection_name: str = "Joke.Api",
    ) -> None:
        """Initialize.

        Args:
            amqp_url: RabbitMQ 연결 URL
            topology: 선언할 토폴로지
            connection_name: 브로커에 표시될 client-provided name
        """
        self._amqp_url = amqp_url
        self._topology = topology or TopologySpec()
        self._connection_name = connection_name
        self._connection: AbstractConnection | None = None
        self._channel: AbstractChannel | None = None
        self._queue: AbstractQueue | None = None
        self._consume_task: asyncio.Task[None] | None = None
        self._processing = asyncio.Lock()
        self._shutdown = False

    @property
    def topology(self) -> TopologySpec:
        """적용된 토폴로지."""
        return self._topology

    @property
    def is_consuming(self) -> bool:
        """소비 태스크 실행 여부."""
        return self._consume_task is not None and not self._consume_task.done()

    async def connect(self) -> None:
        """RabbitMQ 연결 및 토폴로지 선언.

        Raises:
            BrokerSetupError: 연결/채널/선언 실패 (재시도 없음)
        """
        topology = self._topology
        try:
            self._connection = await aio_pika.connect(
                self._amqp_url,
                client_properties={"connection_name": self._connection_name},
            )
            self._channel = await self._connection.channel()

            exchange = await self._channel.declare_exchange(
                topology.exchange_name,
                topology.exchange_type,
            )

            self._queue = await self._channel.declare_queue(
                topology.queue_name,
                durable=topology.queue_durable,
                exclusive=topology.queue_exclusive,
                auto_delete=topology.queue_auto_delete,
                arguments=topology.queue_arguments,
            )

            await self._queue.bind(exchange, routing_key=topology.routing_key)

            # Prefetch 설정 (consumer 단위)
            await self._channel.set_qos(
                prefetch_count=topology.prefetch_count,
                global_=topology.global_qos,
            )
        except (AMQPError, OSError, asyncio.TimeoutError) as e:
            logger.critical(
                "RabbitMQ setup failed",
                extra={
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "exchange": topology.exchange_name,
                    "queue": topology.queue_name,
                },
            )
            await self._close_connection()
            raise BrokerSetupError(f"RabbitMQ setup failed: {e}") from e

        logger.info(
            "RabbitMQ connected",
            extra={
                "exchange": topology.exchange_name,
                "queue": topology.queue_name,
                "routing_key": topology.routing_key,
                "prefetch_count": topology.prefetch_count,
            },
        )

    async def start_consuming(self, callback: MessageCallback) -> None:
        """메시지 소비 시작 (백그라운드 Task).

        Args:
            callback: 메시지 처리 콜백 (ConsumerAdapter.on_message)
        """
        if not self._queue:
            raise RuntimeError("Not connected. Call connect() first.")
        if self.is_consuming:
            raise RuntimeError("Already consuming")

        self._shutdown = False
        self._consume_task = asyncio.create_task(
            self._consume(callback),
            name=f"consume:{self._topology.queue_name}",
        )
        self._consume_task.add_done_callback(self._on_consume_done)

        logger.info("Started consuming messages", extra={"queue": self._topology.queue_name})

    async def _consume(self, callback: MessageCallback) -> None:
        """메시지 소비 루프 (no_ack=False: 수동 ack)."""
        assert self._queue is not None

        async with self._queue.iterator(no_ack=False) as queue_iter:
            async for message in queue_iter:
                async with self._processing:
                    await callback(message)
                if self._shutdown:
                    break

        if not self._shutdown:
            # 채널/연결이 닫히면 iterator가 스스로 종료됨
            logger.critical(
                "Consumer stopped: broker channel closed",
                extra={
                    "exchange": self._topology.exchange_name,
                    "queue": self._topology.queue_name,
                },
            )
            raise BrokerConnectionLostError(
                f"Consumer on {self._topology.queue_name} stopped: broker channel closed"
            )

    def _on_consume_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None and not isinstance(exc, BrokerConnectionLostError):
            logger.error(
                "Consumer task stopped unexpectedly",
                exc_info=exc,
            )

    async def close(self) -> None:
        """소비 중지 및 연결 종료.

        처리 중인 메시지(최대 1개)의 ack/nack이 끝날 때까지 기다린 뒤
        대기 중인 Task를 취소하고 채널/연결을 닫습니다.
        """
        self._shutdown = True

        task = self._consume_task
        if task is not None and not task.done():
            # in-flight 메시지 drain
            async with self._processing:
                task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._consume_task = None

        await self._close_connection()

    async def _close_connection(self) -> None:
        if self._channel and not self._channel.is_closed:
            await self._channel.close()
        if self._connection and not self._connection.is_closed:
            await self._connection.close()
            logger.info("RabbitMQ connection closed")
        self._channel = None
        self._connection = None
        self._queue = None
