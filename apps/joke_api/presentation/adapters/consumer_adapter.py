"""Consumer Adapter.

MQ semantics를 담당하는 프로토콜 어댑터입니다.

ConsumerAdapter의 책임:
1. 메시지 → GameEvent 변환
2. Handler 디스패칭
3. CommandResult 기반 ack/nack 결정

RabbitMQClient (Infra)
        │
        │ message stream (bytes)
        ▼
ConsumerAdapter (Presentation)
        │
        │ GameEvent
        ▼
GameEventHandler (Presentation)
        │
        │ decoded text
        ▼
ReceiveGameEventCommand (Application)
        │
        │ CommandResult
        ▼
ConsumerAdapter
        │
        └── ack / nack(requeue=False)

모든 메시지는 정확히 한 번 ack 또는 nack 됩니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.joke_api.application.common.result import CommandResult
from apps.joke_api.application.game.dto.game_event import GameEvent

if TYPE_CHECKING:
    from aio_pika.abc import AbstractIncomingMessage

    from apps.joke_api.presentation.handlers.game_event_handler import (
        GameEventHandler,
    )

logger = logging.getLogger(__name__)


class ConsumerAdapter:
    """Consumer 어댑터.

    MQ 메시지를 Handler로 디스패칭하고,
    CommandResult에 따라 ack/nack을 결정합니다.
    """

    def __init__(self, handler: "GameEventHandler") -> None:
        """Initialize.

        Args:
            handler: 메시지 핸들러 (DI)
        """
        self._handler = handler
        self._processed = 0
        self._rejected = 0

    async def on_message(self, message: "AbstractIncomingMessage") -> None:
        """메시지 처리 콜백.

        Args:
            message: RabbitMQ 메시지
        """
        event = GameEvent(body=message.body, delivery_tag=message.delivery_tag)

        try:
            result = await self._handler.handle(event)
        except Exception as e:
            # 예상치 못한 오류 → requeue 없이 nack
            logger.exception(
                "Unexpected error in consumer adapter",
                extra={"delivery_tag": event.delivery_tag},
            )
            result = CommandResult.reject(str(e))

        if result.is_success:
            await message.ack()
            self._processed += 1
            logger.debug(
                "Message acknowledged",
                extra={"delivery_tag": event.delivery_tag},
            )
        else:
            await message.nack(requeue=False)
            self._rejected += 1
            logger.warning(
                "Message rejected",
                extra={
                    "delivery_tag": event.delivery_tag,
                    "reason": result.message,
                },
            )

    @property
    def stats(self) -> dict[str, int]:
        """통계 반환."""
        return {
            "processed": self._processed,
            "rejected": self._rejected,
        }
