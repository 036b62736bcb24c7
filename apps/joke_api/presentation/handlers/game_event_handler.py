"""Game Event Handler.

메시지를 디코딩하고 Command를 호출하는 Presentation Layer 컴포넌트입니다.

Handler가 하지 않는 것:
- ack/nack 결정 (ConsumerAdapter에서)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.joke_api.application.common.result import CommandResult

if TYPE_CHECKING:
    from apps.joke_api.application.commands.receive_game_event import (
        ReceiveGameEventCommand,
    )
    from apps.joke_api.application.game.dto.game_event import GameEvent

logger = logging.getLogger(__name__)


class GameEventHandler:
    """게임 이벤트 메시지 핸들러."""

    def __init__(self, command: "ReceiveGameEventCommand") -> None:
        """Initialize.

        Args:
            command: 게임 이벤트 수신 Command (DI)
        """
        self._command = command

    async def handle(self, event: "GameEvent") -> CommandResult:
        """메시지 처리.

        Args:
            event: 수신한 게임 이벤트

        Returns:
            CommandResult: Command 실행 결과 (디코딩 실패 시 REJECT)
        """
        try:
            text = event.decode()
        except UnicodeDecodeError as e:
            # 재전달해도 디코딩 불가 → 거부
            logger.error(
                "Message body is not valid UTF-8",
                extra={
                    "error": str(e),
                    "delivery_tag": event.delivery_tag,
                    "size": len(event.body),
                },
            )
            return CommandResult.reject(f"Invalid UTF-8 body: {e}")

        return await self._command.execute(text, event.delivery_tag)
