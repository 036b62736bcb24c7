"""Receive Game Event Command.

수신한 게임 이벤트를 로깅합니다. (저장/후속 처리 없음)
"""

from __future__ import annotations

import logging

from apps.joke_api.application.common.result import CommandResult

logger = logging.getLogger(__name__)


class ReceiveGameEventCommand:
    """게임 이벤트 수신 Command."""

    async def execute(self, text: str, delivery_tag: int | None = None) -> CommandResult:
        """이벤트 처리.

        Args:
            text: 디코딩된 메시지 본문
            delivery_tag: 브로커 delivery tag

        Returns:
            CommandResult.success
        """
        logger.info(
            "Message received: %s",
            text,
            extra={"delivery_tag": delivery_tag},
        )
        return CommandResult.success()
