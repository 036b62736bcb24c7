"""Game Event DTO.

RabbitMQ에서 수신하는 게임 이벤트입니다. 메시지 단위로만 존재합니다.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameEvent:
    """게임 이벤트 DTO.

    Attributes:
        body: 원본 메시지 바이트
        delivery_tag: 브로커가 부여한 delivery tag (ack 대상 식별용)
    """

    body: bytes
    delivery_tag: int | None = None

    def decode(self) -> str:
        """본문을 UTF-8 텍스트로 디코딩.

        Raises:
            UnicodeDecodeError: UTF-8이 아닌 본문
        """
        return self.body.decode("utf-8")
