"""Command Result.

MQ의 ack/nack 정책을 Application 계층의 언어로 추상화합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ResultStatus(Enum):
    """Command 실행 결과 상태.

    MQ semantics를 Application 언어로 추상화:
    - SUCCESS: 성공 → ack
    - REJECT: 처리 불가 → nack (requeue 없음, poison message 루프 방지)
    """

    SUCCESS = auto()
    REJECT = auto()


@dataclass(frozen=True)
class CommandResult:
    """Command 실행 결과."""

    status: ResultStatus
    message: str | None = None

    @property
    def is_success(self) -> bool:
        """성공 여부."""
        return self.status == ResultStatus.SUCCESS

    @property
    def should_reject(self) -> bool:
        """nack 여부."""
        return self.status == ResultStatus.REJECT

    @classmethod
    def success(cls, message: str | None = None) -> CommandResult:
        """성공 결과 생성."""
        return cls(status=ResultStatus.SUCCESS, message=message)

    @classmethod
    def reject(cls, message: str) -> CommandResult:
        """거부 결과 생성."""
        return cls(status=ResultStatus.REJECT, message=message)
