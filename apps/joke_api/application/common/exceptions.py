"""Application Exceptions.

릴레이/브로커 실패 분류입니다.
HTTP 계층은 모든 RelayError를 본문 없는 400으로 변환하고,
구체적인 원인은 서버 로그로만 남깁니다.
"""

from __future__ import annotations


class ApplicationError(Exception):
    """모든 애플리케이션 예외의 베이스 클래스."""

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


class InvalidJokeCountError(ApplicationError):
    """요청한 joke 개수가 1 미만."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Invalid joke count: {count}. Must be >= 1.")
        self.count = count


class RelayError(ApplicationError):
    """Upstream(JokeAPI) 호출 실패 베이스."""


class UpstreamUnavailableError(RelayError):
    """Upstream 응답 상태가 성공이 아니거나 연결 실패."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamMalformedResponseError(RelayError):
    """Upstream 응답 본문 디코딩 실패 (또는 null)."""


class UpstreamEmptyResultError(RelayError):
    """디코딩은 성공했으나 joke가 하나도 없음."""


class BrokerSetupError(ApplicationError):
    """RabbitMQ 연결/채널/토폴로지 선언 실패 (시작 중단)."""


class BrokerConnectionLostError(BrokerSetupError):
    """소비 중 채널/연결이 닫혀 소비자가 종료됨 (재연결 없음)."""
