"""HTTP Response Schemas.

Pydantic 모델 기반 API 응답 스키마.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RelayedJokeSchema(BaseModel):
    """Joke 스키마."""

    category: str = Field(..., description="카테고리")
    setup: str = Field(..., description="질문(setup)")
    delivery: str = Field(..., description="답(delivery)")


class JokeListResponseSchema(BaseModel):
    """Joke 목록 응답 스키마 (upstream envelope 형태)."""

    error: bool = Field(False, description="오류 여부 (성공 응답은 항상 false)")
    amount: int = Field(..., description="반환된 joke 수")
    jokes: list[RelayedJokeSchema] = Field(..., description="Joke 목록 (upstream 순서)")


class HealthCheckResponseSchema(BaseModel):
    """헬스체크 응답 스키마."""

    status: str = Field(..., description="서비스 상태")
    service: str = Field(..., description="서비스 이름")
    consumer: str = Field(..., description="이벤트 소비자 상태 (running, stopped)")
