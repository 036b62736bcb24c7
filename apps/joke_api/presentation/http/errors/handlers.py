"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
원인 구분은 로그에만 남고, 호출자에게는 본문 없는 400만 노출합니다.
"""

from fastapi import FastAPI, Request, Response, status

from apps.joke_api.application.common.exceptions import (
    InvalidJokeCountError,
    RelayError,
)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError) -> Response:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(InvalidJokeCountError)
    async def invalid_joke_count_handler(
        request: Request, exc: InvalidJokeCountError
    ) -> Response:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
