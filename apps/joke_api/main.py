"""Joke API Entry Point.

JokeAPI 릴레이(HTTP)와 게임 이벤트 소비자(RabbitMQ)를 한 프로세스에서 실행합니다.

Architecture:
    Client ── GET /api/v1/joke/jokes ──▶ FetchJokesCommand ──▶ JokeAPI (HTTPS)

    RabbitMQ (GameExchange, direct)
        │ game-routing-key
        ▼
    GameQueue ──▶ RabbitMQClient ──▶ ConsumerAdapter ──▶ GameEventHandler
                                          │
                                          └── ack / nack

두 컴포넌트는 프로세스 수명만 공유하며 상태를 공유하지 않습니다.

Run:
    python -m apps.joke_api.main
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.joke_api.presentation.http import router
from apps.joke_api.presentation.http.errors import register_exception_handlers
from apps.joke_api.presentation.http.schemas import HealthCheckResponseSchema
from apps.joke_api.setup.config import get_settings
from apps.joke_api.setup.dependencies import Container
from apps.joke_api.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    브로커 토폴로지 선언 실패는 시작을 중단합니다.
    """
    setup_logging()
    settings = get_settings()
    container: Container = app.state.container

    logger.info(
        "Joke API starting",
        extra={
            "service_name": settings.service_name,
            "service_version": settings.service_version,
            "env": settings.environment,
            "amqp_host": settings.amqp_url.split("@")[-1],
        },
    )

    await container.init()
    logger.info("Dependencies initialized")

    try:
        await container.start_consuming()
        yield
    finally:
        logger.info("Shutting down", extra=container.consumer_adapter.stats)
        await container.close()
        logger.info("Joke API stopped")


def create_app(container: Container | None = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리.

    Args:
        container: 의존성 컨테이너 (테스트에서 교체)
    """
    settings = get_settings()

    app = FastAPI(
        title="Joke API",
        description="JokeAPI 릴레이 및 게임 이벤트 소비자",
        version=settings.service_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.container = container or Container(settings)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # Router
    app.include_router(router)

    @app.get("/health", response_model=HealthCheckResponseSchema, tags=["health"])
    async def health() -> HealthCheckResponseSchema:
        """서비스 헬스체크."""
        consuming = app.state.container.is_consuming
        return HealthCheckResponseSchema(
            status="ok" if consuming else "degraded",
            service=settings.service_name,
            consumer="running" if consuming else "stopped",
        )

    return app


# Uvicorn entrypoint
app = create_app()


def main() -> None:
    """Entry point."""
    import uvicorn

    settings = get_settings()
    setup_logging()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
