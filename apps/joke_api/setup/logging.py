"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.

``uvicorn apps.joke_api.main:app`` 처럼 외부 서버가 앱을 띄우는 경우에도
lifespan에서 호출되므로 같은 포맷이 적용됩니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable

import ecs_logging

from apps.joke_api.setup.config import get_settings

RecordFactory = Callable[..., logging.LogRecord]

# 루트 핸들러로 전달할 uvicorn 로거
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# 외부 라이브러리 로그 레벨 조정 대상
QUIET_LOGGERS = ("aio_pika", "aiormq", "httpx", "httpcore")


def _base_record_factory() -> RecordFactory:
    """이전에 감싼 팩토리를 벗겨낸 원본 팩토리 (반복 호출 시 중첩 방지)."""
    factory = logging.getLogRecordFactory()
    return getattr(factory, "__wrapped__", factory)


def setup_logging() -> None:
    """로깅 설정.

    여러 번 호출해도 루트 핸들러는 하나, 레코드 팩토리는 한 겹만 유지됩니다.
    """
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    base_factory = _base_record_factory()
    service = {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        record.service = dict(service)
        return record

    record_factory.__wrapped__ = base_factory  # type: ignore[attr-defined]
    logging.setLogRecordFactory(record_factory)
