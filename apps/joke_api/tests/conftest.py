"""joke_api 테스트 공통 Fixtures."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from typing import Any, Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.joke_api.setup.config import get_settings


def make_upstream_joke(index: int = 1) -> dict[str, Any]:
    """JokeAPI two-part joke 샘플."""
    return {
        "category": "Programming",
        "type": "twopart",
        "setup": f"Setup {index}",
        "delivery": f"Delivery {index}",
        "flags": {
            "nsfw": False,
            "religious": False,
            "political": False,
            "racist": False,
            "sexist": False,
            "explicit": False,
        },
        "id": index,
        "safe": True,
        "lang": "en",
    }


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """테스트마다 설정 캐시 초기화."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """lifespan이 바꾼 루트 로거와 레코드 팩토리 복원."""
    root_logger = logging.getLogger()
    factory = logging.getLogRecordFactory()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    logging.setLogRecordFactory(factory)
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)

@pytest.fixture
def upstream_joke() -> Callable[[int], dict[str, Any]]:
    """JokeAPI two-part joke 생성기."""
    return make_upstream_joke


@pytest.fixture
def upstream_payload() -> Callable[[int], dict[str, Any]]:
    """n건짜리 JokeAPI envelope 생성기."""

    def _make(n: int) -> dict[str, Any]:
        return {
            "error": False,
            "amount": n,
            "jokes": [make_upstream_joke(i) for i in range(1, n + 1)],
        }

    return _make


@pytest.fixture
def mock_message() -> MagicMock:
    """Mock RabbitMQ 메시지."""
    message = MagicMock()
    message.body = b"hello"
    message.delivery_tag = 1
    message.ack = AsyncMock()
    message.nack = AsyncMock()
    return message
