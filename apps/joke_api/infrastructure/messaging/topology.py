"""Broker Topology.

게임 이벤트 소비에 필요한 RabbitMQ 토폴로지 선언입니다.
시작 시 한 번 RabbitMQClient.connect()에서 적용됩니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from aio_pika import ExchangeType

if TYPE_CHECKING:
    from apps.joke_api.setup.config import Settings


@dataclass(frozen=True)
class TopologySpec:
    """Exchange / Queue / Binding / QoS 선언.

    Attributes:
        exchange_name: Direct exchange 이름
        queue_name: Queue 이름
        routing_key: 바인딩 routing key
        exchange_type: exchange 타입
        queue_durable: queue durable 여부
        queue_exclusive: queue exclusive 여부
        queue_auto_delete: queue auto-delete 여부
        queue_arguments: queue 추가 인자
        prefetch_count: 동시에 보유할 수 있는 unacked 메시지 수
        global_qos: QoS를 채널 전체에 적용할지 여부 (False: consumer 단위)
    """

    exchange_name: str = "GameExchange"
    queue_name: str = "GameQueue"
    routing_key: str = "game-routing-key"
    exchange_type: ExchangeType = ExchangeType.DIRECT
    queue_durable: bool = False
    queue_exclusive: bool = False
    queue_auto_delete: bool = False
    queue_arguments: dict[str, Any] | None = None
    prefetch_count: int = 1
    global_qos: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> TopologySpec:
        """Settings에서 생성."""
        return cls(
            exchange_name=settings.game_exchange,
            queue_name=settings.game_queue,
            routing_key=settings.game_routing_key,
            prefetch_count=settings.consumer_prefetch_count,
        )
