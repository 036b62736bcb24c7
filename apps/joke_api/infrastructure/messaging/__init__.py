"""Messaging Infrastructure.

메시지 브로커 연결을 담당합니다.

- TopologySpec: exchange/queue/binding/QoS 선언 (설정)
- RabbitMQClient: MQ 연결/채널/메시지 스트림 (Infrastructure)
- ConsumerAdapter: decode/dispatch/ack-nack (Presentation)
"""

from apps.joke_api.infrastructure.messaging.rabbitmq_client import RabbitMQClient
from apps.joke_api.infrastructure.messaging.topology import TopologySpec

__all__ = ["RabbitMQClient", "TopologySpec"]
