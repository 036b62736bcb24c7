"""Joke API.

JokeAPI 릴레이(HTTP)와 게임 이벤트 소비자(RabbitMQ)를 한 프로세스에서 실행합니다.
"""
