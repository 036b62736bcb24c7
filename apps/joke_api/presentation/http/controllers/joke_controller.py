"""Joke Controller.

Joke API 엔드포인트 핸들러.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from apps.joke_api.application.commands.fetch_jokes import FetchJokesCommand
from apps.joke_api.application.jokes.dto.joke import (
    DEFAULT_JOKE_COUNT,
    JokeRequestParams,
)
from apps.joke_api.presentation.http.schemas import (
    JokeListResponseSchema,
    RelayedJokeSchema,
)
from apps.joke_api.setup.dependencies import get_fetch_jokes_command

router = APIRouter(prefix="/joke", tags=["joke"])


@router.get(
    "/jokes",
    response_model=JokeListResponseSchema,
    summary="Joke 목록 조회",
    description="JokeAPI에서 two-part joke를 가져옵니다. upstream 실패 시 본문 없는 400.",
    responses={400: {"description": "Upstream 실패 (상태 코드, 형식 오류, 빈 결과)"}},
)
async def get_jokes(
    nr_of_jokes: Annotated[
        int,
        Query(alias="nrOfJokes", description="조회할 joke 수 (>= 1)"),
    ] = DEFAULT_JOKE_COUNT,
    command: FetchJokesCommand = Depends(get_fetch_jokes_command),
) -> JokeListResponseSchema:
    """Joke 목록 조회.

    - **nrOfJokes**: 조회할 joke 수 (기본: 6)
    """
    params = JokeRequestParams(count=nr_of_jokes)

    jokes = await command.execute(params)

    return JokeListResponseSchema(
        error=False,
        amount=len(jokes),
        jokes=[
            RelayedJokeSchema(
                category=j.category,
                setup=j.setup,
                delivery=j.delivery,
            )
            for j in jokes
        ],
    )
