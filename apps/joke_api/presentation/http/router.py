"""HTTP Router.

FastAPI 라우터 설정.
"""

from fastapi import APIRouter

from apps.joke_api.presentation.http.controllers.joke_controller import (
    router as joke_router,
)

router = APIRouter(prefix="/api/v1")

# Joke 라우터 등록
router.include_router(joke_router)
