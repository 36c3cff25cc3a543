"""Health controller - API v1 liveness endpoint.

루트 ``/health`` 는 main.create_app 에서 등록합니다.
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/ping")
async def ping() -> str:
    """Ping 엔드포인트."""
    return "pong"
