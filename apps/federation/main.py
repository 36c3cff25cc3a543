"""Federation API Application Entry Point.

외부 프로바이더(Kakao, Naver) 액세스 토큰을 내부 식별자와
커스텀 토큰으로 교환하는 페더레이션 서비스입니다.

분산 트레이싱 통합 (선택):
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (사용자 정보 API 호출)
- Redis 자동 계측 (프로필 upsert)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.federation.infrastructure.oauth import ProviderRegistry
from apps.federation.infrastructure.persistence_redis import build_async_client
from apps.federation.presentation.http.controllers import root_router
from apps.federation.presentation.http.errors import register_exception_handlers
from apps.federation.setup.config import get_settings
from apps.federation.setup.logging import setup_logging
from apps.federation.setup.tracing import (
    configure_tracing,
    instrument_app,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    settings = get_settings()

    # Startup
    logger.info("Starting Federation API")
    app.state.provider_registry = ProviderRegistry.from_settings(settings)
    app.state.profile_redis = build_async_client(settings.redis_profile_url)
    if not settings.custom_token_signing_key:
        logger.warning(
            "Custom token signing key is not configured; sign-in requests will fail",
            extra={"algorithm": settings.custom_token_algorithm},
        )

    yield

    # Shutdown
    logger.info("Shutting down Federation API")
    await app.state.profile_redis.aclose()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    # 로깅 설정
    setup_logging(settings)

    # OpenTelemetry 분산 트레이싱 설정
    configure_tracing(settings)

    app = FastAPI(
        title=settings.app_name,
        description="외부 ID 프로바이더 페더레이션 서비스",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    instrument_app(app)

    # 라우터 등록
    app.include_router(root_router)

    # Health check (루트)
    @app.get("/health", tags=["health"])
    async def root_health():
        return {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.service_version,
        }

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.federation.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
