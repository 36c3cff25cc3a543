"""Root Router.

최상위 라우터로, 모든 하위 라우터를 통합합니다.
"""

from fastapi import APIRouter

from apps.federation.presentation.http.controllers.api_v1_router import (
    router as api_v1_router,
)
from apps.federation.presentation.http.controllers.federation.legacy import (
    router as legacy_router,
)

router = APIRouter()

# API v1
router.include_router(api_v1_router, prefix="/api/v1")

# 레거시 경로 (/api/kakaoSignIn, /api/naverAuth)
router.include_router(legacy_router, prefix="/api", tags=["federation-legacy"])
