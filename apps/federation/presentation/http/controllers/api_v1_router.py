"""API v1 Router."""

from fastapi import APIRouter

from apps.federation.presentation.http.controllers.federation.router import (
    router as federation_router,
)
from apps.federation.presentation.http.controllers.general.health import (
    router as health_router,
)

router = APIRouter()

# Federation endpoints
router.include_router(federation_router, prefix="/auth", tags=["federation"])

# General endpoints (ping)
router.include_router(health_router)
