"""Federation Router."""

from fastapi import APIRouter

from apps.federation.presentation.http.controllers.federation.sign_in import (
    router as sign_in_router,
)

router = APIRouter()

router.include_router(sign_in_router)
