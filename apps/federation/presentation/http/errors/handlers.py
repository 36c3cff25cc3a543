"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
모든 에러 본문은 ``{"error": <message>}`` 형태입니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.federation.application.federation.exceptions import FederationError
from apps.federation.presentation.http.errors.translators import translate_federation_error

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(FederationError)
    async def federation_error_handler(request: Request, exc: FederationError):
        status_code, content = translate_federation_error(exc)
        return JSONResponse(status_code=status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request"},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error: {type(exc).__name__}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Server Error"},
        )
