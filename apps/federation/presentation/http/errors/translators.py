"""Error Translators.

페더레이션 예외를 HTTP 상태 코드와 응답 본문으로 변환합니다.
"""

from typing import Any

from apps.federation.application.federation.exceptions import (
    FederationError,
    InputError,
    ProviderAuthError,
    ProviderUnavailableError,
)


def translate_federation_error(exc: FederationError) -> tuple[int, dict[str, Any]]:
    """페더레이션 예외를 (status_code, body) 튜플로 변환.

    Returns:
        (HTTP 상태 코드, JSON 본문)
    """
    if isinstance(exc, InputError):
        return 400, {"error": exc.message}
    if isinstance(exc, ProviderAuthError):
        return 401, {"error": exc.message, "detail": exc.detail}
    if isinstance(exc, ProviderUnavailableError) and exc.detail is not None:
        return 500, {"error": exc.message, "detail": exc.detail}
    return 500, {"error": exc.message}
